"""翻译提示词构造."""

from typing import Optional

AUTO_SOURCE = "auto"


def build_prompt(text: str, source_lang: Optional[str], target_lang: str) -> str:
    """构造发送给模型的翻译指令."""
    if source_lang and source_lang != AUTO_SOURCE:
        return f"Translate the following text from {source_lang} to {target_lang}:\n\n{text}"
    return f"Translate the following text to {target_lang}:\n\n{text}"
