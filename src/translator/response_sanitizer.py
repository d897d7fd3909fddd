"""模型输出清理."""

import re
from typing import List

# 推理模型的思考过程，可能跨越多行
_THINK_PATTERN = re.compile(r"<think>.*?</think>", re.DOTALL)


def sanitize_reply(reply: str) -> List[str]:
    """
    清理模型原始输出.

    去除所有 <think>...</think> 片段，按行拆分并去掉首尾空白，丢弃空行。

    Args:
        reply: 模型返回的原始文本

    Returns:
        按原顺序排列的非空结果行
    """
    cleaned = _THINK_PATTERN.sub("", reply)
    lines = (line.strip() for line in cleaned.split("\n"))
    return [line for line in lines if line]
