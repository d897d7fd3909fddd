"""基于字符范围的简单语种检测."""

import re

JAPANESE = "日语"
CHINESE_SIMPLIFIED = "中文(简体)"
ENGLISH = "英语"

# 平假名与片假名
_KANA_PATTERN = re.compile(r"[\u3040-\u30ff]")
# CJK 统一表意文字
_CJK_PATTERN = re.compile(r"[\u4e00-\u9fff]")


def detect_language(text: str) -> str:
    """
    检测文本语种.

    含假名视为日语，含汉字视为简体中文，其余（包括空字符串）视为英语。
    这只是启发式判断，只会返回三种结果。

    Args:
        text: 待检测的文本

    Returns:
        语种名称
    """
    if _KANA_PATTERN.search(text):
        return JAPANESE
    if _CJK_PATTERN.search(text):
        return CHINESE_SIMPLIFIED
    return ENGLISH
