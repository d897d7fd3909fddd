"""候选目标语种协商 - 依次尝试目标语种直到得到有效译文."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
from translator.exceptions import InvalidRequestError
from translator.language_detector import detect_language
from translator.prompt_builder import build_prompt
from translator.response_sanitizer import sanitize_reply


@dataclass
class TranslationRequest:
    """翻译请求."""

    text: str
    destination: Sequence[str]
    source: Optional[str] = None


@dataclass
class TranslationResult:
    """翻译结果."""

    text: str
    source: str = ""
    target: str = ""
    link: str = ""
    result: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """转换为划词翻译要求的 JSON 格式."""
        return {
            "text": self.text,
            "from": self.source,
            "to": self.target,
            "link": self.link,
            "result": list(self.result),
        }


class CandidateNegotiator:
    """
    候选语种协商器.

    按 destination 顺序逐个尝试：跳过与源语种相同的候选，
    对其余候选调用模型并清理输出，接受第一个非空且与原文不同的译文。
    全部候选无效时返回原文。
    """

    def __init__(self, model_client, link: str = ""):
        """
        :param model_client: 提供 async infer(prompt) -> str 的推理客户端
        :param link: 成功时返回的推理服务标识
        """
        self.model_client = model_client
        self.link = link

    async def negotiate(self, request: TranslationRequest) -> TranslationResult:
        """
        执行协商.

        Args:
            request: 翻译请求

        Returns:
            翻译结果；没有候选成功时 target 为空，result 为原文

        Raises:
            InvalidRequestError: destination 为空
            TransportError: 推理服务不可达，不会回退到后续候选
            MalformedReplyError: 推理服务返回格式错误，不会回退到后续候选
        """
        if not request.destination:
            raise InvalidRequestError()

        text = request.text
        source = request.source or ""
        remaining = tuple(request.destination)
        while remaining:
            candidate, remaining = remaining[0], remaining[1:]
            if self._is_source_language(text, source, candidate):
                continue

            prompt = build_prompt(text, source, candidate)
            reply = await self.model_client.infer(prompt)
            lines = sanitize_reply(reply)
            if self._is_acceptable(lines, text):
                return TranslationResult(
                    text=text,
                    source=source,
                    target=candidate,
                    link=self.link,
                    result=lines,
                )

        return TranslationResult(text=text, source=source, result=[text])

    @staticmethod
    def _is_source_language(text: str, source: str, candidate: str) -> bool:
        """候选与声明的源语种相同，或未声明源语种时与检测结果相同."""
        if source:
            return source == candidate
        return detect_language(text) == candidate

    @staticmethod
    def _is_acceptable(lines: List[str], text: str) -> bool:
        """译文非空且不等于去除首尾空白后的原文."""
        joined = "".join(lines)
        return joined != "" and joined != text.strip()
