"""翻译服务异常定义."""

from typing import Any, Dict


class TranslatorError(Exception):
    """所有翻译服务异常的基类."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class InvalidRequestError(TranslatorError):
    """请求参数不合法，协商尚未开始."""

    def __init__(self, message: str = "destination 数组为空") -> None:
        super().__init__(message, status_code=400)


class TransportError(TranslatorError):
    """推理后端不可达或连接中断."""

    def __init__(self, message: str = "无法连接到推理服务") -> None:
        super().__init__(message, status_code=502)


class MalformedReplyError(TranslatorError):
    """推理后端返回的内容无法解析."""

    def __init__(self, message: str = "推理服务返回格式错误") -> None:
        super().__init__(message, status_code=502)
