"""API数据模型定义."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union


class TranslateRequest(BaseModel):
    """划词翻译请求数据模型."""

    name: Optional[str] = None
    text: str = Field(..., min_length=1)
    destination: Optional[List[str]] = None
    source: Optional[str] = None


class ChatMessage(BaseModel):
    """聊天消息，content 可以是字符串或 OpenAI 风格的内容片段列表."""

    role: Optional[str] = None
    content: Union[str, List[Dict[str, Any]], None] = None

    def text_content(self) -> str:
        """提取消息中的文本内容."""
        if isinstance(self.content, str):
            return self.content
        if not self.content:
            return ""
        return "".join(
            part.get("text", "")
            for part in self.content
            if part.get("type", "text") == "text" and isinstance(part.get("text"), str)
        )


class ChatRequest(BaseModel):
    """GPT 风格的聊天请求数据模型."""

    id: Optional[str] = None
    model: Optional[str] = None
    messages: List[ChatMessage] = []


class ChatCompletionMessage(BaseModel):
    role: str = "assistant"
    content: str


class ChatCompletionChoice(BaseModel):
    message: ChatCompletionMessage
    finish_reason: str = "stop"
    index: int = 0


class ChatCompletionResponse(BaseModel):
    """GPT 风格的聊天响应数据模型."""

    id: Optional[str] = None
    object: str = "chat.completion"
    created: int  # 毫秒时间戳
    model: str
    choices: List[ChatCompletionChoice]
