"""Ollama Translator API 路由."""

import time
from functools import lru_cache
from fastapi import APIRouter, Depends, Response

from models.models import (
    ChatCompletionChoice,
    ChatCompletionMessage,
    ChatCompletionResponse,
    ChatRequest,
    TranslateRequest,
)
from translator.candidate_negotiator import CandidateNegotiator, TranslationRequest
from translator.exceptions import InvalidRequestError
from translator.ollama_client import OllamaClient
from config.settings import settings
from config.logging_config import get_logger

logger = get_logger(__name__)

# 创建路由实例
router = APIRouter()


@lru_cache()
def get_negotiator() -> CandidateNegotiator:
    """创建全局共享的协商器，推理客户端只初始化一次."""
    return CandidateNegotiator(
        OllamaClient.from_settings(settings), link=settings.ollama_link
    )


@router.post("/api/chat", response_model=ChatCompletionResponse)
async def chat(
    request: ChatRequest, negotiator: CandidateNegotiator = Depends(get_negotiator)
):
    """
    处理 GPT 风格的聊天请求，将第一条文本消息翻译为配置的目标语种

    Returns:
        GPT 风格的 chat.completion 响应，译文各行以换行符连接后作为助手消息
    """
    logger.info(f"Request Body: {request.model_dump_json()}")
    text = next(
        (
            message.text_content()
            for message in request.messages
            if message.text_content().strip()
        ),
        None,
    )
    if text is None:
        raise InvalidRequestError("messages 中没有可翻译的文本内容")

    result = await negotiator.negotiate(
        TranslationRequest(text=text, destination=[settings.chat_destination])
    )
    return ChatCompletionResponse(
        id=request.id,
        created=int(time.time() * 1000),
        model=settings.ollama_model,
        choices=[
            ChatCompletionChoice(
                message=ChatCompletionMessage(content="\n".join(result.result))
            )
        ],
    )


@router.post("/{path:path}")
async def translate(
    path: str,
    request: TranslateRequest,
    negotiator: CandidateNegotiator = Depends(get_negotiator),
):
    """
    划词翻译接口，任意路径均可，只处理 name 与配置一致的请求

    Args:
        request: 包含 name、text、destination（首选在前）和可选 source 的请求体

    Returns:
        {"text", "from", "to", "link", "result"}；所有候选均无效时 to 为空，result 为原文
    """
    logger.info(f"Request Body: {request.model_dump_json()}")
    if request.name != settings.service_name:
        logger.warning(f"未知的服务名称 {request.name!r}，路径: /{path}")
        return Response(status_code=404)

    result = await negotiator.negotiate(
        TranslationRequest(
            text=request.text,
            destination=request.destination or [],
            source=request.source,
        )
    )
    logger.info(f"翻译完成: {result.source or 'auto'} -> {result.target or '(原文)'}")
    return result.to_dict()
