"""Ollama 推理客户端（OpenAI 兼容接口）."""

import openai
from openai import AsyncOpenAI
from config.settings import Settings, settings as default_settings
from translator.exceptions import MalformedReplyError, TransportError


class OllamaClient:
    """向本地 Ollama 发送单次非流式推理请求."""

    def __init__(
        self,
        base_url: str,
        model: str,
        api_key: str = "ollama",
        timeout: float = 300,
        client=None,
        http_client=None,
    ):
        """
        初始化推理客户端.

        :param base_url: Ollama 的 OpenAI 兼容接口地址，如 http://localhost:11434/v1
        :param model: 模型id
        :param api_key: 占位密钥，Ollama 不做校验
        :param timeout: 请求超时时间（秒）
        :param client: 可选的 AsyncOpenAI 实例，测试时可替换
        :param http_client: 可选的 httpx.AsyncClient，交给 AsyncOpenAI 使用
        """
        self.base_url = base_url
        self.model = model
        # 每次推理只发一次请求，失败不重试
        self.client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )

    @classmethod
    def from_settings(cls, settings: Settings = None) -> "OllamaClient":
        """根据应用配置创建客户端."""
        settings = settings or default_settings
        return cls(
            base_url=settings.ollama_base_url,
            model=settings.ollama_model,
            api_key=settings.ollama_api_key,
            timeout=settings.request_timeout,
        )

    async def infer(self, prompt: str) -> str:
        """
        发送提示词并返回模型的完整回复文本.

        Args:
            prompt: 翻译指令

        Returns:
            模型原始输出，可能包含 <think> 片段

        Raises:
            TransportError: 无法连接推理服务或连接中断
            MalformedReplyError: 推理服务返回的内容不符合预期
        """
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=0,
                stream=False,
            )
        except openai.APIConnectionError as e:
            raise TransportError(f"无法连接到推理服务 {self.base_url}: {e}") from e
        except openai.APIResponseValidationError as e:
            raise MalformedReplyError(f"推理服务返回格式错误: {e}") from e
        except openai.APIStatusError as e:
            raise MalformedReplyError(
                f"推理服务返回错误状态 {e.status_code}: {e.message}"
            ) from e
        except ValueError as e:
            # 响应体声明为 JSON 但无法解析
            raise MalformedReplyError(f"推理服务返回格式错误: {e}") from e

        return self._extract_content(response)

    @staticmethod
    def _extract_content(response) -> str:
        """取出第一个 choice 的消息文本，缺失 content 视为空回复."""
        # 非 JSON 响应时 SDK 直接返回字符串
        choices = getattr(response, "choices", None)
        if not choices or not isinstance(choices, list):
            raise MalformedReplyError("推理服务返回结果中没有 choices")
        message = getattr(choices[0], "message", None)
        if message is None:
            raise MalformedReplyError("推理服务返回结果中没有 message")
        content = getattr(message, "content", None)
        if content is None:
            return ""
        if not isinstance(content, str):
            raise MalformedReplyError("推理服务返回的 content 不是文本")
        return content
