"""应用配置管理模块."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """应用配置类."""

    ollama_hostname: str = Field(default="localhost", env="OLLAMA_HOSTNAME")
    ollama_port: int = Field(default=11434, env="OLLAMA_PORT", ge=1, le=65535)
    ollama_model: str = Field(default="deepseek-r1:14b", env="OLLAMA_MODEL")
    # Ollama 不校验密钥，但 OpenAI 客户端要求非空
    ollama_api_key: str = Field(default="ollama", env="OLLAMA_API_KEY")
    request_timeout: int = Field(default=300, env="REQUEST_TIMEOUT", ge=1, le=3600)
    # 划词翻译请求体中的 name 字段
    service_name: str = Field(default="OLLAMA", env="SERVICE_NAME")
    chat_destination: str = Field(default="中文(简体)", env="CHAT_DESTINATION")
    server_host: str = Field(default="0.0.0.0", env="SERVER_HOST")
    server_port: int = Field(default=8088, env="SERVER_PORT", ge=1, le=65535)
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    @property
    def ollama_base_url(self) -> str:
        """Ollama 的 OpenAI 兼容接口地址."""
        return f"http://{self.ollama_hostname}:{self.ollama_port}/v1"

    @property
    def ollama_link(self) -> str:
        return f"{self.ollama_hostname}:{self.ollama_port}"

    class Config:
        """Pydantic配置."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


settings = Settings()
