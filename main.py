"""Ollama Translator API 主入口."""

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from api.routes import router
from config.settings import settings
from config.logging_config import setup_logging, get_logger
from translator.exceptions import TranslatorError

setup_logging()
logger = get_logger(__name__)

# 创建FastAPI应用实例
app = FastAPI(
    title="Ollama Translator API",
    description="将划词翻译与 GPT 风格请求转发到本地 Ollama 模型的翻译服务",
    version="1.0.0",
)

# 添加CORS中间件
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """记录每个请求的方法和路径"""
    logger.info(f"{request.method} {request.url.path}")
    return await call_next(request)


@app.exception_handler(TranslatorError)
async def translator_error_handler(request: Request, exc: TranslatorError):
    """将翻译服务异常转换为 {"error": message} 响应"""
    logger.error(f"{request.method} {request.url.path} 失败: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """请求体无法解析时返回 400"""
    message = "; ".join(
        f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.error(f"{request.method} {request.url.path} 请求体错误: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.get("/")
async def root():
    """根路径，返回API信息"""
    return {
        "message": "Ollama Translator API",
        "version": "1.0.0",
        "model": settings.ollama_model,
        "link": settings.ollama_link,
        "docs": "/docs",
    }


# 包含路由
app.include_router(router)


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.server_host, port=settings.server_port)
