"""
FastAPI main application
"""
import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from mail_agent.config import get_settings
from mail_agent.api import routes
from mail_agent.utils.logger import setup_logging, get_logger

DEFAULT_PORT = 8080

settings = get_settings()
setup_logging(environment=settings.environment, log_dir=settings.log_dir, app_name="mail_agent")
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Refuse to serve without the required configuration
    """
    logger.info("🚀 Mail Agent API starting...")

    current = get_settings()
    missing = current.missing_required()
    if missing:
        for name in missing:
            logger.error(f"❌ Missing required environment variable: {name}")
        raise RuntimeError(f"Missing required configuration: {', '.join(missing)}")

    logger.info(f"🤖 LLM: api={current.llm_api}, model={current.llm_model}")
    logger.info(f"📧 SMTP: {current.smtp_host}:{current.smtp_port} as {current.email_user}")
    logger.info("🎉 Server startup complete!")
    yield


app = FastAPI(
    title="Mail Agent",
    description="Writes an email from a free-text prompt with an LLM and sends it",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(routes.router)

# static files last so the API routes (GET / included) take precedence
if os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """A send-email body that is missing, not JSON, or has a non-string prompt is a missing prompt"""
    if request.url.path == "/agent/send-email":
        logger.warning(f"Invalid send-email payload: {exc.errors()}")
        return routes.prompt_required_response()
    return await request_validation_exception_handler(request, exc)


def serve() -> None:
    """Console entry point: check configuration, then run uvicorn"""
    import uvicorn

    missing = settings.missing_required()
    if missing:
        for name in missing:
            logger.error(f"❌ Missing required environment variable: {name}")
        sys.exit(1)

    port = settings.port or DEFAULT_PORT
    logger.info(f"🚀 Mail Agent running on port {port}")
    uvicorn.run(
        "mail_agent.main:app",
        host=settings.host,
        port=port,
        reload=settings.debug
    )


if __name__ == "__main__":
    serve()
