# main.py
import routes
from contextlib import asynccontextmanager
from util.enums import Environment, Color, ErrorMessage
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.middleware.cors import CORSMiddleware
from config.settings import Settings, settings
from fastapi.responses import JSONResponse
from util.logger import init_logger
import logging

logger = logging.getLogger(__name__)


def create_app(config: Settings = settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(fastApi: FastAPI):
        init_logger(config)
        print(f"{Color.GREEN}Initializing...{Color.RESET}")
        print(
            f"{Color.BLUE}Server Started{Color.RESET} "
            f"on {config.HOST}:{config.PORT}"
        )
        try:
            yield
        finally:
            print(f"{Color.RED}Server Shutdown{Color.RESET}")

    app = FastAPI(lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.ALLOWED_ORIGIN],
        allow_methods=["POST"],
        allow_headers=["Content-Type", "Accept"],
    )

    @app.exception_handler(RequestValidationError)
    async def bad_request_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "request.invalid path=%s errors=%d", request.url.path, len(exc.errors())
        )
        return JSONResponse(
            status_code=ErrorMessage.BAD_REQUEST.value.http_status,
            content={
                "ok": False,
                "error": "bad_request",
                "message": ErrorMessage.BAD_REQUEST.value.message,
            },
        )

    routes.register_routes(app)
    return app


app: FastAPI = create_app()

if __name__ == "__main__":
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=reload)
