"""Application entrypoint: FastAPI app, error -> response mapping, and logging setup."""

import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.routes import router
from src.core.config import settings
from src.core.exceptions import GameCompleteError, GameError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="bowling-api", version="0.1.0")
app.include_router(router)


@app.exception_handler(RequestValidationError)
async def _malformed_request(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Anything that does not parse as the expected body is a plain bad request
    logger.warning("Malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request body"},
    )


@app.exception_handler(GameCompleteError)
async def _game_complete(request: Request, exc: GameCompleteError) -> JSONResponse:
    logger.warning("Rejected request to %s: %s", request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


@app.exception_handler(GameError)
async def _game_error(request: Request, exc: GameError) -> JSONResponse:
    logger.error("Request to %s failed: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)}
    )


def run() -> None:
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=logging.getLevelName(settings.LOG_LEVEL),
    )


if __name__ == "__main__":
    run()
