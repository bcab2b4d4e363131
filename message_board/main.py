from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from message_board.api.dependencies import (
    get_message_log,
    get_request_counter,
    resolve_message_text,
)
from message_board.api.pages import render_home, render_messages
from message_board.api.schemas import HealthResponse
from message_board.configuration import AppConfig, load_config
from message_board.services.message_log import MessageLog, StorageError
from message_board.services.request_counter import RequestCounter

logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    config = config or load_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.message_log.ensure_storage()
        logger.info("App listening at http://localhost:%s", config.port)
        logger.info("Data being stored in: %s", config.data_dir)
        yield

    app = FastAPI(
        title="Message Board",
        description="Saves short text messages to a persistent log file and shows them back.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.message_log = MessageLog(config.data_file)
    app.state.request_counter = RequestCounter()

    @app.get("/", response_class=HTMLResponse)
    async def home(counter: RequestCounter = Depends(get_request_counter)) -> HTMLResponse:
        return HTMLResponse(render_home(counter.increment()))

    @app.post("/save")
    async def save_message(
        request: Request,
        message_log: MessageLog = Depends(get_message_log),
    ):
        text = await resolve_message_text(request)
        try:
            message_log.append(text)
        except StorageError as exc:
            logger.error("Failed to save message: %s", exc)
            return PlainTextResponse(f"Error saving message: {exc}", status_code=500)
        return RedirectResponse(url="/", status_code=302)

    @app.get("/messages", response_class=HTMLResponse)
    async def list_messages(message_log: MessageLog = Depends(get_message_log)):
        try:
            messages = message_log.read_all()
        except StorageError as exc:
            logger.error("Failed to read messages: %s", exc)
            return PlainTextResponse(f"Error reading messages: {exc}", status_code=500)
        return HTMLResponse(render_messages(messages))

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        return HealthResponse()

    return app


def main() -> None:
    config = load_config()
    logging.basicConfig(level=config.log_level, format="[%(asctime)s] %(message)s")
    app = create_app(config)
    try:
        uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == "__main__":
    main()
