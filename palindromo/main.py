import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, log_path_from_env
from .consultas import FileQueryLog, QueryLog
from .models import QueryResult
from .normalize import is_palindrome
from .pages import form_page, not_found_page
from .rules import APP_NAME, INTERNAL_ERROR, METHOD_NOT_ALLOWED, MISSING_WORD

logger = logging.getLogger(APP_NAME)


def create_app(
    settings: Optional[Settings] = None,
    query_log: Optional[QueryLog] = None,
) -> FastAPI:
    """Build the router. The port is not needed here, only the log target."""
    if query_log is None:
        log_path = settings.log_path if settings else log_path_from_env()
        query_log = FileQueryLog(log_path)

    app = FastAPI(
        title="palindromo",
        description="Tells whether a word or phrase is a palindrome",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        # /comprobar/ is a different path, not a redirect
        redirect_slashes=False,
    )
    app.state.query_log = query_log

    @app.middleware("http")
    async def guard(request: Request, call_next):
        # Only GET is served, on every path
        if request.method != "GET":
            return PlainTextResponse(METHOD_NOT_ALLOWED, status_code=405)
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s", request.url.path)
            return PlainTextResponse(INTERNAL_ERROR, status_code=500)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return HTMLResponse(not_found_page(), status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.get("/", response_class=HTMLResponse)
    def index():
        return form_page()

    @app.get("/comprobar", response_class=PlainTextResponse)
    def comprobar(request: Request, palabra: Optional[str] = None):
        word = (palabra or "").strip()
        if not word:
            raise HTTPException(status_code=400, detail=MISSING_WORD)

        result = QueryResult(word=word, is_palindrome=is_palindrome(word))

        try:
            request.app.state.query_log.append(result.word, result.is_palindrome)
        except OSError as err:
            # Do not fail the request because of logging
            logger.error("Could not record query %r: %s", result.word, err)

        return result.message()

    return app


app = create_app()


def run() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info("Servidor de palíndromos en http://localhost:%d", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
