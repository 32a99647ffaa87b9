# link-shortener/main.py
import json
import logging
from contextlib import asynccontextmanager

import uvicorn
from config import Settings, get_settings
from database import LinkStore, get_link_store
from exceptions import LinkNotFoundError
from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from logging_config import setup_logging
from models import Link, ShortenRequest, ShortenResponse
from page import INDEX_HTML
from pydantic import ValidationError
from shortener import generate_short_url
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(
        "Server running on %s:%s (token length %s)",
        settings.host,
        settings.port,
        settings.token_length,
    )
    yield
    logger.info("Server stopped.")


app = FastAPI(
    title="Link Shortener",
    description="Shortens URLs and redirects short links to their originals.",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    """
    Any body that does not parse as {"url": <string>} is a client error.
    """
    logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
    return PlainTextResponse(
        "Invalid request body", status_code=status.HTTP_400_BAD_REQUEST
    )


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_error_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


@app.get("/", response_class=HTMLResponse, tags=["Page"])
async def index():
    """
    Serves the submission page.
    """
    return HTMLResponse(content=INDEX_HTML)


@app.post("/shorten", response_model=ShortenResponse, tags=["Shorten"])
async def shorten_url(
    request: Request,
    store: LinkStore = Depends(get_link_store),
    settings: Settings = Depends(get_settings),
):
    """
    Stores the URL under its derived token and returns the token.
    Resubmitting a URL rewrites the same record.

    The body is read as JSON whatever its Content-Type, so plain
    `curl -d` and text/plain clients work too.
    """
    body = await request.body()
    try:
        payload = ShortenRequest.model_validate(
            json.loads(body.decode("utf-8", "replace"))
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors())
    except ValueError as e:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": str(e)}]
        )

    token = generate_short_url(payload.url, settings.token_length)
    store.put(token, Link(id=token, original_url=payload.url, short_url=token))
    logger.info("Shortened URL to token %s", token, extra={"token": token})
    return ShortenResponse(short_url=token)


@app.get("/r/{token:path}", tags=["Redirect"])
async def redirect_to_original_url(
    token: str,
    store: LinkStore = Depends(get_link_store),
):
    """
    Redirects to the original URL stored under the token.
    """
    try:
        link = store.get(token)
    except LinkNotFoundError:
        logger.info("No link for token %r", token, extra={"token": token})
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="URL not found"
        )

    logger.debug("Redirecting token %s to %s", token, link.original_url)
    return RedirectResponse(url=link.original_url, status_code=status.HTTP_302_FOUND)


def main():
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
