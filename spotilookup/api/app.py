"""FastAPI app, error translation, and route registration."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from spotilookup.config import LOG_LEVEL

# Configure logging in the worker process (uvicorn only sets up its own loggers)
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(levelname)s: %(name)s: %(message)s",
)

from spotilookup.api.routes import health, spotify
from spotilookup.errors import SpotifyLookupError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="spotilookup",
    description="Simplified track, artist and album lookups backed by the Spotify Web API",
)


@app.exception_handler(SpotifyLookupError)
async def lookup_error_handler(request: Request, exc: SpotifyLookupError) -> PlainTextResponse:
    """Errors are reported as plain text with the status the error class carries."""
    level = logging.WARNING if exc.status_code < 500 else logging.ERROR
    logger.log(level, "%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc)
    return PlainTextResponse(str(exc), status_code=exc.status_code)


app.include_router(health.router, tags=["health"])
app.include_router(spotify.router, prefix="/spotify", tags=["spotify"])
