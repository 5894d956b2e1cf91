"""Entry point for the Tropo session bridge service."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.links import API_PREFIX
from api.tropo_routes import router as tropo_router
from config.settings import get_settings
from tropo import TropoError

LOGGER = logging.getLogger(__name__)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
# httpx logs full request URLs at INFO, and the session API URL carries the token.
logging.getLogger("httpx").setLevel(logging.WARNING)

app = FastAPI(
    title="Tropo Session Bridge",
    description="Signals running Tropo sessions and starts new outbound sessions.",
)
app.include_router(tropo_router, prefix=API_PREFIX)


@app.exception_handler(TropoError)
async def handle_tropo_error(request: Request, exc: TropoError) -> JSONResponse:
    LOGGER.warning("Tropo operation failed on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
