from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from calendar_relay.app.config import get_settings
from calendar_relay.app.dependencies import get_tenant_registry
from calendar_relay.app.routes import router
from calendar_relay.utils.logging import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)

# Snapshot tenant credentials before the first request is served.
registry = get_tenant_registry()
logger.info("Configured clients: %s", ", ".join(registry.tenant_keys()) or "none")

app = FastAPI(title=settings.app_name, debug=settings.debug)
app.include_router(router)


def run() -> None:
    logger.info("Multi-client calendar relay on :%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
