# src/weather_relay/main.py
import logging

import uvicorn

from weather_relay.core.settings import Settings
from weather_relay.server import create_app

logger = logging.getLogger("weather_relay")


def run() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # httpx logs full request URLs at INFO, appid included
    logging.getLogger("httpx").setLevel(logging.WARNING)
    app = create_app(settings)
    logger.info("Backend server listening on port %s", settings.port)
    logger.info("Access backend via: http://localhost:%s/api/weather?city=London (for local testing)", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
