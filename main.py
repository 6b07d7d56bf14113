import uvicorn

from plagscan.config import settings
from plagscan.logging_config import setup_logging

if __name__ == "__main__":
    logger = setup_logging()
    logger.info("Starting plagscan on http://%s:%d", settings.host, settings.port)
    uvicorn.run("plagscan.main:app", host=settings.host, port=settings.port)
