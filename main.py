import logging

from dotenv import load_dotenv

load_dotenv()

from userposts.config import LOG_LEVEL, PORT  # noqa: E402
from userposts.main import app  # noqa: E402

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting userposts API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
