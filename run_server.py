import logging
import sys

import uvicorn
from dotenv import load_dotenv

from hytale_rss.config import Config
from hytale_rss.server import build_app

# Load HYTALE_RSS_* overrides from a local .env file, if any.
load_dotenv()

logger = logging.getLogger("hytale_rss")


def main() -> None:
    cfg = Config()
    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    app = build_app(cfg)

    logger.info("Server starting on %s:%d", cfg.host, cfg.port)
    # proxy_headers: access log shows the client IP from X-Forwarded-For behind a proxy
    uvicorn.run(
        app,
        host=cfg.host,
        port=cfg.port,
        proxy_headers=True,
        forwarded_allow_ips="*",
        log_level=cfg.log_level.lower(),
    )


if __name__ == "__main__":
    main()
