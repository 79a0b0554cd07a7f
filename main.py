import logging

import uvicorn

from thedev.api.main import create_app
from thedev.config import load_config
from thedev.logging_config.logging_config import setup_logging


config = load_config()
setup_logging(log_dir=config.log_dir)
logger = logging.getLogger(__name__)

# Managed hosts import this module and serve `app` themselves
app = create_app(config)


# ruff: noqa: D103
def main() -> None:
    if config.managed_hosting:
        logger.info("Managed hosting detected, not starting a listener")
        return

    logger.info(f"Backend running on http://127.0.0.1:{config.port}")
    uvicorn.run(app, host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
