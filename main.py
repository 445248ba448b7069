"""
Promoter Panel - Main Entry Point
Serves the promoter dashboard API over the campaign document store
"""
import logging
import sys

import uvicorn

import config

logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO), format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def main():
    errors = config.validate_config()
    if errors:
        for e in errors:
            logger.critical(f"Config error: {e}")
        sys.exit(1)

    logger.info(f"🚀 Starting Promoter Panel on {config.PANEL_HOST}:{config.PANEL_PORT} (tz={config.TIMEZONE.zone})")
    uvicorn.run("admin_panel.app:app", host=config.PANEL_HOST, port=config.PANEL_PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
