#!/usr/bin/env python3
"""
Answer Grader Application Runner
Minimal startup script for the Flask Answer Grader service.
"""

import sys

from answer_grader.config import ConfigManager
from answer_grader.exceptions import ConfigurationError
from answer_grader.utils.logger import logger
from webapp import create_app


def main() -> int:
    try:
        config = ConfigManager().config
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e.message}")
        return 1

    app = create_app("production" if not config.debug else "development", config=config)
    logger.info(f"Server running on http://{config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=config.debug)
    return 0


if __name__ == "__main__":
    sys.exit(main())
