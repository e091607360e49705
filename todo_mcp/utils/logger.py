"""
Logging setup for the Todo MCP server.

Development runs log plain text lines; production runs log one JSON object
per line so the output can be collected as structured data.
"""

import json
import logging
import sys
from datetime import datetime, timezone


class StructuredFormatter(logging.Formatter):
    """Render log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "service": record.name,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_logging(level: str = "INFO", environment: str = "development") -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level name
        environment: "production" switches to JSON output
    """
    handler = logging.StreamHandler(sys.stdout)
    if environment == "production":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
