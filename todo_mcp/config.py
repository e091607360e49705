"""Configuration for the Todo MCP server."""
from dataclasses import dataclass
from functools import lru_cache
import os
from dotenv import load_dotenv

# Load environment variables from a local .env file if present
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Server settings read from the environment."""
    environment: str = "development"
    log_level: str = "INFO"
    mcp_server_name: str = "todo-mcp-server"
    backend: str = "echo"


def load_settings() -> Settings:
    """Build settings from environment variables, falling back to defaults."""
    return Settings(
        environment=os.environ.get("ENVIRONMENT", "development"),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        mcp_server_name=os.environ.get("MCP_SERVER_NAME", "todo-mcp-server"),
        backend=os.environ.get("TODO_BACKEND", "echo"),
    )


@lru_cache()
def get_settings() -> Settings:
    """Cached settings for the running process."""
    return load_settings()
