"""Configuration for the WebDriver browser session."""

from typing import Any

from pydantic import BaseModel


class WebDriverConfig(BaseModel):
    """Configuration for WebDriver browser session."""

    url: str = "http://localhost:4444"
    session_id: str
    # Capabilities returned when the session was created; queried when unset
    capabilities: dict[str, Any] | None = None
    log_type: str = "browser"
