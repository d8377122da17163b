from typing import Dict, Optional, Mapping
from pydantic import BaseModel
import os


DEFAULT_BASE_URL = "http://127.0.0.1:12345/dolphinscheduler"


class TransportSettings(BaseModel):
    """Connection settings for the shared transport"""
    base_url: str = DEFAULT_BASE_URL
    token: Optional[str] = None
    session_id: Optional[str] = None
    language: str = "en_US"
    timeout: float = 15.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TransportSettings":
        """Build settings from ``DOLPHINSCHEDULER_*`` variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        values = {
            "base_url": env.get("DOLPHINSCHEDULER_BASE_URL"),
            "token": env.get("DOLPHINSCHEDULER_TOKEN"),
            "session_id": env.get("DOLPHINSCHEDULER_SESSION_ID"),
            "language": env.get("DOLPHINSCHEDULER_LANGUAGE"),
            "timeout": env.get("DOLPHINSCHEDULER_TIMEOUT"),
        }
        return cls(**{key: value for key, value in values.items() if value})

    def headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "language": self.language,
        }
        if self.token:
            headers["token"] = self.token
        if self.session_id:
            headers["sessionId"] = self.session_id
        return headers
