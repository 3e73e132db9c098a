"""
Configuration management for the marketdesk API server.
"""

import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from dotenv import load_dotenv

BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent

load_dotenv(BASE_DIR / ".env")

# settings.json field -> environment variable
CREDENTIAL_ENV = {
    "finnhubKey": "FINNHUB_KEY",
    "newsApiKey": "NEWSAPI_KEY",
    "tradingEconomicsUser": "TRADINGECONOMICS_USER",
    "tradingEconomicsKey": "TRADINGECONOMICS_KEY",
    "fxFactoryRss": "FXFACTORY_RSS",
}


class ServerConfig:
    """API server configuration, read from the environment on construction."""

    API_TITLE: str = "marketdesk API"
    API_DESCRIPTION: str = "Quotes, headlines, economic calendar and sentiment with mock fallbacks"
    API_VERSION: str = "1.0.0"

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        env = os.environ if env is None else env

        # Paths
        self.SETTINGS_FILE: Path = Path(env.get("MARKETDESK_SETTINGS_FILE", str(BASE_DIR / "settings.json")))
        self.STATIC_DIR: Path = Path(env.get("MARKETDESK_STATIC_DIR", str(Path(__file__).resolve().parent.parent / "static")))

        # Server
        self.HOST: str = env.get("HOST", "0.0.0.0")
        self.PORT: int = int(env.get("PORT", "3000"))
        self.PORT_RETRIES: int = 10
        self.LOG_LEVEL: str = env.get("LOG_LEVEL", "info").lower()

        # Outbound HTTP
        self.REQUEST_TIMEOUT: float = float(env.get("REQUEST_TIMEOUT", "30"))

        # CORS
        self.CORS_ORIGINS: List[str] = [
            o.strip() for o in env.get("CORS_ORIGINS", "*").split(",") if o.strip()
        ]

        # Provider credentials (settings.json values take precedence)
        self.credentials_env: Dict[str, str] = {
            field: env.get(var, "") for field, var in CREDENTIAL_ENV.items()
        }

    def credentials(self, settings: Optional[Mapping] = None) -> Dict[str, str]:
        """
        Resolve provider credentials.

        A non-empty value in the settings document wins over the
        environment variable for the same field.
        """
        settings = settings or {}
        resolved = {}
        for field, env_value in self.credentials_env.items():
            value = settings.get(field)
            resolved[field] = value if isinstance(value, str) and value.strip() else env_value
        return resolved


config = ServerConfig()
