"""
Environment-driven setup for applications using the client.

The service functions never read the environment; call
``load_configuration()`` once at startup and pass the result around.

Variables (a ``.env`` file is honoured):
    NWS_BASE_URL        API root (default https://api.weather.gov)
    NWS_USER_AGENT      User-Agent to send; set it empty to send none
    NWS_API_KEY         optional API key
    NWS_API_KEY_PREFIX  optional prefix rendered before the key
    NWS_LOG_LEVEL       level for configure_logging (default WARNING)
"""

import logging
import os
from typing import Optional, Union

import httpx
from dotenv import load_dotenv

from noaa_weather.configuration import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, ApiKey, Configuration

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_configuration(
    client: Optional[httpx.AsyncClient] = None,
    env_file: Optional[str] = None,
) -> Configuration:
    """Build a ``Configuration`` from ``NWS_*`` variables.

    Variables already set in the process win over the ``.env`` file.
    """
    load_dotenv(env_file)

    user_agent = os.getenv("NWS_USER_AGENT", DEFAULT_USER_AGENT) or None
    key = os.getenv("NWS_API_KEY")
    api_key = ApiKey(key=key, prefix=os.getenv("NWS_API_KEY_PREFIX") or None) if key else None

    fields = {
        "base_url": os.getenv("NWS_BASE_URL") or DEFAULT_BASE_URL,
        "api_key": api_key,
        "user_agent": user_agent,
    }
    if client is not None:
        fields["client"] = client

    logger.debug("NWS client configured for %s", fields["base_url"])
    return Configuration(**fields)


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """Root logging setup; ``level`` defaults to ``NWS_LOG_LEVEL`` or WARNING."""
    if level is None:
        level = os.getenv("NWS_LOG_LEVEL", "WARNING")
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("httpx").setLevel(logging.WARNING)
