"""Client configuration passed to every API call."""

from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "(noaa_weather_client, com.github.noaa_weather_client)"


class ApiKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    prefix: Optional[str] = None

    @property
    def header_value(self) -> str:
        if self.prefix is not None:
            return f"{self.prefix} {self.key}"
        return self.key


class Configuration(BaseModel):
    """Connection settings for api.weather.gov.

    Build one and pass it to each service function; several can live side
    by side (e.g. one per test pointing at a mock transport). The
    ``httpx.AsyncClient`` is shared by every call made with this
    configuration, so close it when done::

        config = Configuration(user_agent="(myapp, me@example.com)")
        try:
            alerts = await get_active_alerts(config, area=["CO"])
        finally:
            await config.client.aclose()
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_url: str = Field(DEFAULT_BASE_URL, description="API root, without trailing slash")
    # api.weather.gov redirects over-precise points and moved endpoints with 301s.
    client: httpx.AsyncClient = Field(default_factory=lambda: httpx.AsyncClient(follow_redirects=True))
    api_key: Optional[ApiKey] = None
    # NWS asks every caller to identify itself; None sends httpx's default.
    user_agent: Optional[str] = DEFAULT_USER_AGENT
