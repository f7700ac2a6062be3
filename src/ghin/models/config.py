"""Client configuration schema."""

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt

from ghin.cache.base import CacheClient

DEFAULT_BASE_URL = "https://api2.ghin.com/api/v1/"


class ClientConfig(BaseModel):
    """Connection and authentication settings for GhinClient."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1, repr=False)
    base_url: str = Field(DEFAULT_BASE_URL, pattern=r"^https?://")
    connect_timeout: PositiveFloat = 7
    read_timeout: PositiveFloat = 20
    token_ttl: PositiveInt = 12 * 60 * 60
    cache: CacheClient | None = None
