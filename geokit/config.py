"""Application configuration via Pydantic Settings.

NOTE: Environment names are mapped explicitly (GOOGLE_MAPS_API_KEY,
GEOCODER_PROVIDERS, etc.) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Provider chain, tried left to right
    geocoder_providers: str = Field(
        default="google,us,nominatim",
        validation_alias="GEOCODER_PROVIDERS",
    )

    # Provider credentials
    google_maps_api_key: str = Field(default="", validation_alias="GOOGLE_MAPS_API_KEY")
    geocoder_us_credentials: str = Field(default="", validation_alias="GEOCODER_US_CREDENTIALS")

    # Transport
    geocoder_user_agent: str = Field(
        default="geokit-geocoder",
        validation_alias="GEOCODER_USER_AGENT",
    )
    geocoder_timeout: float = Field(default=10.0, validation_alias="GEOCODER_TIMEOUT")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def provider_order(self) -> list[str]:
        return [name.strip().lower() for name in self.geocoder_providers.split(",") if name.strip()]


settings = Settings()
