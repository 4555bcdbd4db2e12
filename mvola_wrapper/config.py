"""Application configuration via environment variables."""

from typing import Optional

from pydantic_settings import BaseSettings

from mvola_wrapper.models.enums import ProviderMode


class Settings(BaseSettings):
    base_url: str = "https://devapi.mvola.mg"
    token_endpoint: str = "/token"
    merchant_pay_endpoint: str = "/mvola/mm/transactions/type/merchantpay/1.0.0/"

    # Missing credentials resolve to "" and surface later as an auth failure
    consumer_key: str = ""
    consumer_secret: str = ""

    token_scope: str = "EXT_INT_MVOLA_SCOPE"
    api_version: str = "1.0"
    user_language: str = "mg"
    partner_name: str = "Test Partner"
    callback_url: str = ""

    # Blank requestDate and the two transaction references before sending
    clear_correlation_fields: bool = True

    timeout_seconds: Optional[float] = None  # None keeps the httpx default
    provider_mode: ProviderMode = ProviderMode.MVOLA
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "MVOLA_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "frozen": True,
    }

    @property
    def has_credentials(self) -> bool:
        return bool(self.consumer_key and self.consumer_secret)

    @property
    def token_url(self) -> str:
        return f"{self.base_url}{self.token_endpoint}"

    @property
    def merchant_pay_url(self) -> str:
        return f"{self.base_url}{self.merchant_pay_endpoint}"


settings = Settings()
