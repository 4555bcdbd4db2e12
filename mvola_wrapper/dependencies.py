"""FastAPI dependencies. Tests replace these through app.dependency_overrides."""

from fastapi import Depends

from mvola_wrapper.config import Settings, settings
from mvola_wrapper.models.enums import ProviderMode
from mvola_wrapper.providers.base import MobileMoneyProvider
from mvola_wrapper.providers.mock_provider import MockMvolaProvider
from mvola_wrapper.providers.mvola import MvolaProvider


def get_settings() -> Settings:
    return settings


def build_provider(config: Settings) -> MobileMoneyProvider:
    if config.provider_mode == ProviderMode.MOCK:
        return MockMvolaProvider()
    return MvolaProvider(config)


def get_provider(config: Settings = Depends(get_settings)) -> MobileMoneyProvider:
    # Built per request so nothing is shared between concurrent requests.
    return build_provider(config)
