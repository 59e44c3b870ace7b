"""FastAPI dependencies for the publish API.

Provides:
- Settings (overridable in tests)
- Content store built from settings
- RecipePublisher wired to both
"""

from fastapi import Depends

from .services.github_store import ContentStore, get_store as build_store
from .services.publisher import RecipePublisher
from .settings import Settings, settings as app_settings


def get_settings() -> Settings:
    return app_settings


def get_store(settings: Settings = Depends(get_settings)) -> ContentStore:
    """Fresh client per request; nothing is shared between requests."""
    return build_store(settings)


def get_publisher(
    settings: Settings = Depends(get_settings),
    store: ContentStore = Depends(get_store),
) -> RecipePublisher:
    return RecipePublisher(settings, store)
