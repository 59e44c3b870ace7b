from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


# --- Canonical (persisted) record ---

class RecipeRecord(BaseModel):
    id: str
    name: str
    base: List[str] = []
    profile: List[str] = []
    sweetness: str = "balanced"
    ingredients: List[Tuple[str, str]] = []
    method: str = ""
    glass: str = ""
    garnish: str = ""
    tags: List[str] = []

    def to_document(self) -> dict:
        """JSON-ready dict; ingredient pairs become two-element arrays."""
        return self.model_dump(mode="json")


# --- Request / response payloads ---

class PublishRequest(BaseModel):
    """Loosely typed on purpose: shape coercion happens in the normalizer."""
    model_config = ConfigDict(extra="ignore")

    password: Optional[Any] = None
    recipe: Optional[Any] = None
    recipes: Optional[Any] = None


class PublishBatchResponse(BaseModel):
    ok: bool = True
    count: int
    ids: List[str]


class PublishSingleResponse(BaseModel):
    ok: bool = True
    id: str


class ReadyResponse(BaseModel):
    ok: bool = True
    store_configured: bool
