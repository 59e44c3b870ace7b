"""Upsert pipeline behind POST /api/save-recipe.

auth -> parse input -> config check -> fetch -> merge -> commit.
Every failure raises a PublishError subclass and ends the request; nothing
is retried here. Re-submitting from the admin page is the retry.
"""

import hmac
import json
import logging
from typing import Any, List, Optional

from ..exceptions import BadInput, Misconfigured, Unauthorized
from ..schemas import PublishRequest, RecipeRecord
from ..settings import Settings
from .github_store import ContentStore
from .merge import MergeResult, upsert_recipes
from .normalize import normalize_batch

logger = logging.getLogger("recipe_publisher.publish")


def check_password(supplied: Any, expected: str) -> bool:
    if not isinstance(supplied, str) or not supplied or not expected:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def decode_collection(content: str) -> List[Any]:
    """Stored JSON array, or [] when the document is corrupt or not an array."""
    try:
        data = json.loads(content)
    except ValueError:
        logger.warning("Stored collection is not valid JSON, starting fresh")
        return []
    if not isinstance(data, list):
        logger.warning(f"Stored collection is a {type(data).__name__}, not a list, starting fresh")
        return []
    return data


def encode_collection(records: List[Any]) -> str:
    return json.dumps(records, indent=2, ensure_ascii=False) + "\n"


def commit_message(candidates: List[RecipeRecord], result: MergeResult) -> str:
    if len(candidates) == 1:
        verb = "Update" if result.updated else "Add"
        return f"{verb} recipe: {candidates[0].name}"
    return (
        f"Update {len(candidates)} recipes "
        f"({len(result.added)} added, {len(result.updated)} updated)"
    )


class RecipePublisher:
    def __init__(self, settings: Settings, store: ContentStore):
        self.settings = settings
        self.store = store

    def _candidates(self, payload: PublishRequest) -> tuple[List[RecipeRecord], bool]:
        """Normalized records plus whether the single-recipe form was used."""
        if payload.recipes is not None:
            raws = payload.recipes if isinstance(payload.recipes, list) else [payload.recipes]
            records = normalize_batch(raws)
            if not records:
                raise BadInput(code="no-recipes")
            return records, False

        if payload.recipe is None:
            raise BadInput(code="no-recipes")
        records = normalize_batch([payload.recipe])
        if not records:
            raise BadInput(code="bad-recipe")
        return records, True

    def publish(self, payload: Optional[PublishRequest]) -> dict:
        payload = payload or PublishRequest()

        if not check_password(payload.password, self.settings.admin_password):
            raise Unauthorized()

        candidates, single = self._candidates(payload)

        if not self.settings.store_configured:
            logger.error("GitHub token, owner or repo is not configured")
            raise Misconfigured()

        path = self.settings.gh_file
        branch = self.settings.gh_branch

        current = self.store.fetch(path, branch)
        collection = decode_collection(current.content) if current else []
        sha = current.sha if current else None

        result = upsert_recipes(collection, candidates)

        self.store.commit(
            path,
            encode_collection(result.records),
            branch,
            commit_message(candidates, result),
            sha=sha,
        )
        logger.info(
            f"Published {result.count} recipe(s) to {path}@{branch}: "
            f"{len(result.added)} added, {len(result.updated)} updated"
        )

        if single:
            return {"ok": True, "id": result.ids[0]}
        return {"ok": True, "count": result.count, "ids": result.ids}
