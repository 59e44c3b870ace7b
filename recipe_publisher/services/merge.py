import logging
from dataclasses import dataclass, field
from typing import Any, List, Sequence

from ..core.slug import collation_key, derive_id, record_name
from ..schemas import RecipeRecord

logger = logging.getLogger("recipe_publisher.merge")


@dataclass
class MergeResult:
    records: List[Any]
    count: int = 0
    ids: List[str] = field(default_factory=list)
    added: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)


def sort_collection(records: List[Any]) -> None:
    """In-place, stable sort by display name. Nameless entries sort as ""."""
    records.sort(key=lambda r: collation_key(record_name(r)))


def upsert_recipes(collection: Sequence[Any], candidates: Sequence[RecipeRecord]) -> MergeResult:
    """
    Insert-or-merge each candidate into a copy of the collection.

    A match is the first stored record whose id (or slug of its name) equals
    the candidate id. Matches are shallow-merged: candidate keys win, any
    other stored keys survive. Since candidates always carry every canonical
    field, unspecified canonical fields are reset to their defaults.
    """
    records = list(collection)
    result = MergeResult(records=records)
    preexisting = {derive_id(r) for r in records if isinstance(r, dict)}

    for candidate in candidates:
        doc = candidate.to_document()
        rid = candidate.id

        idx = next((i for i, r in enumerate(records) if isinstance(r, dict) and derive_id(r) == rid), -1)
        if idx >= 0:
            existing = records[idx]
            existing_name = record_name(existing)
            if existing_name and existing_name != candidate.name:
                logger.warning(
                    f"Slug collision on '{rid}': '{candidate.name}' overwrites '{existing_name}'"
                )
            records[idx] = {**existing, **doc}
        else:
            records.append(doc)

        if rid in preexisting:
            if rid not in result.updated:
                result.updated.append(rid)
        elif rid not in result.added:
            result.added.append(rid)

        result.ids.append(rid)
        result.count += 1

    sort_collection(records)
    return result
