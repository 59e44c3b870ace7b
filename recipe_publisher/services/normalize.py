"""Coerce loosely-typed recipe input from the admin page into RecipeRecord.

Rules per field:
- id: given id if truthy, else slug of the name
- base: lowercased strings
- profile / tags: list kept, scalar wrapped, missing -> []
- ingredients: [amount, item] pairs, {amount, item} objects or bare strings
- sweetness: defaults to "balanced"; method / glass / garnish default to ""

Inputs without a name are rejected (None) rather than failing the batch.
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from ..core.slug import slugify
from ..schemas import RecipeRecord

logger = logging.getLogger("recipe_publisher.normalize")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_list(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        return [_text(v) for v in value]
    if value:
        return [_text(value)]
    return []


def _ingredient_pair(entry: Any) -> Optional[Tuple[str, str]]:
    if entry is None:
        return None
    if isinstance(entry, (list, tuple)):
        amount = entry[0] if len(entry) > 0 else None
        item = entry[1] if len(entry) > 1 else None
        return (_text(amount), _text(item))
    if isinstance(entry, dict):
        return (_text(entry.get("amount") or ""), _text(entry.get("item") or ""))
    return ("", _text(entry))


def _ingredients(value: Any) -> List[Tuple[str, str]]:
    if not value:
        return []
    if not isinstance(value, (list, tuple)):
        value = [value]
    pairs = []
    for entry in value:
        pair = _ingredient_pair(entry)
        if pair is not None:
            pairs.append(pair)
    return pairs


def normalize_recipe(raw: Any) -> Optional[RecipeRecord]:
    """Canonical record for one raw input, or None if it has no usable name."""
    if not isinstance(raw, dict):
        logger.info(f"Skipping non-object recipe input ({type(raw).__name__})")
        return None

    name = raw.get("name")
    if not name:
        logger.info("Skipping recipe input without a name")
        return None
    name = _text(name)

    base = raw.get("base")
    if not base:
        base = []
    elif not isinstance(base, (list, tuple)):
        base = [base]

    return RecipeRecord(
        id=_text(raw["id"]) if raw.get("id") else slugify(name),
        name=name,
        base=[_text(b).lower() for b in base],
        profile=_as_list(raw.get("profile")),
        sweetness=_text(raw.get("sweetness") or "balanced"),
        ingredients=_ingredients(raw.get("ingredients")),
        method=_text(raw.get("method") or ""),
        glass=_text(raw.get("glass") or ""),
        garnish=_text(raw.get("garnish") or ""),
        tags=_as_list(raw.get("tags")),
    )


def normalize_batch(raws: Iterable[Any]) -> List[RecipeRecord]:
    records = []
    for raw in raws:
        record = normalize_recipe(raw)
        if record is not None:
            records.append(record)
    return records
