import re
import unicodedata
from typing import Any


def slugify(value: Any) -> str:
    """
    Lowercase, hyphenated identifier for a display name.
    "Old Fashioned" -> "old-fashioned", "  A & B!! " -> "a-b"
    """
    if value is None:
        return ""
    text = str(value).strip().lower()
    text = re.sub(r"[^a-z0-9]+", "-", text)
    return text.strip("-")


def derive_id(record: Any) -> str:
    """Stored id if set, else the slug of the name. Non-objects have no id."""
    if not isinstance(record, dict):
        return ""
    if record.get("id"):
        return str(record["id"])
    return slugify(record.get("name") or "")


def record_name(record: Any) -> str:
    if not isinstance(record, dict):
        return ""
    name = record.get("name")
    return str(name) if name else ""


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(name: str) -> tuple:
    """
    Sort key approximating a locale collation:
    - accents and case are ignored first ("apple" < "Banana" < "éclair" < "Fig")
    - ties break lowercase-before-uppercase ("martini" < "Martini")
    - the raw string settles anything left
    """
    base = _strip_accents(name or "")
    return (base.casefold(), base.swapcase(), name or "")
