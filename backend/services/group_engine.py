# backend/services/group_engine.py

from typing import Any, Dict, List, Mapping, Sequence

from models.group_models import GroupCount

UNKNOWN_KEY = "Unknown"

# Same set JavaScript's trim() uses: str.strip() would also eat \x1c-\x1f
# and \x85 but leave the BOM (U+FEFF) alone.
BLANK_CHARS = "".join(chr(c) for c in (
    0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680,
    *range(0x2000, 0x200B),
    0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
))


def group_key(raw: Any) -> str:
    """
    Missing, None, or whitespace-only values all land in "Unknown".
    Anything else keeps its exact string form (no trimming).
    """
    if raw is None:
        return UNKNOWN_KEY

    key = str(raw)
    if key.strip(BLANK_CHARS) == "":
        return UNKNOWN_KEY
    return key


def group_by(rows: Sequence[Mapping[str, Any]], field: str) -> List[Dict[str, Any]]:
    """
    Count rows per distinct value of `field`.

    Returns [{"key": ..., "count": ...}, ...] in first-seen order, not
    sorted. Every row lands in exactly one group, so the counts add up to
    len(rows).
    """
    counts: Dict[str, int] = {}
    for row in rows:
        key = group_key(row.get(field))
        counts[key] = counts.get(key, 0) + 1

    return [GroupCount(key=key, count=count).model_dump() for key, count in counts.items()]
