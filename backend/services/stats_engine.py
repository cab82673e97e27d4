# backend/services/stats_engine.py

import math
import re
from typing import Any, Dict, List, Mapping, Optional, Sequence

from models.stats_models import ColumnStats, TableSummary

# Signed decimal with optional fraction and exponent: "12", "-0.5", ".5", "5.", "1e-3"
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_number(raw: Any) -> Optional[float]:
    """
    Parse a cell as a float, or return None if it isn't a plain number.

    Deliberately narrower than float(): "inf", "nan", "1_000", "0x1f" and
    friends are rejected, as is anything that overflows to infinity.
    """
    if not isinstance(raw, str):
        return None

    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None

    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def _is_blank(raw: Any) -> bool:
    return isinstance(raw, str) and raw.strip() == ""


def numeric_columns(rows: Sequence[Mapping[str, Any]]) -> List[str]:
    """
    Columns (taken from the first row, in order) where every row holds
    either a blank cell or a number. One bad cell anywhere rules the
    column out.
    """
    if not rows:
        return []

    columns = list(rows[0].keys())
    return [
        col for col in columns
        if all(_is_blank(row.get(col)) or parse_number(row.get(col)) is not None for row in rows)
    ]


def column_stats(rows: Sequence[Mapping[str, Any]], column: str) -> Optional[ColumnStats]:
    # Blank cells are skipped, not counted as zero
    values: List[float] = []
    for row in rows:
        value = parse_number(row.get(column))
        if value is None:
            continue
        values.append(value)

    if not values:
        return None

    n = len(values)
    mean = sum(values) / n
    if not math.isfinite(mean):
        # Sum overflowed even though every value is finite
        mean = sum(v / n for v in values)

    return ColumnStats(
        count=n,
        mean=mean,
        min=min(values),
        max=max(values),
    )


def summarize_table(rows: Sequence[Mapping[str, Any]]) -> TableSummary:
    if not rows:
        return TableSummary(rows=0)

    num_cols = numeric_columns(rows)
    stats: Dict[str, ColumnStats] = {}
    for col in num_cols:
        col_stats = column_stats(rows, col)
        if col_stats is None:
            continue
        stats[col] = col_stats

    return TableSummary(rows=len(rows), numeric_columns=num_cols, stats=stats)


def summarize(store: Mapping[str, Sequence[Mapping[str, Any]]]) -> Dict[str, Any]:
    """
    Row counts plus count/mean/min/max for every numeric column of every
    dataset, in store order.

    Empty datasets come back as {"rows": 0} with no other keys.
    Never raises on bad cells; they just drop out of the numbers.
    """
    summary: Dict[str, Any] = {}
    for name, rows in store.items():
        summary[name] = summarize_table(rows).model_dump(exclude_none=True)
    return summary
