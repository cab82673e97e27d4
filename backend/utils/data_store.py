# backend/utils/data_store.py

from collections.abc import Mapping
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Optional, Tuple

Row = Dict[str, Optional[str]]
Table = Tuple[Row, ...]

DATASET_NAMES = ("conditions", "factors", "performance", "treatment")


class TableStore(Mapping):
    """
    Read-only snapshot of every loaded dataset.

    Built once at startup and handed to the summarizer / grouper as-is.
    Rows are kept in file order. Nothing in here is ever mutated after
    construction, so request handlers can share one instance freely.
    """

    def __init__(self, tables: Mapping, loaded_at: Optional[datetime] = None):
        frozen = {name: tuple(rows or ()) for name, rows in tables.items()}
        self._tables = MappingProxyType(frozen)
        self.loaded_at = loaded_at

    @classmethod
    def from_datasets(cls, tables: Mapping, names: Iterable[str] = DATASET_NAMES) -> "TableStore":
        """
        Fill in every expected dataset name, so a missing table shows up
        as an empty one instead of disappearing from the API.
        """
        complete = {name: tables.get(name) or () for name in names}
        for name, rows in tables.items():
            complete.setdefault(name, rows or ())
        return cls(complete, loaded_at=datetime.now(timezone.utc))

    @classmethod
    def empty(cls) -> "TableStore":
        return cls({})

    def __getitem__(self, name: str) -> Table:
        return self._tables[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def table(self, name: str) -> Table:
        """Rows for a dataset, or an empty table for unknown names."""
        return self._tables.get(name, ())

    def __repr__(self) -> str:
        sizes = ", ".join(f"{name}={len(rows)}" for name, rows in self._tables.items())
        return f"TableStore({sizes})"
