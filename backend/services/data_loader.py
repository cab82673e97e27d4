# backend/services/data_loader.py

import os
from pathlib import Path
from typing import Dict, List

import pandas as pd

from utils.data_store import Row, TableStore

BASE_DIR = Path(__file__).resolve().parents[2]
DATA_DIR = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data")))

DATASET_FILES = {
    "conditions": "processed_conditions_data.csv",
    "factors": "processed_factors_data.csv",
    "performance": "processed_performance_data.csv",
    "treatment": "processed_treatment_data.csv",
}


def read_csv_rows(path: Path) -> List[Row]:
    """
    Parse a CSV into a list of dict rows, every cell a trimmed string.
    Empty cells stay "" (no NaN).
    """
    df = pd.read_csv(
        path,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        encoding="utf-8-sig",
    )

    # Short rows leave NaN behind even with keep_default_na=False
    df = df.fillna("")
    df.columns = [str(c).strip() for c in df.columns]
    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()

    return df.to_dict(orient="records")


def read_csv_if_exists(path: Path) -> List[Row]:
    """
    Returns [] if the file is missing or can't be parsed.
    """
    if not path.exists():
        print(f"[data] Missing file: {path.name}")
        return []

    try:
        rows = read_csv_rows(path)
    except pd.errors.EmptyDataError:
        print(f"[data] Empty file: {path.name}")
        return []
    except Exception as e:
        # One bad file must not take the other datasets down with it
        print(f"[data] Error parsing {path.name}: {e}")
        return []

    print(f"[data] Loaded {path.name} ({len(rows)} rows)")
    return rows


def load_all_data(data_dir: Path = DATA_DIR) -> TableStore:
    """
    Load every processed dataset into memory once, at startup.
    All four dataset names are always present, possibly as empty tables.
    """
    data_dir = Path(data_dir)
    tables: Dict[str, List[Row]] = {}
    for name, filename in DATASET_FILES.items():
        tables[name] = read_csv_if_exists(data_dir / filename)

    store = TableStore.from_datasets(tables)
    print(f"[data] All datasets loaded. Total keys: {len(store)}")
    return store
