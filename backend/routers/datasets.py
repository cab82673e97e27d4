# backend/routers/datasets.py

import os
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from services.group_engine import group_by
from services.stats_engine import summarize
from utils.data_store import DATASET_NAMES, TableStore

APP_ENV = os.getenv("APP_ENV", "development")

router = APIRouter(prefix="/api", tags=["Datasets"])


def get_store(request: Request) -> TableStore:
    store = getattr(request.app.state, "store", None)
    return store if store is not None else TableStore.empty()


def ensure_loaded(store: TableStore = Depends(get_store)) -> TableStore:
    if not store:
        raise HTTPException(status_code=503, detail="Data not loaded yet")
    return store


@router.get("/health")
def health(store: TableStore = Depends(get_store)) -> Dict[str, Any]:
    return {
        "ok": True,
        "datasets": list(store.keys()),
        "loadedAt": store.loaded_at.isoformat() if store.loaded_at else None,
        "env": APP_ENV,
    }


@router.get("/summary")
def summary(store: TableStore = Depends(ensure_loaded)) -> Dict[str, Any]:
    """
    Row counts and count/mean/min/max for numeric columns, per dataset.
    Recomputed on every call.
    """
    return summarize(store)


@router.get("/group")
def group(
    ds: str = "factors",
    by: Optional[str] = None,
    store: TableStore = Depends(ensure_loaded),
) -> List[Dict[str, Any]]:
    """
    Value counts for one column of one dataset.
    Example: /api/group?ds=factors&by=State
    """
    if by is None or by == "":
        raise HTTPException(status_code=400, detail="Query param 'by' is required")

    return group_by(store.table(ds), by)


def _raw_rows_route(name: str):
    def raw_rows(store: TableStore = Depends(ensure_loaded)) -> List[Dict[str, Any]]:
        return list(store.table(name))

    raw_rows.__name__ = f"get_{name}"
    return raw_rows


for _name in DATASET_NAMES:
    router.add_api_route(f"/{_name}", _raw_rows_route(_name), methods=["GET"])


@router.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
def api_not_found(path: str):
    raise HTTPException(status_code=404, detail="Not found")
