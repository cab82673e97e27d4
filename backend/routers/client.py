# backend/routers/client.py

import os
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

BASE_DIR = Path(__file__).resolve().parents[2]
CLIENT_DIST = Path(os.getenv("CLIENT_DIST", str(BASE_DIR / "client" / "dist")))


def build_client_router(dist: Path = CLIENT_DIST) -> Optional[APIRouter]:
    """
    Serve the built frontend, falling back to index.html for client-side
    routes. Returns None when there is no build to serve.
    """
    dist = Path(dist).resolve()
    index_path = dist / "index.html"

    if not index_path.is_file():
        print(f"[web] client build not found at {dist}. API will still run.")
        return None

    router = APIRouter(include_in_schema=False)

    @router.get("/{full_path:path}")
    def serve_client(full_path: str):
        # /api/* is never answered with the SPA shell
        if full_path == "api" or full_path.startswith("api/"):
            raise HTTPException(status_code=404, detail="Not found")

        candidate = (dist / full_path).resolve()
        if dist not in candidate.parents:
            return FileResponse(index_path)

        if candidate.is_file():
            return FileResponse(candidate)

        html_candidate = candidate.with_name(candidate.name + ".html")
        if html_candidate.is_file():
            return FileResponse(html_candidate)

        return FileResponse(index_path)

    print(f"[web] serving static client from: {dist}")
    return router
