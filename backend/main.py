# backend/main.py

import os
import traceback
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from routers import client_router_factory, datasets_router
from services.data_loader import DATA_DIR, load_all_data
from utils.data_store import TableStore

# ---------------------------------------------------------
# DATA STORE BOOTSTRAP
# ---------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        store = load_all_data(DATA_DIR)
        print(f"[data] loaded datasets: {', '.join(store) or 'none'}")
    except Exception as e:
        print("[data] failed to load datasets at startup:", e)
        traceback.print_exc()
        store = TableStore.empty()

    app.state.store = store
    yield
    print("[server] shutting down...")


# ---------------------------------------------------------
# APP INIT
# ---------------------------------------------------------

app = FastAPI(title="Dataset Insights API", version="0.1.0", lifespan=lifespan)

# Explicit origin if provided, else permissive for local dev
allow_origin = os.getenv("CLIENT_ORIGIN", "*")
print("🚀 Allowed CORS origin:", allow_origin)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[allow_origin],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    print(f"[server] unhandled error on {request.method} {request.url.path}: {exc}")
    traceback.print_exception(type(exc), exc, exc.__traceback__)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# ---------------------------------------------------------
# ROUTERS
# ---------------------------------------------------------

app.include_router(datasets_router)

# Static client last so it never shadows /api
client_router = client_router_factory()
if client_router is not None:
    app.include_router(client_router)


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5174")),
        timeout_graceful_shutdown=5,
    )
