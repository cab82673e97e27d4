# backend/routers/__init__.py

from .datasets import router as datasets_router
from .client import build_client_router as client_router_factory
