"""
Development backend

FastAPI app serving the project resource endpoints from memory.
"""

from .main import create_app
from .store import ProjectResourceStore, Status, StoreError

__all__ = ["create_app", "ProjectResourceStore", "Status", "StoreError"]
