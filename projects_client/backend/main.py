from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from typing import Iterable, Optional
import logging
import os

from .routes import router
from .store import ProjectResourceStore

logger = logging.getLogger(__name__)

API_PREFIX = "/dolphinscheduler"


def create_app(
    store: Optional[ProjectResourceStore] = None,
    known_worker_groups: Optional[Iterable[str]] = None,
) -> FastAPI:
    """
    Build the development backend.

    Each app gets its own in-memory store unless one is passed in.
    """
    app = FastAPI(
        title="Project Resources API",
        description="In-memory backend for project parameters and worker-group assignments",
        version="1.0.0",
    )
    app.state.store = store or ProjectResourceStore(known_worker_groups)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix=API_PREFIX)

    @app.get("/health")
    async def health_check():
        """Health check endpoint with store counts"""
        return {"status": "healthy", "store": app.state.store.get_stats()}

    return app


def main() -> None:
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    host = os.environ.get("PROJECTS_BACKEND_HOST", "0.0.0.0")
    port = int(os.environ.get("PROJECTS_BACKEND_PORT", "12345"))
    logger.info(f"Serving project resources on {host}:{port}{API_PREFIX}")
    uvicorn.run(create_app(), host=host, port=port)


if __name__ == "__main__":
    main()
