"""Main FastAPI application for the Sudoku engine."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import router
from .config import config_from_env
from .errors import InvalidState


@asynccontextmanager
async def _app_lifespan(_: FastAPI):
    """Eagerly validate generator settings so misconfiguration fails at startup."""
    try:
        config_from_env().validate()
    except InvalidState as exc:
        raise RuntimeError(f"Invalid generator configuration: {exc}") from exc
    yield


app = FastAPI(
    title="Sudoku Engine API",
    description="API for solving and generating Sudoku puzzles",
    version="1.0.0",
    lifespan=_app_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Sudoku Engine API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("sudoku_engine.main:app", host="0.0.0.0", port=8000, reload=True)
