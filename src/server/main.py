"""FastAPI application for the notes API."""

from __future__ import annotations

from fastapi import FastAPI

from server.routers import notes

app = FastAPI(title="lecturenotes", description="Parse, validate and render lecture notes.")
app.include_router(notes.router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok"}
