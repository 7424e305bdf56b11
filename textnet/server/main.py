"""
FastAPI server for compiling bracketed trees into text networks.

Start with:
    python -m textnet.server.main

Or via uvicorn directly:
    uvicorn textnet.server.main:app --port 3001 --reload
"""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from textnet.server.routes.graph_routes import router

# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title="TextNet API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import logging

    import uvicorn

    from textnet.config import load_settings

    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(
        "textnet.server.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
