"""FastAPI application serving a book index."""

from __future__ import annotations

from fastapi import FastAPI  # type: ignore[import-not-found]

from .routes.chapters import router as chapters_router
from .routes.convert import router as convert_router
from .routes.readme import router as readme_router
from .routes.root import router as root_router
from .routes.validate import router as validate_router

app = FastAPI(title="bookindex")

app.include_router(root_router)
app.include_router(chapters_router)
app.include_router(readme_router)
app.include_router(validate_router)
app.include_router(convert_router)
