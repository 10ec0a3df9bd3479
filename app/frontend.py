from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

ENTRY_DOCUMENT = "index.html"


def _lookup(build_dir: Path, request_path: str) -> Optional[Path]:
    """Map a URL path to a file inside ``build_dir``.

    Directories resolve to their index document. Anything outside the build
    directory counts as missing.
    """
    candidate = (build_dir / request_path.lstrip("/")).resolve()
    if candidate != build_dir and build_dir not in candidate.parents:
        return None
    if candidate.is_dir():
        candidate = candidate / ENTRY_DOCUMENT
    return candidate if candidate.is_file() else None


def build_frontend_router(build_dir: Optional[Path]) -> APIRouter:
    """Serve the prebuilt frontend, falling back to the entry document.

    Only non-root paths fall back; "/" is looked up like any other file.
    """
    router = APIRouter()

    @router.get("/{full_path:path}", include_in_schema=False)
    def serve_frontend(full_path: str):
        if build_dir is None:
            raise HTTPException(status_code=404, detail="Not found")

        found = _lookup(build_dir, full_path)
        if found is None and full_path.strip("/"):
            found = _lookup(build_dir, ENTRY_DOCUMENT)
        if found is None:
            raise HTTPException(status_code=404, detail="Not found")
        return FileResponse(found)

    return router
