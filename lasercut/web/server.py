"""
FastAPI web server: generate, preview and download laser-cut files.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from lasercut.config import defaults
from lasercut.export import SVG_MEDIA_TYPE
from lasercut.pipeline import files_to_dict, plan_summary, run_laser_cut
from lasercut.pipeline.config import KERF_MM
from lasercut.pipeline.layers import LaserCutFile
from lasercut.pipeline.options import (
    LaserCutOptions, LaserCutOptionsError, options_to_dict, parse_options,
)

log = logging.getLogger(__name__)

# ── App ────────────────────────────────────────────────────────────

app = FastAPI(title="Microseasons Laser Cut")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Session state (persists across requests) ───────────────────────

_last_files: dict[str, LaserCutFile] = {}     # filename -> file, from the last generate


# ── Models ─────────────────────────────────────────────────────────

# Field names are snake_case; the camelCase keys sent by the browser form
# (tileGridSize, includeAssemblyGuide, ...) are accepted as aliases.
_REQUEST_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TileGridRequest(BaseModel):
    model_config = _REQUEST_CONFIG

    rows: int = defaults.rows
    cols: int = defaults.cols


class LaserCutRequest(BaseModel):
    model_config = _REQUEST_CONFIG

    size: str | int = defaults.size
    material: str = defaults.material
    thickness: float = defaults.thickness
    include_assembly_guide: bool = defaults.include_assembly_guide
    include_mounting_holes: bool = defaults.include_mounting_holes
    tile_grid_size: TileGridRequest = TileGridRequest()


def _to_options(req: LaserCutRequest) -> LaserCutOptions:
    return parse_options(req.model_dump())


# ── Routes ─────────────────────────────────────────────────────────

@app.get("/api/laser-cut/options")
def get_options():
    """Defaults and allowed choices for the configuration form."""
    return {
        "defaults": options_to_dict(parse_options()),
        "sizes": list(defaults.sizes),
        "materials": list(defaults.materials),
        "recommended": defaults.recommended,
        "kerf_mm": KERF_MM,
    }


@app.post("/api/laser-cut/generate")
def generate(req: LaserCutRequest | None = None):
    """Generate every file for the requested build and keep them for download."""
    options = _to_options(req or LaserCutRequest())
    try:
        run = run_laser_cut(options)
    except LaserCutOptionsError as e:
        raise HTTPException(422, e.errors)

    _last_files.clear()
    _last_files.update({f.filename: f for f in run.files})

    return {
        "options": options_to_dict(run.options),
        "files": files_to_dict(run.files),
        "warnings": run.warnings,
    }


@app.post("/api/laser-cut/plan")
def plan(req: LaserCutRequest | None = None):
    """Planned dimensions without generating any SVG."""
    try:
        return plan_summary(_to_options(req or LaserCutRequest()))
    except LaserCutOptionsError as e:
        raise HTTPException(422, e.errors)


# ── File serving ───────────────────────────────────────────────────

def _lookup(filename: str) -> LaserCutFile:
    if not _last_files:
        raise HTTPException(404, "No files generated yet.")
    file = _last_files.get(filename)
    if file is None:
        raise HTTPException(404, f"{filename} not found.")
    return file


@app.get("/api/laser-cut/preview/{filename}")
def preview_file(filename: str):
    """Serve a generated SVG for inline preview."""
    file = _lookup(filename)
    return Response(
        content=file.svg,
        media_type=SVG_MEDIA_TYPE,
        headers={
            "Content-Disposition": f"inline; filename={file.filename}",
            "Cache-Control": "no-cache",
        },
    )


@app.get("/api/laser-cut/download/{filename}")
def download_file(filename: str):
    file = _lookup(filename)
    log.info("Download %s", file.filename)
    return Response(
        content=file.svg,
        media_type=SVG_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={file.filename}"},
    )


# ── Entry point ────────────────────────────────────────────────────

def main(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn
    uvicorn.run("lasercut.web.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
