"""
FastAPI wrapper for medio-diff.

This module exposes the diff engine as a REST API so a browser-based
editor can request highlight ranges for both panes after each edit.
"""

from enum import Enum
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from medio_diff import __version__
from medio_diff.change_summary import build_summary, format_summary_dict
from medio_diff.config import DiffConfig
from medio_diff.diff_engine import DiffEngine
from medio_diff.panes import as_target_view

app = FastAPI(
    title="medio-diff API",
    description="Two-sided text comparison with token-level highlight ranges",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class DiffModeEnum(str, Enum):
    """Classification override."""
    auto = "auto"
    code = "code"
    prose = "prose"


class OffsetUnitEnum(str, Enum):
    """Unit for reported ranges."""
    utf16 = "utf16"  # Matches JavaScript string indices
    codepoint = "codepoint"


class DiffRequest(BaseModel):
    """Request model for a two-sided diff."""
    source: str = Field(..., description="Left pane text (the text whose lines are reported)")
    target: str = Field(..., description="Right pane text (the text compared against)")
    mode: DiffModeEnum = Field(DiffModeEnum.auto, description="Force code or prose comparison")
    offset_unit: OffsetUnitEnum = Field(OffsetUnitEnum.utf16, description="Unit for all ranges")
    code_threshold: Optional[float] = Field(None, description="Minimum code similarity to pair lines")
    prose_threshold: Optional[float] = Field(None, description="Minimum prose similarity to pair lines")
    merge_adjacent: bool = Field(False, description="Merge neighbouring changed tokens")
    include_target: bool = Field(False, description="Also return the right pane view")


class RangeModel(BaseModel):
    location: int
    length: int


class WordDiffModel(BaseModel):
    range: RangeModel
    kind: str


class LineDiffModel(BaseModel):
    range: RangeModel
    line_number: int
    is_different: bool
    word_diffs: list[WordDiffModel]


class DiffResponse(BaseModel):
    """Response model for diff results."""
    mode: str
    offset_unit: str
    source: list[LineDiffModel]
    target: Optional[list[LineDiffModel]] = None
    summary: dict


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


def _build_config(request: DiffRequest) -> DiffConfig:
    overrides = {}
    if request.code_threshold is not None:
        overrides["code_threshold"] = request.code_threshold
    if request.prose_threshold is not None:
        overrides["prose_threshold"] = request.prose_threshold
    return DiffConfig(
        mode=request.mode.value,
        offset_unit=request.offset_unit.value,
        merge_adjacent=request.merge_adjacent,
        **overrides,
    )


@app.get("/", response_class=HTMLResponse)
async def root():
    """Landing page."""
    return HTMLResponse(content="<h1>medio-diff API</h1><p>Visit <a href='/docs'>/docs</a> for API documentation.</p>")


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
    )


@app.post("/api/diff", response_model=DiffResponse)
def diff_texts(request: DiffRequest):
    """
    Compute highlight ranges for the source pane (and optionally the target).

    The computation is CPU-bound, so this is a sync endpoint and runs in the
    worker threadpool.
    """
    try:
        config = _build_config(request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    engine = DiffEngine(config)
    text_mode = engine.classify(request.source)
    source_diffs = engine.compute(request.source, request.target)
    target_diffs = None
    if request.include_target:
        target_diffs = as_target_view(engine.compute(request.target, request.source))

    summary = build_summary(source_diffs, text_mode)

    return DiffResponse(
        mode=text_mode.value,
        offset_unit=config.offset_unit,
        source=[d.to_dict() for d in source_diffs],
        target=[d.to_dict() for d in target_diffs] if target_diffs is not None else None,
        summary=format_summary_dict(summary),
    )


@app.get("/api/info")
async def api_info():
    """Get API information and usage instructions."""
    return {
        "name": "medio-diff API",
        "version": __version__,
        "description": "Two-sided text comparison with token-level highlight ranges",
        "endpoints": {
            "GET /": "Landing page",
            "GET /api/health": "Health check",
            "POST /api/diff": "Compute line and word differences between two texts",
            "GET /api/info": "This endpoint",
        },
        "documentation": "/docs",
        "openapi": "/openapi.json",
    }
