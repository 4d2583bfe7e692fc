# confusable_guard/routes.py
from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest

from confusable_guard.config import APP_VERSION
from confusable_guard.schemas import (
    AsciiRequest,
    AsciiResponse,
    ConfusableResponse,
    DiffItem,
    MappingResponse,
    NumberResponse,
    PairRequest,
    SkeletonResponse,
    TextRequest,
)
from confusable_guard.tables import default_engine

router = APIRouter(tags=["confusables"])


@router.get("/health")
def health() -> dict[str, object]:
    return {"status": "ok", "version": APP_VERSION, "mappings": len(default_engine().store)}


@router.post("/skeleton", response_model=SkeletonResponse)
def skeleton(req: TextRequest) -> SkeletonResponse:
    engine = default_engine()
    diffs = engine.to_skeleton_diff(req.text)
    return SkeletonResponse(
        text=req.text,
        skeleton="".join(d.output() for d in diffs),
        diff=[DiffItem.from_diff(d) for d in diffs],
    )


@router.post("/confusable", response_model=ConfusableResponse)
def confusable(req: PairRequest) -> ConfusableResponse:
    engine = default_engine()
    return ConfusableResponse(
        confusable=engine.is_confusable(req.a, req.b),
        skeleton_a=engine.to_skeleton(req.a),
        skeleton_b=engine.to_skeleton(req.b),
    )


@router.post("/ascii", response_model=AsciiResponse)
def ascii_fold(req: AsciiRequest) -> AsciiResponse:
    engine = default_engine()
    if not req.diff:
        return AsciiResponse(text=req.text, ascii=engine.to_ascii(req.text))
    folded, diffs = engine.to_ascii_diff(req.text)
    return AsciiResponse(
        text=req.text, ascii=folded, diff=[DiffItem.from_diff(d) for d in diffs]
    )


@router.post("/number", response_model=NumberResponse)
def number(req: TextRequest) -> NumberResponse:
    return NumberResponse(text=req.text, number=default_engine().to_number(req.text))


@router.get("/mapping/{codepoint}", response_model=MappingResponse)
def mapping(codepoint: str) -> MappingResponse:
    """Look up one code point, given as hex with an optional "U+" prefix."""
    raw = codepoint.upper().removeprefix("U+")
    try:
        rune = chr(int(raw, 16))
    except ValueError:
        raise HTTPException(status_code=400, detail=f"invalid code point {codepoint!r}")
    entry = default_engine().mapping(rune)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"no mapping for U+{ord(rune):04X}")
    return MappingResponse(
        rune=entry.source,
        codepoint=f"U+{ord(entry.source):04X}",
        confusable=entry.target,
        description=None if entry.description is None else str(entry.description),
    )


@router.get("/metrics", response_class=PlainTextResponse)
def metrics() -> PlainTextResponse:
    return PlainTextResponse(generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)
