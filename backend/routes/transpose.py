import logging
from typing import Optional

from fastapi import APIRouter, UploadFile, File, Form, HTTPException
from fastapi.responses import PlainTextResponse

from schemas.instruments import ConcertKeyListResponse, InstrumentListResponse
from schemas.transpose import (
    EntryTransposeRequest,
    LineTransposeRequest,
    TextTransposeRequest,
    TextTransposeResponse,
    TransposeMode,
    TransposeRequest,
    TransposeResult,
)
from services.instruments import (
    CONCERT_KEYS,
    INSTRUMENTS,
    UnknownProfileError,
    request_for_mode,
)
from services.storage import (
    InvalidUploadError,
    content_disposition,
    download_filename,
    read_text_upload,
)
from services.theory import (
    Notation,
    transpose_line,
    transpose_single_entry,
    transpose_text,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _resolve_request(
    mode: TransposeMode,
    origin: Optional[str],
    target: Optional[str],
    text: str,
    notation: Notation,
) -> TransposeRequest:
    if not origin or not target or not text.strip():
        raise HTTPException(status_code=400, detail="Missing required fields")
    try:
        return request_for_mode(mode, origin, target, notation)
    except UnknownProfileError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.get("/instruments")
def list_instruments() -> InstrumentListResponse:
    return InstrumentListResponse(instruments=list(INSTRUMENTS))


@router.get("/keys")
def list_concert_keys() -> ConcertKeyListResponse:
    return ConcertKeyListResponse(keys=list(CONCERT_KEYS))


@router.post("/transpose/entry")
def transpose_entry(req: EntryTransposeRequest) -> TransposeResult:
    output = transpose_single_entry(
        req.token, req.semitones, req.prefer_flats, req.notation
    )
    return TransposeResult(input=req.token, output=output)


@router.post("/transpose/line")
def transpose_one_line(req: LineTransposeRequest) -> TransposeResult:
    output = transpose_line(req.line, req.semitones, req.prefer_flats, req.notation)
    return TransposeResult(input=req.line, output=output)


@router.post("/transpose/text")
def transpose_document(req: TextTransposeRequest) -> TextTransposeResponse:
    tr = _resolve_request(req.mode, req.origin, req.target, req.text, req.notation)
    output = transpose_text(req.text, tr.semitones, tr.prefer_flats, tr.notation)

    logger.info(
        "Transposed text (mode=%s, %s -> %s, semitones=%d, lines=%d)",
        req.mode, req.origin, req.target, tr.semitones, output.count("\n") + 1,
    )
    return TextTransposeResponse(
        mode=req.mode,
        origin=req.origin,
        target=req.target,
        semitones=tr.semitones,
        prefer_flats=tr.prefer_flats,
        notation=tr.notation,
        text=output,
    )


@router.post("/transpose/file")
def transpose_file(
    file: UploadFile = File(...),
    mode: TransposeMode = Form("instrument"),
    origin: Optional[str] = Form(None),
    target: Optional[str] = Form(None),
    notation: Notation = Form("sharps"),
    filename: Optional[str] = Form(None),
) -> PlainTextResponse:
    try:
        text = read_text_upload(file)
    except InvalidUploadError as exc:
        logger.warning("Rejected upload %r: %s", file.filename, exc)
        raise HTTPException(status_code=400, detail=str(exc))

    tr = _resolve_request(mode, origin, target, text, notation)
    output = transpose_text(text, tr.semitones, tr.prefer_flats, tr.notation)
    out_name = download_filename(filename)

    logger.info(
        "Transposed file %s -> %s (mode=%s, %s -> %s, semitones=%d)",
        file.filename, out_name, mode, origin, target, tr.semitones,
    )
    return PlainTextResponse(
        content=output,
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": content_disposition(out_name)},
    )
