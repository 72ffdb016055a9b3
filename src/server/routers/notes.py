"""Notes endpoints for the API."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from lecturenotes.exceptions import MalformedDocument
from lecturenotes.parser import parse
from lecturenotes.renderer import render
from lecturenotes.schemas import NotesDocument
from lecturenotes.utils.logging_config import get_logger
from lecturenotes.validator import validate
from server.models import ErrorResponse, NotesRequest, ParseResponse, RenderResponse, ValidateResponse

logger = get_logger(__name__)

router = APIRouter()

MALFORMED_STATUS = 422

COMMON_RESPONSES: dict[int | str, dict] = {
    MALFORMED_STATUS: {"model": ErrorResponse, "description": "Malformed notes"},
}


def _malformed(exc: MalformedDocument) -> JSONResponse:
    logger.warning("Rejected malformed notes", extra={"line": exc.line, "error": exc.reason})
    return JSONResponse(
        status_code=MALFORMED_STATUS,
        content=ErrorResponse(error=exc.reason, line=exc.line).model_dump(),
    )


def _parse_request(notes_request: NotesRequest) -> NotesDocument:
    return parse(notes_request.text)


@router.post("/api/parse", response_model=ParseResponse, responses=COMMON_RESPONSES)
async def api_parse(notes_request: NotesRequest) -> ParseResponse | JSONResponse:
    """Parse notes text and return the document structure.

    **Returns**

    - **ParseResponse**: title, section count and the full document
    - **422**: ``ErrorResponse`` when the notes are malformed

    """
    try:
        doc = _parse_request(notes_request)
    except MalformedDocument as exc:
        return _malformed(exc)
    return ParseResponse(title=doc.title, section_count=len(doc.sections), document=doc)


@router.post("/api/validate", response_model=ValidateResponse, responses=COMMON_RESPONSES)
async def api_validate(notes_request: NotesRequest) -> ValidateResponse | JSONResponse:
    """Parse notes text and report structural issues.

    Issues are findings, not failures: the response status is 200 whenever the
    notes parse.
    """
    try:
        doc = _parse_request(notes_request)
    except MalformedDocument as exc:
        return _malformed(exc)
    issues = list(validate(doc, kinds=notes_request.select or None))
    logger.info("Validated notes", extra={"title": doc.title, "issue_count": len(issues)})
    return ValidateResponse(issue_count=len(issues), issues=issues)


@router.post("/api/render", response_model=RenderResponse, responses=COMMON_RESPONSES)
async def api_render(notes_request: NotesRequest) -> RenderResponse | JSONResponse:
    """Return the normalized form of the notes text."""
    try:
        doc = _parse_request(notes_request)
    except MalformedDocument as exc:
        return _malformed(exc)
    text = render(doc)
    return RenderResponse(text=text, changed=text != notes_request.text)
