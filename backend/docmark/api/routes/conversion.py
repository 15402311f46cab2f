"""Endpoints that expose the conversion core."""

from __future__ import annotations

import logging
from dataclasses import asdict
from urllib.parse import quote

import httpx
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from docmark.api.deps import get_app_settings, get_remote_fetcher, get_slide_titles
from docmark.channels import (
    BINARY_OFFICE_EXTENSIONS,
    Channel,
    Direction,
    DocumentKind,
    channel_for_kind,
    get_channel,
)
from docmark.conversion import convert, output_file_name, output_format
from docmark.conversion_builder import build_channel_list, build_convert_response
from docmark.core.config import Settings
from docmark.detection import detect_kind, file_extension
from docmark.document_models import SlideTitles
from docmark.document_text import UnsupportedDocumentError, document_to_text
from docmark.html_markdown import looks_like_html
from docmark.docx_exporter import PageMargins, export_markdown_to_docx
from docmark.remote import RemoteDocumentFetcher, RemoteFetchError
from docmark.samples import SAMPLES, get_sample
from docmark.schemas import (
    ChannelInfo,
    ConvertRequest,
    ConvertResponse,
    DetectRequest,
    DetectResponse,
    DocxExportRequest,
    FetchRequest,
    FetchResponse,
    SampleResponse,
)

logger = logging.getLogger("docmark.backend")

router = APIRouter(prefix="/api", tags=["conversion"])

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _attachment_headers(file_name: str) -> dict[str, str]:
    ascii_name = file_name.encode("ascii", "ignore").decode("ascii").strip() or "download"
    return {
        "Content-Disposition": (
            f'attachment; filename="{ascii_name}"; filename*=UTF-8\'\'{quote(file_name)}'
        )
    }


def _resolve_channel(name: str) -> Channel:
    try:
        return get_channel(name)
    except (KeyError, ValueError) as exc:
        raise HTTPException(status_code=422, detail=f"Unknown channel: {name}") from exc


def _suggested_direction(kind: DocumentKind) -> Direction:
    if kind == DocumentKind.MARKDOWN:
        return Direction.FROM_MARKDOWN
    return Direction.TO_MARKDOWN


@router.get("/channels", response_model=list[ChannelInfo])
def list_channels() -> list[ChannelInfo]:
    return build_channel_list()


@router.get("/samples", response_model=list[SampleResponse])
def list_samples() -> list[SampleResponse]:
    return [SampleResponse(kind=kind, content=content) for kind, content in SAMPLES.items()]


@router.get("/samples/{kind}", response_model=SampleResponse)
def read_sample(kind: DocumentKind) -> SampleResponse:
    content = get_sample(kind)
    if content is None:
        raise HTTPException(status_code=404, detail=f"No sample for '{kind.value}'")
    return SampleResponse(kind=kind, content=content)


@router.post("/detect", response_model=DetectResponse)
def detect(payload: DetectRequest) -> DetectResponse:
    kind = detect_kind(payload.file_name, payload.content)
    channel = channel_for_kind(kind)
    return DetectResponse(
        kind=kind,
        channel=channel.kind.value if channel else None,
        direction=_suggested_direction(kind),
    )


@router.post("/convert", response_model=ConvertResponse)
def convert_text(
    payload: ConvertRequest,
    titles: SlideTitles = Depends(get_slide_titles),
) -> ConvertResponse:
    channel = _resolve_channel(payload.channel)
    result = convert(channel, payload.direction, payload.text, titles)
    logger.info(
        "Converted %s %s: %s chars in, %s chars out",
        channel.kind.value,
        payload.direction.value,
        len(payload.text),
        len(result.text),
    )
    return build_convert_response(channel, payload.direction, result, payload.file_name)


@router.post("/convert/file", response_model=ConvertResponse)
async def convert_file(
    file: UploadFile = File(...),
    channel: str | None = Form(default=None),
    direction: Direction | None = Form(default=None),
    settings: Settings = Depends(get_app_settings),
    titles: SlideTitles = Depends(get_slide_titles),
) -> ConvertResponse:
    contents = await file.read()
    if len(contents) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Uploaded file is too large")

    file_name = file.filename or ""
    try:
        text = document_to_text(file_name, contents, settings.upload_fallback_encoding)
    except UnsupportedDocumentError as exc:
        raise HTTPException(status_code=415, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    kind = detect_kind(file_name, text)
    if channel:
        target = _resolve_channel(channel)
    else:
        target = channel_for_kind(kind) or get_channel(DocumentKind.WORD)
    direction = direction or _suggested_direction(kind)

    logger.info("Upload '%s' detected as %s, converting %s %s", file_name, kind.value, target.kind.value, direction.value)
    result = convert(target, direction, text, titles)
    return build_convert_response(target, direction, result, file_name)


@router.post("/download")
def download(
    payload: ConvertRequest,
    titles: SlideTitles = Depends(get_slide_titles),
) -> Response:
    channel = _resolve_channel(payload.channel)
    result = convert(channel, payload.direction, payload.text, titles)
    if result.is_empty:
        raise HTTPException(status_code=404, detail="Nothing to download: no recognisable structure found")

    mime_type, _ = output_format(channel, payload.direction)
    file_name = output_file_name(channel, payload.direction, payload.file_name)
    return Response(
        content=result.text.encode("utf-8"),
        media_type=f"{mime_type}; charset=utf-8",
        headers=_attachment_headers(file_name),
    )


@router.post("/export/docx")
def export_docx(
    payload: DocxExportRequest,
    settings: Settings = Depends(get_app_settings),
) -> Response:
    if not payload.markdown.strip():
        raise HTTPException(status_code=400, detail="Markdown is empty")

    orientation = payload.orientation or settings.docx_orientation
    margin = settings.docx_margin_twips if payload.margin_twips is None else payload.margin_twips
    margins = PageMargins.uniform(margin)
    if payload.margins is not None:
        sides = payload.margins.model_dump(exclude_none=True)
        margins = PageMargins(**{**asdict(margins), **sides})
    try:
        document = export_markdown_to_docx(
            payload.markdown,
            orientation=orientation,
            margins=margins,
        )
    except Exception as exc:  # pragma: no cover - defensive logging
        logger.exception("Failed to export DOCX")
        raise HTTPException(status_code=500, detail="Could not build the DOCX document") from exc

    file_name = output_file_name(DocumentKind.WORD, Direction.FROM_MARKDOWN, payload.file_name)
    file_name = file_name.rsplit(".", 1)[0] + ".docx"
    return Response(content=document, media_type=DOCX_MIME_TYPE, headers=_attachment_headers(file_name))


@router.post("/fetch", response_model=FetchResponse)
async def fetch_remote(
    payload: FetchRequest,
    fetcher: RemoteDocumentFetcher = Depends(get_remote_fetcher),
) -> FetchResponse:
    try:
        document = await fetcher.fetch(payload.url)
    except RemoteFetchError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except httpx.HTTPStatusError as exc:
        logger.error("Remote server returned HTTP %s for %s", exc.response.status_code, payload.url)
        raise HTTPException(status_code=502, detail=f"Remote server returned HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        logger.error("Error fetching %s: %s", payload.url, exc)
        raise HTTPException(status_code=502, detail="Could not fetch the remote document") from exc

    if file_extension(document.file_name) in BINARY_OFFICE_EXTENSIONS and not looks_like_html(document.content):
        raise HTTPException(status_code=415, detail="Binary Office documents are not supported")

    return FetchResponse(
        url=payload.url,
        file_name=document.file_name,
        content_type=document.content_type,
        content=document.content,
        kind=detect_kind(document.file_name, document.content),
    )
