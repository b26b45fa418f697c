"""Upload endpoints: one-shot generation and the SSE relay."""

from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import StreamingResponse
from starlette.concurrency import run_in_threadpool

from app.api.dependencies import get_processor, get_settings
from app.config.settings import Settings
from app.logging.logger import Log, mask_visitor_id
from app.processor.models import DEFAULT_TEMPLATE, IngestUpload
from app.processor.processor import Processor
from app.relay.events import SSE_HEADERS, SSE_MEDIA_TYPE
from app.relay.relay import RelaySession

MISSING_FILE_MESSAGE = 'No resume file uploaded. Use field name "resume".'

router = APIRouter(prefix="/api/generate", tags=["generate"])


async def _read_upload(
    resume: UploadFile | None,
    template: str | None,
    visitor_id: str | None,
    settings: Settings,
) -> IngestUpload:
    if resume is None:
        raise HTTPException(status_code=400, detail=MISSING_FILE_MESSAGE)
    data = await resume.read()
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {settings.max_upload_bytes} bytes.",
        )
    Log.debug(f"Upload from visitor={mask_visitor_id(visitor_id)}")
    return IngestUpload(
        file_name=resume.filename or "resume",
        content_type=resume.content_type or "",
        data=data,
        template=template or DEFAULT_TEMPLATE,
        visitor_id=(visitor_id or "").strip() or None,
    )


@router.post("/upload")
async def upload(
    resume: UploadFile | None = File(None),
    template: str | None = Form(DEFAULT_TEMPLATE),
    visitor_id: str | None = Form(None),
    processor: Processor = Depends(get_processor),
    settings: Settings = Depends(get_settings),
) -> dict[str, object]:
    ingest = await _read_upload(resume, template, visitor_id, settings)
    result = await run_in_threadpool(processor.generate, ingest)
    body: dict[str, object] = {"data": {"html": result.html}}
    if result.stored_path:
        body["storedPath"] = result.stored_path
    return body


async def _relay_events(request: Request, session: RelaySession) -> AsyncIterator[str]:
    """Pull events one at a time, checking for a gone client before every pull."""
    events = session.events()
    try:
        while True:
            if await request.is_disconnected():
                Log.info("Client disconnected, cancelling stream")
                session.cancel()
                break
            event = await run_in_threadpool(next, events, None)
            if event is None:
                break
            yield event
    finally:
        session.cancel()
        events.close()


@router.post("/upload-stream")
async def upload_stream(
    request: Request,
    resume: UploadFile | None = File(None),
    template: str | None = Form(DEFAULT_TEMPLATE),
    visitor_id: str | None = Form(None),
    processor: Processor = Depends(get_processor),
    settings: Settings = Depends(get_settings),
) -> StreamingResponse:
    ingest = await _read_upload(resume, template, visitor_id, settings)
    session = await run_in_threadpool(processor.open_stream, ingest)
    return StreamingResponse(
        _relay_events(request, session),
        media_type=SSE_MEDIA_TYPE,
        headers=SSE_HEADERS,
    )
