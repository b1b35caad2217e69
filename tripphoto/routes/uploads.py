from typing import Optional

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from ..auth.security import get_current_claims
from ..schemas.auth import Claims
from ..schemas.uploads import UploadResponse
from ..services.uploads import UploadOrchestrator
from ..services.validation import parse_upload_request, read_limited_body


router = APIRouter(prefix="/api", tags=["uploads"])


def get_orchestrator(request: Request) -> UploadOrchestrator:
    return request.app.state.orchestrator


@router.post("/upload-photos", response_model=UploadResponse)
async def upload_photos(
    request: Request,
    claims: Optional[Claims] = Depends(get_current_claims),
    orchestrator: UploadOrchestrator = Depends(get_orchestrator),
):
    body = await read_limited_body(request, request.app.state.settings.max_upload_bytes)
    req = parse_upload_request(body)
    # Disk writes and blob uploads block, keep them off the event loop
    file_ids = await run_in_threadpool(orchestrator.upload, req)
    return UploadResponse(success=True, file_ids=file_ids)
