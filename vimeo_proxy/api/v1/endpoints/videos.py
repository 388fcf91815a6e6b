import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse

from vimeo_proxy.api.auth import get_caller_token
from vimeo_proxy.api.deps import get_video_use_case, list_videos_use_case
from vimeo_proxy.api.v1.schemas.video import ErrorResponse, VideoEnvelope
from vimeo_proxy.application.use_cases.get_video import GetVideoUseCase
from vimeo_proxy.application.use_cases.list_videos import ListVideosUseCase
from vimeo_proxy.domain.errors import ProxyError, UnauthorizedError

router = APIRouter(prefix="/videos", tags=["Videos"])
log = logging.getLogger(__name__)


def _success(data) -> JSONResponse:
    return JSONResponse(status_code=200, content=VideoEnvelope(data=data).model_dump())


def error_body(error: Exception) -> dict:
    body = ErrorResponse(
        error=str(error) or "Unknown error",
        detail=error.detail if isinstance(error, ProxyError) else None,
    )
    return body.model_dump(exclude_none=True)


def _failure(error: Exception) -> JSONResponse:
    status_code = 500
    if isinstance(error, ProxyError):
        status_code = error.status_code
        if isinstance(error, UnauthorizedError):
            log.warning("Rejected request with unknown caller token")
    return JSONResponse(status_code=status_code, content=error_body(error))


@router.get("")
@router.get("/", include_in_schema=False)
async def list_videos(
    page: Optional[str] = Query(None),
    per_page: Optional[str] = Query(None),
    query: Optional[str] = Query(None),
    token: Optional[str] = Depends(get_caller_token),
    use_case: ListVideosUseCase = Depends(list_videos_use_case),
):
    try:
        data = await use_case.execute(token, page=page, per_page=per_page, query=query)
    except ProxyError as e:
        return _failure(e)
    except Exception as e:
        log.exception("Listing videos failed")
        return _failure(e)
    return _success(data)


@router.options("")
@router.options("/", include_in_schema=False)
async def list_videos_preflight():
    return Response(status_code=200)


@router.get("/{video_id}")
async def get_video(
    video_id: str,
    token: Optional[str] = Depends(get_caller_token),
    use_case: GetVideoUseCase = Depends(get_video_use_case),
):
    try:
        data = await use_case.execute(token, video_id)
    except ProxyError as e:
        return _failure(e)
    except Exception as e:
        log.exception("Fetching video %s failed", video_id)
        return _failure(e)
    return _success(data)


@router.options("/{video_id}")
async def get_video_preflight(video_id: str):
    return Response(status_code=200)
