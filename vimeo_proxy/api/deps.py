from fastapi import Request

from vimeo_proxy.application.use_cases.get_video import GetVideoUseCase
from vimeo_proxy.application.use_cases.list_videos import ListVideosUseCase
from vimeo_proxy.config import Settings
from vimeo_proxy.domain.entities.token_table import TokenTable
from vimeo_proxy.domain.repositories.video_catalog import VideoCatalog
from vimeo_proxy.infrastructure.vimeo_catalog import VimeoVideoCatalog

# Wire up the dependencies from what the app factory put on app.state

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_token_table(request: Request) -> TokenTable:
    return request.app.state.token_table

def get_catalog(request: Request) -> VideoCatalog:
    return VimeoVideoCatalog.from_settings(request.app.state.http_client, request.app.state.settings)

def list_videos_use_case(request: Request) -> ListVideosUseCase:
    return ListVideosUseCase(get_token_table(request), get_settings(request), get_catalog(request))

def get_video_use_case(request: Request) -> GetVideoUseCase:
    return GetVideoUseCase(get_token_table(request), get_settings(request), get_catalog(request))
