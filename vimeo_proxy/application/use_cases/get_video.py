from typing import Any, Optional
from vimeo_proxy.application.use_cases.list_videos import require_service_token
from vimeo_proxy.config import Settings
from vimeo_proxy.domain.entities.token_table import TokenTable
from vimeo_proxy.domain.repositories.video_catalog import VideoCatalog

class GetVideoUseCase:
    def __init__(self, token_table: TokenTable, settings: Settings, catalog: VideoCatalog):
        self.token_table = token_table
        self.settings = settings
        self.catalog = catalog

    async def execute(self, token: Optional[str], video_id: str) -> Any:
        # Any recognized caller may fetch a single video
        self.token_table.resolve(token)
        require_service_token(self.settings)
        return await self.catalog.get_video(video_id)
