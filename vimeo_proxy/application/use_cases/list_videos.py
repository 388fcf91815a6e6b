from typing import Any, Optional
from vimeo_proxy.config import Settings
from vimeo_proxy.domain.entities.collection import CollectionTarget
from vimeo_proxy.domain.entities.token_table import TokenTable
from vimeo_proxy.domain.errors import MisconfigurationError
from vimeo_proxy.domain.repositories.video_catalog import VideoCatalog

DEFAULT_PAGE = "1"
DEFAULT_PER_PAGE = "20"


def require_service_token(settings: Settings) -> None:
    if not settings.vimeo_token:
        raise MisconfigurationError("Missing VIMEO_TOKEN")


class ListVideosUseCase:
    def __init__(self, token_table: TokenTable, settings: Settings, catalog: VideoCatalog):
        self.token_table = token_table
        self.settings = settings
        self.catalog = catalog

    async def execute(
        self,
        token: Optional[str],
        page: Optional[str] = None,
        per_page: Optional[str] = None,
        query: Optional[str] = None,
    ) -> Any:
        # 1. Who is calling and which album may they see
        collection_id = self.token_table.resolve(token)
        require_service_token(self.settings)

        # 2. Album from the token, otherwise the default project
        target = CollectionTarget.select(
            collection_id, self.settings.user_id, self.settings.project_id
        )

        # 3. Forward, pagination values are passed through untouched
        return await self.catalog.list_videos(
            target,
            page=page or DEFAULT_PAGE,
            per_page=per_page or DEFAULT_PER_PAGE,
            query=query or None,
        )
