from abc import ABC, abstractmethod
from typing import Any, Optional
from vimeo_proxy.domain.entities.collection import CollectionTarget

class VideoCatalog(ABC):
    @abstractmethod
    async def list_videos(
        self,
        target: CollectionTarget,
        page: str = "1",
        per_page: str = "20",
        query: Optional[str] = None,
    ) -> Any:
        pass

    @abstractmethod
    async def get_video(self, video_id: str) -> Any:
        pass
