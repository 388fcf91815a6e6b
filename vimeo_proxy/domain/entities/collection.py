from dataclasses import dataclass
from typing import Optional

from vimeo_proxy.domain.errors import MisconfigurationError

NO_COLLECTION_MESSAGE = "No album configured for this token and no fallback project configured"


@dataclass(frozen=True)
class CollectionTarget:
    album_id: Optional[str] = None
    user_id: Optional[str] = None
    project_id: Optional[str] = None

    @property
    def is_album(self) -> bool:
        return self.album_id is not None

    @classmethod
    def select(
        cls,
        collection_id: Optional[str],
        user_id: Optional[str],
        project_id: Optional[str],
    ) -> "CollectionTarget":
        # Exactly one target: the caller's album, else the default project.
        if collection_id:
            return cls(album_id=collection_id)
        if user_id and project_id:
            return cls(user_id=user_id, project_id=project_id)
        raise MisconfigurationError(NO_COLLECTION_MESSAGE)
