import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from vimeo_proxy.config import DEFAULT_API_BASE_URL, DEFAULT_API_VERSION, Settings
from vimeo_proxy.domain.entities.collection import CollectionTarget
from vimeo_proxy.domain.errors import UpstreamError
from vimeo_proxy.domain.repositories.video_catalog import VideoCatalog

log = logging.getLogger(__name__)


def _segment(value: str) -> str:
    return quote(str(value), safe="")


def collection_path(target: CollectionTarget) -> str:
    if target.is_album:
        return f"/albums/{_segment(target.album_id)}/videos"
    return f"/users/{_segment(target.user_id)}/projects/{_segment(target.project_id)}/videos"


def build_listing_url(
    base_url: str,
    target: CollectionTarget,
    page: str = "1",
    per_page: str = "20",
    query: Optional[str] = None,
    fields: Optional[str] = None,
) -> str:
    """
    Builds the upstream listing URL for one collection.
    page/per_page are always present, query and fields only when non-empty.
    """
    params = {"page": page, "per_page": per_page}
    if query:
        params["query"] = query
    if fields:
        params["fields"] = fields
    return str(httpx.URL(base_url.rstrip("/") + collection_path(target), params=params))


def build_http_client(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    # no client-side deadline
    return httpx.AsyncClient(timeout=None, transport=transport)


class VimeoVideoCatalog(VideoCatalog):
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        token: str,
        api_version: str = DEFAULT_API_VERSION,
        base_url: str = DEFAULT_API_BASE_URL,
        fields: Optional[str] = None,
    ):
        self.http_client = http_client
        self.token = token
        self.api_version = api_version
        self.base_url = base_url.rstrip("/")
        self.fields = fields

    @classmethod
    def from_settings(cls, http_client: httpx.AsyncClient, settings: Settings) -> "VimeoVideoCatalog":
        return cls(
            http_client,
            token=settings.vimeo_token or "",
            api_version=settings.api_version,
            base_url=settings.api_base_url,
            fields=settings.fields,
        )

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": f"application/vnd.vimeo.*+json;version={self.api_version}",
            "Cache-Control": "no-store",
        }

    async def _get(self, url: str) -> Any:
        response = await self.http_client.get(url, headers=self.headers)
        if not response.is_success:
            log.warning("Vimeo returned %s for %s", response.status_code, response.url.path)
            raise UpstreamError(response.status_code, response.text)
        return response.json()

    async def list_videos(
        self,
        target: CollectionTarget,
        page: str = "1",
        per_page: str = "20",
        query: Optional[str] = None,
    ) -> Any:
        url = build_listing_url(self.base_url, target, page, per_page, query, self.fields)
        return await self._get(url)

    async def get_video(self, video_id: str) -> Any:
        url = f"{self.base_url}/videos/{_segment(video_id)}"
        if self.fields:
            url = str(httpx.URL(url, params={"fields": self.fields}))
        return await self._get(url)
