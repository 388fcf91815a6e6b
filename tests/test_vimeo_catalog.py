import asyncio

import httpx
import pytest

from vimeo_proxy.domain.entities.collection import CollectionTarget
from vimeo_proxy.domain.errors import UpstreamError
from vimeo_proxy.config import load_settings
from vimeo_proxy.infrastructure.vimeo_catalog import VimeoVideoCatalog, build_http_client, build_listing_url

BASE = "https://api.vimeo.com"


def test_album_target_uses_album_videos_endpoint():
    url = build_listing_url(BASE, CollectionTarget(album_id="albumA"), page="2")
    assert url == "https://api.vimeo.com/albums/albumA/videos?page=2&per_page=20"


def test_project_target_uses_project_videos_endpoint():
    url = build_listing_url(BASE, CollectionTarget(user_id="user9", project_id="proj7"))
    assert url == "https://api.vimeo.com/users/user9/projects/proj7/videos?page=1&per_page=20"


def test_query_and_fields_only_when_set():
    target = CollectionTarget(album_id="albumA")
    assert "query" not in build_listing_url(BASE, target, query="")
    url = httpx.URL(build_listing_url(BASE, target, query="cats", fields="uri,name"))
    assert url.params["query"] == "cats"
    assert url.params["fields"] == "uri,name"


def test_identifiers_are_escaped_in_the_path():
    url = build_listing_url(BASE, CollectionTarget(album_id="a/../b"))
    assert url.startswith("https://api.vimeo.com/albums/a%2F..%2Fb/videos?")


def _catalog(handler) -> VimeoVideoCatalog:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return VimeoVideoCatalog(client, token="service-token", api_version="3.4")


def test_sends_service_credentials_and_disables_caching():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    data = asyncio.run(_catalog(handler).list_videos(CollectionTarget(album_id="albumA")))

    assert data == {"data": []}
    headers = seen[0].headers
    assert headers["Authorization"] == "Bearer service-token"
    assert headers["Accept"] == "application/vnd.vimeo.*+json;version=3.4"
    assert headers["Cache-Control"] == "no-store"


def test_non_success_status_raises_upstream_error():
    catalog = _catalog(lambda request: httpx.Response(403, text="forbidden"))
    with pytest.raises(UpstreamError) as exc:
        asyncio.run(catalog.get_video("42"))
    assert exc.value.status_code == 403
    assert str(exc.value) == "Vimeo error"
    assert exc.value.detail == "forbidden"


def test_http_client_has_no_deadline_of_its_own():
    client = build_http_client(load_settings({}))
    assert client.timeout == httpx.Timeout(None)
    asyncio.run(client.aclose())
