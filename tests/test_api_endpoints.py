"""Tests for API endpoints."""

import io
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from openpyxl import Workbook

from viewer.api import feed_router, health_router, import_router, layout_router, status_router
from viewer.api.dependencies import (
    get_aggregation_controller,
    get_layout_controller,
    get_status_reporter,
    get_upload_store,
)
from viewer.config import Settings
from viewer.feed.aggregator import AggregationController
from viewer.feed.layout import LayoutController
from viewer.reddit.client import FeedFetcher
from viewer.reddit.models import Post
from viewer.status import StatusReporter
from viewer.uploads import MemoryUploadStore

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def make_xlsx(rows: list[list]) -> bytes:
    workbook = Workbook()
    for row in rows:
        workbook.active.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def status():
    return StatusReporter()


@pytest.fixture
def upload_store():
    return MemoryUploadStore()


@pytest.fixture
def mock_fetcher(status):
    """Fetcher returning one media and one link post for every subreddit."""
    fetcher = MagicMock(spec=FeedFetcher)

    async def fetch_feed(client_id, client_secret, name, sort, limit, time_window=None):
        status.set_status("Posts fetched successfully")
        return [
            Post(url=f"https://i.redd.it/{name}.jpg", title=f"{name} pic", permalink=f"/r/{name}/1/"),
            Post(url=f"https://example.com/{name}", title=f"{name} link", permalink=f"/r/{name}/2/"),
        ]

    fetcher.fetch_feed = AsyncMock(side_effect=fetch_feed)
    return fetcher


@pytest_asyncio.fixture
async def test_app(status, upload_store, mock_fetcher):
    """Create a test FastAPI app with all routers and isolated state."""
    app = FastAPI()
    app.include_router(health_router)
    app.include_router(status_router)
    app.include_router(feed_router)
    app.include_router(layout_router)
    app.include_router(import_router)

    layout = LayoutController()
    controller = AggregationController(mock_fetcher, status, Settings(_env_file=None))

    app.dependency_overrides[get_status_reporter] = lambda: status
    app.dependency_overrides[get_upload_store] = lambda: upload_store
    app.dependency_overrides[get_layout_controller] = lambda: layout
    app.dependency_overrides[get_aggregation_controller] = lambda: controller
    return app


@pytest_asyncio.fixture
async def client(test_app):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# Health check tests


@pytest.mark.asyncio
async def test_healthz_returns_200(client):
    response = await client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.asyncio
async def test_readyz_returns_200(client):
    settings = Settings(_env_file=None)

    with patch("viewer.api.routes_health.get_settings", return_value=settings):
        response = await client.get("/readyz")

    assert response.status_code == 200
    assert response.json() == {"ok": True, "env": "dev"}


# /api/status tests


@pytest.mark.asyncio
async def test_initial_status(client):
    response = await client.get("/api/status")

    assert response.status_code == 200
    assert response.json() == {"text": "Please enter Client ID and Secret", "is_error": True}


# /api/feed/run tests


@pytest.mark.asyncio
async def test_run_returns_render_payload(client, mock_fetcher):
    response = await client.post(
        "/api/feed/run",
        json={"client_id": "id", "client_secret": "secret", "feeds": "pics+aww", "sort": "hot"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == {"text": "Posts fetched successfully", "is_error": False}
    assert data["media"] == [
        {"url": "https://i.redd.it/pics.jpg", "title": "pics pic"},
        {"url": "https://i.redd.it/aww.jpg", "title": "aww pic"},
    ]
    assert [e["url"] for e in data["entries"]] == ["https://example.com/pics", "https://example.com/aww"]
    assert data["entries"][0]["permalink_url"] == "https://reddit.com/r/pics/2/"
    assert mock_fetcher.fetch_feed.await_count == 2


@pytest.mark.asyncio
async def test_run_missing_credentials_returns_400(client, mock_fetcher):
    response = await client.post("/api/feed/run", json={"feeds": "pics"})

    assert response.status_code == 400
    assert response.json() == {
        "status": {"text": "Please enter Client ID and Secret", "is_error": True}
    }
    mock_fetcher.fetch_feed.assert_not_called()


@pytest.mark.asyncio
async def test_run_missing_feeds_returns_400(client):
    response = await client.post(
        "/api/feed/run", json={"client_id": "id", "client_secret": "secret", "feeds": " + "}
    )

    assert response.status_code == 400
    assert response.json()["status"]["text"] == "Please enter a subreddit or multireddit"


@pytest.mark.asyncio
async def test_run_rejects_unknown_sort(client):
    response = await client.post(
        "/api/feed/run",
        json={"client_id": "id", "client_secret": "secret", "feeds": "pics", "sort": "sideways"},
    )

    assert response.status_code == 422


# /api/layout tests


@pytest.mark.asyncio
async def test_get_layout_defaults(client):
    response = await client.get("/api/layout")

    assert response.status_code == 200
    data = response.json()
    assert data["state"] == {"layout": "grid", "columns": 3, "thumbnail_size_px": 200}
    assert data["presentation"] == {
        "class_name": "grid",
        "style": {"--columns": "3", "--thumbnail-size": "200px"},
    }


@pytest.mark.asyncio
async def test_update_layout(client):
    response = await client.post("/api/layout", json={"layout": "list", "thumbnail_size_px": 150})

    assert response.status_code == 200
    data = response.json()
    assert data["state"] == {"layout": "list", "columns": 3, "thumbnail_size_px": 150}
    assert data["presentation"]["class_name"] == "list"
    assert data["presentation"]["style"]["--thumbnail-size"] == "150px"

    # State persists for the session
    response = await client.get("/api/layout")
    assert response.json()["state"]["layout"] == "list"


@pytest.mark.asyncio
async def test_update_layout_rejects_out_of_range(client):
    response = await client.post("/api/layout", json={"columns": 0})

    assert response.status_code == 422


# /api/import tests


@pytest.mark.asyncio
async def test_import_spreadsheet(client, upload_store, status):
    data = make_xlsx([["Subreddit"], ["pics"], ["  aww "], ["earthporn"]])

    response = await client.post(
        "/api/import", files={"file": ("subs.xlsx", data, XLSX_CONTENT_TYPE)}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["feeds"] == ["pics", "aww", "earthporn"]
    assert body["query"] == "pics+aww+earthporn"
    assert body["status"] == {"text": "Loaded 3 subreddits from Excel", "is_error": False}
    assert upload_store.get("subs.xlsx") == data


@pytest.mark.asyncio
async def test_import_csv_upload(client, upload_store):
    response = await client.post(
        "/api/import", files={"file": ("subs.csv", b"Subreddit\npics\naww\n", "text/csv")}
    )

    assert response.status_code == 200
    assert response.json()["feeds"] == ["pics", "aww"]
    assert upload_store.get("subs.csv") == b"Subreddit\npics\naww\n"


@pytest.mark.asyncio
async def test_import_invalid_file(client):
    response = await client.post(
        "/api/import", files={"file": ("subs.xlsx", b"not a workbook", XLSX_CONTENT_TYPE)}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["feeds"] == []
    assert body["query"] == ""
    assert body["status"] == {"text": "Error processing Excel file", "is_error": True}


@pytest.mark.asyncio
async def test_import_rejects_oversized_upload(client, upload_store):
    settings = Settings(_env_file=None, max_upload_bytes=16)

    with patch("viewer.api.routes_import.get_settings", return_value=settings):
        response = await client.post(
            "/api/import", files={"file": ("big.xlsx", b"x" * 64, XLSX_CONTENT_TYPE)}
        )

    assert response.status_code == 413
    assert len(upload_store) == 0


@pytest.mark.asyncio
async def test_clear_uploads(client, upload_store):
    upload_store.save("old.xlsx", b"data")

    response = await client.delete("/api/import")

    assert response.status_code == 200
    assert response.json() == {"ok": True, "cleared": 1}
    assert len(upload_store) == 0


@pytest.mark.asyncio
async def test_delete_single_upload(client, upload_store):
    upload_store.save("old.xlsx", b"data")
    upload_store.save("keep.xlsx", b"data")

    response = await client.delete("/api/import/old.xlsx")

    assert response.status_code == 200
    assert upload_store.get("old.xlsx") is None
    assert upload_store.get("keep.xlsx") == b"data"

    response = await client.delete("/api/import/old.xlsx")
    assert response.status_code == 404


# Application factory tests


@pytest.mark.asyncio
async def test_create_app_serves_viewer_page():
    from main import create_app

    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/")
        health = await client.get("/healthz")

    assert response.status_code == 200
    assert "Reddit Media Viewer" in response.text
    assert response.headers["X-Frame-Options"] == "DENY"
    assert health.json() == {"ok": True}
