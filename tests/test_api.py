from unittest.mock import MagicMock

import pytest
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient

from app.container import container
from app.main import app
from app.transcript.client import TranscriptClient
from app.transcript.exception import TranscriptErrorCode, TranscriptException

transport = ASGITransport(app=app)

VALID_YT_URL = "https://www.youtube.com/watch?v=I3w8zAFa_G4"
WATCH_PAGE = '"captionTracks":[{"baseUrl":"https://example.com/en","languageCode":"en"}]'
RAW_CAPTIONS = (
    '<transcript><text start="0" dur="1.5">Hi</text>'
    '<text start="1.5" dur="2">there &amp; back</text></transcript>'
)


@pytest.fixture
def fake_client():
    client = MagicMock(spec=TranscriptClient)
    client.get_watch_page.return_value = WATCH_PAGE
    client.get_caption_payload.return_value = RAW_CAPTIONS
    with container.transcript_client.override(providers.Object(client)):
        yield client


@pytest.mark.asyncio
async def test_transcript_defaults_to_json(fake_client):
    # When
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/transcript", params={"url": VALID_YT_URL})

    # Then
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == [
        {"text": "Hi", "start": 0, "duration": 1.5},
        {"text": "there & back", "start": 1.5, "duration": 2},
    ]


@pytest.mark.asyncio
async def test_transcript_srt_output_is_case_insensitive(fake_client):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/transcript", params={"url": VALID_YT_URL, "output": "SRT"})

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == (
        "1\n00:00:00,000 --> 00:00:01,500\nHi\n"
        "\n"
        "2\n00:00:01,500 --> 00:00:03,500\nthere & back\n"
    )


@pytest.mark.asyncio
async def test_transcript_text_output_with_trailing_slash(fake_client):
    """경로 끝의 / 는 제거된 뒤 라우팅되어야 한다."""
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.post("/api/transcript/", params={"url": VALID_YT_URL, "output": "text"})

    assert resp.status_code == 200
    assert resp.text == "Hi\nthere & back"


@pytest.mark.asyncio
async def test_transcript_missing_url_returns_400(fake_client):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/transcript")

    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing YouTube URL"}


@pytest.mark.asyncio
async def test_transcript_invalid_output_returns_400(fake_client):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/transcript", params={"url": VALID_YT_URL, "output": "xml"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid output type"}


@pytest.mark.asyncio
async def test_transcript_invalid_url_takes_precedence_over_invalid_output(fake_client):
    """출력 형식 검사는 자막 추출이 성공한 뒤에 수행되어야 한다."""
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/transcript", params={"url": "https://example.com", "output": "xml"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Invalid YouTube URL"}


@pytest.mark.asyncio
async def test_transcript_missing_captions_takes_precedence_over_invalid_output(fake_client):
    fake_client.get_watch_page.return_value = "<html></html>"

    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/transcript", params={"url": VALID_YT_URL, "output": "xml"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "No captions found"}


@pytest.mark.asyncio
async def test_transcript_invalid_url_returns_500(fake_client):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/transcript", params={"url": "https://example.com"})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Invalid YouTube URL"}


@pytest.mark.asyncio
async def test_transcript_pipeline_failure_returns_500(fake_client):
    fake_client.get_watch_page.side_effect = TranscriptException(TranscriptErrorCode.NETWORK_ERROR)

    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/transcript", params={"url": VALID_YT_URL})

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch data from YouTube"}


@pytest.mark.asyncio
async def test_transcript_without_captions_returns_500(fake_client):
    fake_client.get_watch_page.return_value = "<html></html>"

    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/api/transcript", params={"url": VALID_YT_URL})

    assert resp.status_code == 500
    assert resp.json() == {"error": "No captions found"}


@pytest.mark.asyncio
async def test_openapi_document_uses_host_header():
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/openapi.json", headers={"host": "transcripts.example.com"})

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.text.startswith('{\n  "openapi": "3.1.0"')

    document = resp.json()
    assert document["servers"] == [{"url": "https://transcripts.example.com"}]
    assert "/api/transcript" in document["paths"]
    assert "404" not in document["paths"]["/api/transcript"]["get"]["responses"]


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/foo", "/", "/docs", "/api"])
async def test_unmatched_route_returns_plain_404(path):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get(path)

    assert resp.status_code == 404
    assert resp.text == "Not Found"


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["TRACE", "PROPFIND", "DELETE"])
async def test_openapi_document_accepts_any_method(method):
    """메서드 목록에 없는 TRACE, 확장 메서드도 405 없이 처리되어야 한다."""
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.request(method, "/openapi.json")

    assert resp.status_code == 200
    assert resp.json()["openapi"] == "3.1.0"


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["TRACE", "PROPFIND"])
async def test_transcript_accepts_any_method(fake_client, method):
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.request(method, "/api/transcript", params={"url": VALID_YT_URL, "output": "text"})

    assert resp.status_code == 200
    assert resp.text == "Hi\nthere & back"
