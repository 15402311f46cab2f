"""HTTP level tests for the conversion API."""

from __future__ import annotations

from io import BytesIO
from urllib.parse import quote

import httpx
import pytest
from docx import Document
from docx.shared import Twips
from fastapi.testclient import TestClient

from docmark.api.deps import get_remote_fetcher
from docmark.main import app
from docmark.remote import RemoteDocumentFetcher

TEAM_CSV = "模块,负责人\n产品文档,王一"
TEAM_MARKDOWN = "| 模块 | 负责人 |\n| --- | --- |\n| 产品文档 | 王一 |"


def _remote_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/data/team.csv":
        return httpx.Response(200, content=TEAM_CSV.encode("utf-8"), headers={"Content-Type": "text/csv"})
    return httpx.Response(404, text="missing")


@pytest.fixture
def client():
    app.dependency_overrides[get_remote_fetcher] = lambda: RemoteDocumentFetcher(
        transport=httpx.MockTransport(_remote_handler)
    )
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_channels_keep_declaration_order(client: TestClient) -> None:
    kinds = [item["kind"] for item in client.get("/api/channels").json()]

    assert kinds == ["word", "excel", "powerpoint"]


def test_samples(client: TestClient) -> None:
    assert "模块" in client.get("/api/samples/excel").json()["content"]
    assert len(client.get("/api/samples").json()) == 4
    assert client.get("/api/samples/text").status_code == 404
    assert client.get("/api/samples/unknown").status_code == 422


@pytest.mark.parametrize(
    ("payload", "kind", "channel", "direction"),
    [
        ({"file_name": "report.csv", "content": "a,b\n1,2"}, "excel", "excel", "to_markdown"),
        ({"file_name": "note.md", "content": "# hi"}, "markdown", None, "from_markdown"),
        ({"file_name": "plain.txt", "content": "just words"}, "text", "word", "to_markdown"),
    ],
)
def test_detect(client: TestClient, payload: dict, kind: str, channel: str | None, direction: str) -> None:
    body = client.post("/api/detect", json=payload).json()

    assert body == {"kind": kind, "channel": channel, "direction": direction}


def test_convert_excel_to_markdown(client: TestClient) -> None:
    response = client.post("/api/convert", json={"channel": "excel", "direction": "to_markdown", "text": TEAM_CSV})
    body = response.json()

    assert response.status_code == 200
    assert body["text"] == TEAM_MARKDOWN
    assert body["preview"]["kind"] == "table"
    assert body["preview"]["table"]["rows"] == [["产品文档", "王一"]]
    assert body["mime_type"] == "text/markdown"
    assert body["file_name"] == "excel.md"


def test_convert_rejects_unknown_channel(client: TestClient) -> None:
    response = client.post("/api/convert", json={"channel": "markdown", "text": "x"})

    assert response.status_code == 422


def test_convert_uploaded_csv(client: TestClient) -> None:
    files = {"file": ("team.csv", TEAM_CSV.encode("utf-8"), "text/csv")}
    body = client.post("/api/convert/file", files=files).json()

    assert body["channel"] == "excel"
    assert body["direction"] == "to_markdown"
    assert body["text"] == TEAM_MARKDOWN
    assert body["file_name"] == "team.md"


def test_uploaded_markdown_converts_from_markdown(client: TestClient) -> None:
    files = {"file": ("team.md", TEAM_MARKDOWN.encode("utf-8"), "text/markdown")}

    word = client.post("/api/convert/file", files=files).json()
    excel = client.post("/api/convert/file", files=files, data={"channel": "excel"}).json()

    assert word["channel"] == "word"
    assert word["preview"]["kind"] == "document"
    assert excel["text"] == TEAM_CSV
    assert excel["file_name"] == "team.csv"


def test_upload_in_fallback_encoding(client: TestClient) -> None:
    files = {"file": ("team.csv", TEAM_CSV.encode("gb18030"), "text/csv")}
    body = client.post("/api/convert/file", files=files).json()

    assert body["preview"]["table"]["headers"] == ["模块", "负责人"]


def test_binary_and_empty_uploads_are_rejected(client: TestClient) -> None:
    binary = {"file": ("report.docx", b"PK\x03\x04", "application/octet-stream")}
    empty = {"file": ("empty.txt", b"  \n", "text/plain")}

    assert client.post("/api/convert/file", files=binary).status_code == 415
    assert client.post("/api/convert/file", files=empty).status_code == 400


def test_word_download_uploads_back_as_markdown(client: TestClient) -> None:
    download = client.post(
        "/api/download",
        json={"channel": "word", "direction": "from_markdown", "text": "# 周报\n- 完成", "file_name": "周报.md"},
    )
    assert download.status_code == 200

    files = {"file": ("周报.doc", download.content, "application/msword")}
    body = client.post("/api/convert/file", files=files).json()

    assert body["channel"] == "word"
    assert body["direction"] == "to_markdown"
    assert [line for line in body["text"].splitlines() if line.strip()] == ["# 周报", "- 完成"]


def test_download(client: TestClient) -> None:
    response = client.post(
        "/api/download",
        json={"channel": "excel", "direction": "from_markdown", "text": TEAM_MARKDOWN, "file_name": "团队.md"},
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert f"filename*=UTF-8''{quote('团队.csv')}" in response.headers["content-disposition"]
    assert response.content.decode("utf-8") == TEAM_CSV


def test_download_without_structure_is_not_found(client: TestClient) -> None:
    response = client.post("/api/download", json={"channel": "excel", "direction": "from_markdown", "text": "prose"})

    assert response.status_code == 404


def test_export_docx(client: TestClient) -> None:
    response = client.post(
        "/api/export/docx",
        json={"markdown": "# 报告\n- a", "file_name": "报告.md", "orientation": "landscape"},
    )

    assert response.status_code == 200
    assert response.content.startswith(b"PK")
    assert "wordprocessingml" in response.headers["content-type"]
    assert quote("报告.docx") in response.headers["content-disposition"]


def test_export_docx_requires_markdown(client: TestClient) -> None:
    assert client.post("/api/export/docx", json={"markdown": "  "}).status_code == 400


def test_export_docx_accepts_per_side_margins(client: TestClient) -> None:
    response = client.post(
        "/api/export/docx",
        json={
            "markdown": "text",
            "margin_twips": 1000,
            "margins": {"top": 360, "right": 720, "left": 2160},
        },
    )

    assert response.status_code == 200
    section = Document(BytesIO(response.content)).sections[0]
    assert section.top_margin == Twips(360)
    assert section.right_margin == Twips(720)
    assert section.bottom_margin == Twips(1000)
    assert section.left_margin == Twips(2160)


def test_export_docx_rejects_out_of_range_margins(client: TestClient) -> None:
    response = client.post("/api/export/docx", json={"markdown": "text", "margins": {"top": -1}})

    assert response.status_code == 422


def test_fetch_remote_document(client: TestClient) -> None:
    body = client.post("/api/fetch", json={"url": "https://example.com/data/team.csv"}).json()

    assert body["file_name"] == "team.csv"
    assert body["content"] == TEAM_CSV
    assert body["kind"] == "excel"


@pytest.mark.parametrize(
    ("url", "status"),
    [("https://example.com/absent.txt", 502), ("ftp://example.com/a.txt", 400)],
)
def test_fetch_errors(client: TestClient, url: str, status: int) -> None:
    assert client.post("/api/fetch", json={"url": url}).status_code == status
