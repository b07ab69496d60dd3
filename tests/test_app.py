import io

import pytest
from werkzeug.http import parse_options_header

from app import MAX_TEXT_BYTES, app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    return app.test_client()


def attachment_name(resp):
    disposition, params = parse_options_header(resp.headers["Content-Disposition"])
    assert disposition == "attachment"
    return params["filename"]


def test_options_endpoint(client):
    resp = client.get("/api/options")
    assert resp.status_code == 200
    data = resp.get_json()
    assert len(data["options"]) == 12
    assert data["defaults"]["preserve_cr"] is False


def test_scan_json(client):
    resp = client.post("/api/scan", json={"text": "A\u200bB"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["count"] == 1
    item = data["occurrences"][0]
    assert item["index"] == 1
    assert item["code"] == "U+200B"
    assert item["name"] == "ZERO WIDTH SPACE"
    assert (item["line"], item["column"]) == (1, 2)


def test_scan_form_field(client):
    resp = client.post("/api/scan", data={"text": "a\tb"})
    assert resp.status_code == 200
    assert resp.get_json()["occurrences"][0]["name"] == "TAB"


def test_scan_uploaded_file_with_invalid_utf8(client):
    payload = {"file": (io.BytesIO(b"ok\xe2\x80\x8b\xff"), "sample.txt")}
    resp = client.post("/api/scan", data=payload, content_type="multipart/form-data")
    assert resp.status_code == 200
    codes = [item["code_point"] for item in resp.get_json()["occurrences"]]
    # The undecodable byte surfaces as a lone surrogate (Cs).
    assert codes == [0x200B, 0xDCFF]


def test_scan_requires_text(client):
    resp = client.post("/api/scan", json={})
    assert resp.status_code == 400
    assert "Text is required" in resp.get_json()["error"]


def test_scan_rejects_non_string_text(client):
    resp = client.post("/api/scan", json={"text": 12})
    assert resp.status_code == 400


def test_scan_rejects_oversized_text(client):
    resp = client.post("/api/scan", json={"text": "a" * (MAX_TEXT_BYTES + 1)})
    assert resp.status_code == 400
    assert "too large" in resp.get_json()["error"]


def test_summarize_endpoint(client):
    resp = client.post("/api/summarize", json={"text": "\u200b\u200b\x00"})
    summary = resp.get_json()["summary"]
    assert [(entry["code_point"], entry["count"]) for entry in summary] == [(0x200B, 2), (0, 1)]


def test_visualize_endpoint(client):
    resp = client.post("/api/visualize", json={"text": "<\u200b>"})
    data = resp.get_json()
    assert data["count"] == 1
    assert data["markup"].startswith("&lt;<span class=\"token token-zwsp\"")
    assert data["markup"].endswith("</span>&gt;")


def test_analyze_endpoint(client):
    resp = client.post("/api/analyze", json={"text": ""})
    assert resp.get_json() == {"count": 0, "occurrences": [], "summary": [], "markup": ""}


def test_clean_with_default_options(client):
    resp = client.post("/api/clean", json={"text": "2020\u20142021\u200b\r\n"})
    data = resp.get_json()
    assert data["cleaned"] == "2020-2021\n"
    assert data["removed"] == 2


def test_clean_with_form_flags(client):
    resp = client.post(
        "/api/clean",
        data={"text": "a\u00a0b\r\n", "nbspToSpace": "false", "preserveCR": "true"},
    )
    data = resp.get_json()
    assert data["cleaned"] == "a\u00a0b\r\n"
    assert data["options"]["nbsp_to_space"] is False


def test_clean_with_nested_json_options(client):
    resp = client.post(
        "/api/clean",
        json={"text": "\t\n", "options": {"preserve_tab": False, "remove_cc": True}},
    )
    assert resp.get_json()["cleaned"] == "\n"


def test_clean_download(client):
    resp = client.post(
        "/api/clean",
        json={"text": "He said \u201chi\u201d\u200b", "download": True, "filename": "out.txt"},
    )
    assert resp.status_code == 200
    assert resp.data == b'He said "hi"'
    assert resp.mimetype == "text/plain"
    assert attachment_name(resp) == "out.txt"


def test_clean_download_quotes_awkward_filename(client):
    resp = client.post(
        "/api/clean",
        json={"text": "x", "download": True, "filename": 'a".txt'},
    )
    assert resp.status_code == 200
    assert attachment_name(resp) == 'a".txt'


def test_clean_download_names_file_after_upload(client):
    payload = {
        "file": (io.BytesIO("a\u200bb".encode("utf-8")), "notes.md"),
        "download": "true",
    }
    resp = client.post("/api/clean", data=payload, content_type="multipart/form-data")
    assert resp.status_code == 200
    assert resp.data == b"ab"
    assert attachment_name(resp) == "notes-clean.txt"


def test_clean_download_default_name(client):
    resp = client.post("/api/clean", json={"text": "x", "download": True})
    assert attachment_name(resp) == "cleaned.txt"


def test_locate_endpoint(client):
    resp = client.post("/api/locate", json={"text": "a\U0001F600\r\nb", "line": 2, "column": 1})
    assert resp.get_json() == {"index": 4, "utf16_index": 5}


def test_locate_clamps(client):
    resp = client.post("/api/locate", json={"text": "ab", "line": 9, "column": 9})
    assert resp.get_json()["index"] == 2


def test_locate_requires_integers(client):
    resp = client.post("/api/locate", json={"text": "ab", "line": "x", "column": 1})
    assert resp.status_code == 400
    assert "'line' must be an integer" in resp.get_json()["error"]


def test_scan_and_locate_skip_lf_of_crlf(client):
    resp = client.post("/api/scan", json={"text": "a\r\nb"})
    assert [item["code_point"] for item in resp.get_json()["occurrences"]] == [0x0D]
    resp = client.post("/api/locate", json={"text": "a\r\nb", "line": 1, "column": 9})
    assert resp.get_json() == {"index": 1, "utf16_index": 1}
