"""Flask entrypoint that exposes the scan/clean endpoints."""

import io
import re
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, request, send_file

from unmask import CleanOptions, analyze, clean, locate, scan, summarize, utf16_offset, visualize
from unmask.logs import debug_enabled, logger, setup_logging
from unmask.option_registry import get_registry

MAX_TEXT_BYTES = 2 * 1024 * 1024  # 2MB
DEFAULT_DOWNLOAD_NAME = "cleaned.txt"

app = Flask(__name__)


class RequestError(ValueError):
    """Client-side problem with the submitted text or parameters."""


def _form_flag(value: Optional[str]) -> bool:
    return str(value).strip().lower() in {"true", "1", "yes", "on"}


def _request_data() -> Mapping[str, Any]:
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise RequestError("JSON body must be an object")
        return data
    return request.form


def _read_text(data: Mapping[str, Any]) -> str:
    upload = request.files.get("file")
    if upload is not None and upload.filename:
        try:
            raw = upload.read()
        except Exception as e:
            raise RequestError(f"Failed to read uploaded file: {str(e)}")
        if len(raw) > MAX_TEXT_BYTES:
            raise RequestError(_too_large())
        # Undecodable bytes survive as lone surrogates and show up as Cs.
        return raw.decode("utf-8", errors="surrogateescape")

    text = data.get("text")
    if text is None:
        raise RequestError("Text is required (form field 'text', JSON 'text' or a 'file' upload)")
    if not isinstance(text, str):
        raise RequestError("Text must be a string")
    if len(text.encode("utf-8", errors="surrogatepass")) > MAX_TEXT_BYTES:
        raise RequestError(_too_large())
    return text


def _too_large() -> str:
    return f"Text too large. Maximum size is {MAX_TEXT_BYTES // (1024 * 1024)}MB"


def _clean_options(data: Mapping[str, Any]) -> CleanOptions:
    nested = data.get("options")
    if isinstance(nested, dict):
        return CleanOptions.from_mapping(nested)
    return CleanOptions.from_mapping(data)


def _int_param(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise RequestError(f"'{key}' must be an integer")


def _encode_download(text: str) -> bytes:
    try:
        return text.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        # Surrogates that did not come from undecodable upload bytes.
        return text.encode("utf-8", errors="replace")


def _download_name(data: Mapping[str, Any]) -> str:
    filename = data.get("filename")
    if filename:
        return str(filename)
    upload = request.files.get("file")
    if upload is not None and upload.filename:
        return re.sub(r"\.\w+$", "", upload.filename) + "-clean.txt"
    return DEFAULT_DOWNLOAD_NAME


def _error(message: str, status: int):
    return jsonify({"error": message}), status


@app.get("/api/options")
def api_options():
    return jsonify({"options": get_registry(), "defaults": CleanOptions().to_dict()})


@app.post("/api/scan")
def api_scan():
    try:
        text = _read_text(_request_data())
        occurrences = scan(text)
        return jsonify(
            {"count": len(occurrences), "occurrences": [item.to_dict() for item in occurrences]}
        )
    except RequestError as exc:
        logger.warning("Scan rejected: %s", exc)
        return _error(f"Scan failed: {str(exc)}", 400)
    except Exception as exc:
        logger.exception("Unexpected error during scan")
        return _error(f"Unexpected error during scan: {str(exc)}", 500)


@app.post("/api/summarize")
def api_summarize():
    try:
        text = _read_text(_request_data())
        return jsonify({"summary": [entry.to_dict() for entry in summarize(text)]})
    except RequestError as exc:
        logger.warning("Summarize rejected: %s", exc)
        return _error(f"Summarize failed: {str(exc)}", 400)
    except Exception as exc:
        logger.exception("Unexpected error during summarize")
        return _error(f"Unexpected error during summarize: {str(exc)}", 500)


@app.post("/api/visualize")
def api_visualize():
    try:
        text = _read_text(_request_data())
        return jsonify(visualize(text).to_dict())
    except RequestError as exc:
        logger.warning("Visualize rejected: %s", exc)
        return _error(f"Visualize failed: {str(exc)}", 400)
    except Exception as exc:
        logger.exception("Unexpected error during visualize")
        return _error(f"Unexpected error during visualize: {str(exc)}", 500)


@app.post("/api/analyze")
def api_analyze():
    try:
        text = _read_text(_request_data())
        return jsonify(analyze(text).to_dict())
    except RequestError as exc:
        logger.warning("Analysis rejected: %s", exc)
        return _error(f"Analysis failed: {str(exc)}", 400)
    except Exception as exc:
        logger.exception("Unexpected error during analysis")
        return _error(f"Unexpected error during analysis: {str(exc)}", 500)


@app.post("/api/clean")
def api_clean():
    try:
        data = _request_data()
        text = _read_text(data)
        options = _clean_options(data)
    except RequestError as exc:
        logger.warning("Clean rejected: %s", exc)
        return _error(f"Clean failed: {str(exc)}", 400)

    try:
        cleaned = clean(text, options)
    except Exception as exc:
        logger.exception("Unexpected error during clean")
        return _error(f"Unexpected error during clean: {str(exc)}", 500)

    if _form_flag(data.get("download", "false")):
        return send_file(
            io.BytesIO(_encode_download(cleaned)),
            mimetype="text/plain",
            as_attachment=True,
            download_name=_download_name(data),
        )
    return jsonify(
        {
            "cleaned": cleaned,
            "removed": len(text) - len(cleaned),
            "options": options.to_dict(),
        }
    )


@app.post("/api/locate")
def api_locate():
    try:
        data = _request_data()
        text = _read_text(data)
        line = _int_param(data, "line")
        column = _int_param(data, "column")
    except RequestError as exc:
        logger.warning("Locate rejected: %s", exc)
        return _error(f"Locate failed: {str(exc)}", 400)

    index = locate(text, line, column)
    return jsonify({"index": index, "utf16_index": utf16_offset(text, index)})


if __name__ == "__main__":
    setup_logging()
    app.run(host="0.0.0.0", port=5000, debug=debug_enabled())
