import asyncio
from pathlib import Path

import httpx
import pytest

from htmlcheck.diagnostics import Diagnostic
from htmlcheck.errors import VALIDATION, ToolError
from htmlcheck.validate import NuValidator, parse_nu_messages, run_validate

NU_PAYLOAD = {
    "url": "index.html",
    "messages": [
        {"type": "info", "message": "The Content-Type was “text/html”. Using the HTML parser."},
        {"type": "info", "message": "Using the schema for HTML with SVG 1.1, MathML 3.0, RDFa 1.1, and ITS 2.0 support."},
        {
            "type": "error",
            "lastLine": 14,
            "firstLine": 12,
            "lastColumn": 7,
            "message": "Stray end tag “div”.",
        },
        {
            "type": "info",
            "subType": "warning",
            "lastLine": 3,
            "message": "Consider adding a “lang” attribute to the “html” start tag.",
        },
    ],
}


def _write_index(tmp_path: Path) -> Path:
    path = tmp_path / "index.html"
    path.write_text("<!DOCTYPE html>\n<title>x</title>\n", encoding="utf-8")
    return path


def test_parse_nu_messages_maps_lines_and_severity() -> None:
    diagnostics = parse_nu_messages(NU_PAYLOAD)

    assert diagnostics[0] == Diagnostic(
        message="The Content-Type was “text/html”. Using the HTML parser.",
        severity="info",
    )
    assert diagnostics[2].line == 12
    assert diagnostics[2].last_line == 14
    assert diagnostics[2].severity == "error"
    assert diagnostics[3].line == 3
    assert diagnostics[3].last_line == 3
    assert diagnostics[3].severity == "warning"


def test_parse_nu_messages_rejects_payload_without_messages() -> None:
    with pytest.raises(ToolError) as excinfo:
        parse_nu_messages({"url": "index.html"})

    assert excinfo.value.title == VALIDATION


def test_nu_validator_posts_document_as_html(tmp_path: Path) -> None:
    path = _write_index(tmp_path)
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=NU_PAYLOAD)

    validator = NuValidator(url="https://validator.test/nu/", transport=httpx.MockTransport(handler))

    diagnostics = asyncio.run(validator.validate(path))

    assert len(diagnostics) == 4
    request = seen[0]
    assert request.method == "POST"
    assert request.url.host == "validator.test"
    assert request.url.params["out"] == "json"
    assert request.headers["Content-Type"] == "text/html; charset=utf-8"
    assert request.content == path.read_bytes()


def test_nu_validator_http_error_becomes_tool_error(tmp_path: Path) -> None:
    path = _write_index(tmp_path)
    validator = NuValidator(
        url="https://validator.test/nu/",
        transport=httpx.MockTransport(lambda request: httpx.Response(503, text="busy")),
    )

    with pytest.raises(ToolError) as excinfo:
        asyncio.run(validator.validate(path))

    assert excinfo.value.title == VALIDATION
    assert excinfo.value.details[0].startswith("W3C validator failed:")


def test_nu_validator_connection_error_becomes_tool_error(tmp_path: Path) -> None:
    path = _write_index(tmp_path)

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    validator = NuValidator(url="https://validator.test/nu/", transport=httpx.MockTransport(handler))

    with pytest.raises(ToolError, match="connection refused"):
        asyncio.run(validator.validate(path))


def test_nu_validator_non_json_response_becomes_tool_error(tmp_path: Path) -> None:
    path = _write_index(tmp_path)
    validator = NuValidator(
        url="https://validator.test/nu/",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>oops</html>")),
    )

    with pytest.raises(ToolError, match="not JSON"):
        asyncio.run(validator.validate(path))


def test_run_validate_splits_raw_and_included(tmp_path: Path) -> None:
    class StaticValidator:
        async def validate(self, path: Path) -> list[Diagnostic]:
            return parse_nu_messages(NU_PAYLOAD)

    result = asyncio.run(run_validate(tmp_path / "index.html", StaticValidator()))

    assert len(result.diagnostics) == 4
    assert [d.message for d in result.included] == [
        "Stray end tag “div”.",
        "Consider adding a “lang” attribute to the “html” start tag.",
    ]
