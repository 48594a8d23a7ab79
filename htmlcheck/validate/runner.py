"""W3C Nu HTML Checker client and validation runner."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Protocol

import httpx

from htmlcheck.diagnostics import Diagnostic, Severity, filter_diagnostics
from htmlcheck.errors import VALIDATION, ToolError
from htmlcheck.options import DEFAULT_TIMEOUT, DEFAULT_VALIDATOR_URL
from htmlcheck.pipeline.results import ValidateRunResult

LOGGER = logging.getLogger(__name__)

TOOL_NAME: Final[str] = "W3C validator"
USER_AGENT: Final[str] = "htmlcheck/0.1 (+https://validator.w3.org/nu/)"


class Validator(Protocol):
    """Markup validator contract."""

    async def validate(self, path: Path) -> Sequence[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class NuValidator:
    """Posts a document to a Nu HTML Checker instance and reads its JSON report."""

    url: str = DEFAULT_VALIDATOR_URL
    timeout: float = DEFAULT_TIMEOUT
    transport: httpx.AsyncBaseTransport | None = None

    async def validate(self, path: Path) -> list[Diagnostic]:
        body = Path(path).read_bytes()
        LOGGER.debug("Validating %s (%d bytes) against %s", path, len(body), self.url)

        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            headers={"User-Agent": USER_AGENT},
        ) as client:
            try:
                response = await client.post(
                    self.url,
                    params={"out": "json"},
                    content=body,
                    headers={"Content-Type": "text/html; charset=utf-8"},
                )
                response.raise_for_status()
            except httpx.HTTPError as exc:
                LOGGER.warning("Validator request to %s failed: %s", self.url, exc)
                raise ToolError(VALIDATION, TOOL_NAME, str(exc) or type(exc).__name__) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise ToolError(VALIDATION, TOOL_NAME, "response is not JSON") from exc

        diagnostics = parse_nu_messages(payload)
        LOGGER.info("Validator returned %d message(s) for %s", len(diagnostics), path)
        return diagnostics


def parse_nu_messages(payload: Any) -> list[Diagnostic]:
    """Map a Nu checker `out=json` payload to diagnostics."""
    if not isinstance(payload, Mapping) or not isinstance(payload.get("messages"), list):
        raise ToolError(VALIDATION, TOOL_NAME, "response has no `messages` list")

    diagnostics: list[Diagnostic] = []
    for item in payload["messages"]:
        if not isinstance(item, Mapping):
            raise ToolError(VALIDATION, TOOL_NAME, f"unexpected message entry {item!r}")
        last_line = _optional_int(item.get("lastLine"))
        first_line = _optional_int(item.get("firstLine"))
        diagnostics.append(
            Diagnostic(
                message=str(item.get("message", "")),
                line=first_line if first_line is not None else last_line,
                last_line=last_line,
                severity=_severity(item),
            )
        )
    return diagnostics


async def run_validate(path: Path, validator: Validator) -> ValidateRunResult:
    """Validate one file and split its messages into all vs. worth reporting."""
    diagnostics = list(await validator.validate(path))
    return ValidateRunResult(
        diagnostics=diagnostics,
        included=filter_diagnostics(diagnostics),
    )


def _severity(item: Mapping[str, Any]) -> Severity:
    kind = item.get("type")
    if kind == "info":
        return "warning" if item.get("subType") == "warning" else "info"
    return "error"


def _optional_int(value: object) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ToolError(VALIDATION, TOOL_NAME, f"line number {value!r} is not an integer")
    return value
