"""Suite configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from htmlcheck.format.options import BeautifyOptions

TARGET_FILE: Final[str] = "index.html"
DEFAULT_VALIDATOR_URL: Final[str] = "https://validator.w3.org/nu/"
DEFAULT_TIMEOUT: Final[float] = 30.0

# The Nu checker always emits a couple of informational messages that cannot
# be turned off at the source. Revisit if the validator changes.
BASELINE_MESSAGE_COUNT: Final[int] = 2

VALIDATOR_URL_ENV: Final[str] = "HTMLCHECK_VALIDATOR_URL"
TIMEOUT_ENV: Final[str] = "HTMLCHECK_TIMEOUT"


@dataclass(frozen=True, slots=True)
class SuiteOptions:
    """Where the target file lives and how the external tools are driven."""

    root: Path = field(default_factory=Path.cwd)
    target: str = TARGET_FILE
    validator_url: str = DEFAULT_VALIDATOR_URL
    timeout: float = DEFAULT_TIMEOUT
    baseline_message_count: int = BASELINE_MESSAGE_COUNT
    beautify: BeautifyOptions = field(default_factory=BeautifyOptions)

    def __post_init__(self):
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.baseline_message_count < 0:
            raise ValueError("baseline_message_count cannot be negative")
        if not self.validator_url:
            raise ValueError("validator_url cannot be empty")

    @property
    def path(self) -> Path:
        return self.root / self.target

    @staticmethod
    def from_env(root: Path | str | None = None) -> "SuiteOptions":
        """Build options, taking validator overrides from the environment."""
        timeout_raw = os.getenv(TIMEOUT_ENV)
        timeout = DEFAULT_TIMEOUT
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError:
                raise ValueError(f"{TIMEOUT_ENV} must be a number, got {timeout_raw!r}") from None

        return SuiteOptions(
            root=Path(root) if root is not None else Path.cwd(),
            validator_url=os.getenv(VALIDATOR_URL_ENV) or DEFAULT_VALIDATOR_URL,
            timeout=timeout,
        )
