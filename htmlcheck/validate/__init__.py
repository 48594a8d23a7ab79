"""Markup validation."""

from htmlcheck.validate.runner import NuValidator, Validator, parse_nu_messages, run_validate

__all__ = [
    "NuValidator",
    "Validator",
    "parse_nu_messages",
    "run_validate",
]
