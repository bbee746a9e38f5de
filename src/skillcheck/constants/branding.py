"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "skillcheck"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: validate the metadata block of skill documents"
SUCCESS_MESSAGE_TEMPLATE: str = "Validated {count} document(s): all valid."
