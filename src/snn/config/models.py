"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, snn.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    fail_fast: bool = False
    skip_blank_lines: bool = True
    comment_prefix: str = "#"

