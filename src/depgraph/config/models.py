"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, depgraph.toml only contains overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    edges_file: Path | None = None
    format: Literal["auto", "text", "json"] = "auto"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    sort: bool = False
