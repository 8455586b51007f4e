"""ServiceResult — what every GraphService method hands back to the CLI."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code`` plus a readable message."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation, named by ``op``.

    Successful results carry their payload in ``data`` and may carry
    ``warnings`` (e.g. an unknown node). Failed results carry ``error``.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
