"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from depgraph.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="dependents", data={"node": "A1"})
        assert result.ok is True
        assert result.op == "dependents"
        assert result.data == {"node": "A1"}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NO_EDGES", message="No edge list")
        result = ServiceResult(ok=False, op="load", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NO_EDGES"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="stats",
            data={"size": 4},
            warnings=["Node 'x' not found in graph"],
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["size"] == 4
        assert parsed["warnings"] == ["Node 'x' not found in graph"]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
