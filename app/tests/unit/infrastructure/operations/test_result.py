"""Unit tests for OperationResult and OperationStatus in infrastructure."""

import pytest
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    @pytest.mark.parametrize(
        "status,value",
        [
            (OperationStatus.SUCCESS, "success"),
            (OperationStatus.TRANSIENT_ERROR, "transient_error"),
            (OperationStatus.PERMANENT_ERROR, "permanent_error"),
            (OperationStatus.NOT_FOUND, "not_found"),
        ],
    )
    def test_values(self, status, value):
        assert status.value == value


@pytest.mark.unit
class TestOperationResultFactories:
    def test_success_factory_minimal(self):
        result = OperationResult.success()
        assert result.status == OperationStatus.SUCCESS
        assert result.message == "ok"
        assert result.is_success

    def test_success_factory_with_bundle(self):
        bundle = {"hero": {"title": "Hola"}}
        result = OperationResult.success(data=bundle, message="loaded")
        assert result.data == bundle
        assert result.message == "loaded"

    def test_not_found(self):
        result = OperationResult.not_found("no bundle for ca", error_code="BUNDLE_NOT_FOUND")
        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "BUNDLE_NOT_FOUND"
        assert not result.is_success

    def test_transient_error(self):
        result = OperationResult.transient_error("db unavailable")
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.data is None

    def test_permanent_error(self):
        result = OperationResult.permanent_error("bad yaml", error_code="INVALID_YAML")
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "INVALID_YAML"

    def test_error_with_data(self):
        result = OperationResult.error(
            OperationStatus.PERMANENT_ERROR, "partial", data={"file": "fr.yml"}
        )
        assert result.data == {"file": "fr.yml"}
