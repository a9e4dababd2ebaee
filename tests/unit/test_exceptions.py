"""Exception hierarchy and error response mapping tests."""

import pytest

from brd_generator.exceptions import (
    BRDGeneratorError,
    ConfigurationError,
    DocumentValidationError,
    EnhancementError,
    ExtractionError,
    GenerationError,
    InputValidationError,
    ProviderError,
    RepairError,
    RequirementNotFoundError,
    ResponseParseError,
    StorageError,
)
from brd_generator.main import status_code_for
from brd_generator.models import ErrorResponse


@pytest.mark.parametrize(
    "exc_cls, code",
    [
        (ConfigurationError, "ERR_CONFIG_001"),
        (ExtractionError, "ERR_EXTRACT_001"),
        (ResponseParseError, "ERR_PARSE_001"),
        (RepairError, "ERR_REPAIR_001"),
        (DocumentValidationError, "ERR_VALID_001"),
        (GenerationError, "ERR_GEN_001"),
        (EnhancementError, "ERR_ENHANCE_001"),
        (RequirementNotFoundError, "ERR_NOTFOUND_001"),
        (StorageError, "ERR_STORE_001"),
        (InputValidationError, "ERR_INPUT_001"),
    ],
)
def test_error_codes(exc_cls, code):
    exc = exc_cls("message", details={"key": "value"})
    assert isinstance(exc, BRDGeneratorError)
    assert exc.error_code == code
    assert exc.details == {"key": "value"}
    assert str(exc) == "message"


def test_provider_error_keeps_status_code():
    exc = ProviderError("HTTP 429", status_code=429)
    assert exc.error_code == "ERR_PROVIDER_001"
    assert exc.status_code == 429


def test_error_response_from_exception():
    response = ErrorResponse.from_exception(InputValidationError("bad input", details=["field"]))
    data = response.model_dump(mode="json")

    assert data["error_code"] == "ERR_INPUT_001"
    assert data["message"] == "bad input"
    assert data["details"] == ["field"]
    assert "timestamp" in data


@pytest.mark.parametrize(
    "exc, status_code",
    [
        (InputValidationError("x"), 400),
        (RequirementNotFoundError("x"), 404),
        (ProviderError("x"), 502),
        (EnhancementError("x"), 502),
        (GenerationError("x"), 502),
        (ConfigurationError("x"), 500),
        (StorageError("x"), 500),
    ],
)
def test_status_code_for(exc, status_code):
    assert status_code_for(exc) == status_code
