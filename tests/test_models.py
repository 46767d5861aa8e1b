"""Test classes CalculationRequest, NumericResult and ErrorResult."""
from pydantic import TypeAdapter, ValidationError
import pytest

from interactive_calculator.common.models import (
    CalculationRequest,
    CalculationResult,
    ErrorResult,
    NumericResult,
)


def test_calculation_request_valid() -> None:
    """Test that a valid CalculationRequest can be created."""
    req = CalculationRequest(left=10, operator="+", right=5)
    assert req.left == 10.0
    assert req.operator == "+"
    assert isinstance(req.right, float)


@pytest.mark.parametrize("operator", ["^", "//", "", "plus", " +"])
def test_calculation_request_rejects_unknown_operator(operator: str) -> None:
    """Test that operators outside the supported set raise a validation error."""
    with pytest.raises(ValidationError):
        CalculationRequest(left=1, operator=operator, right=2)


def test_calculation_request_invalid_operand_type() -> None:
    """Test that non-numeric operands raise a validation error."""
    with pytest.raises(ValidationError):
        CalculationRequest(left="abc", operator="+", right=2)


def test_numeric_result_kind() -> None:
    """Test that a NumericResult is tagged as a number."""
    res = NumericResult(value=15)
    assert res.kind == "number"
    assert res.value == 15.0


def test_error_result_kind() -> None:
    """Test that an ErrorResult is tagged as an error."""
    res = ErrorResult(message="Error: Division by zero!")
    assert res.kind == "error"
    assert res.message == "Error: Division by zero!"


def test_error_result_invalid_message_type() -> None:
    """Test that a non-string message raises a validation error."""
    with pytest.raises(ValidationError):
        ErrorResult(message=42)


@pytest.mark.parametrize("payload,expected_type", [
    ({"kind": "number", "value": 1.5}, NumericResult),
    ({"kind": "error", "message": "boom"}, ErrorResult),
])
def test_calculation_result_discriminates_on_kind(payload: dict, expected_type: type) -> None:
    """The result union picks the variant from its kind tag."""
    result = TypeAdapter(CalculationResult).validate_python(payload)
    assert isinstance(result, expected_type)


def test_calculation_result_rejects_unknown_kind() -> None:
    """An unknown kind tag is not a valid result."""
    with pytest.raises(ValidationError):
        TypeAdapter(CalculationResult).validate_python({"kind": "other", "value": 1})
