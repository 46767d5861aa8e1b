"""Pydantic models for calculation requests and their results."""
from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

Operator = Literal["+", "-", "*", "/", "%", "**"]

# Order matters: it is the order shown to the user
VALID_OPERATORS: Tuple[str, ...] = ("+", "-", "*", "/", "%", "**")


class CalculationRequest(BaseModel):
    """A single binary operation entered by the user."""

    model_config = ConfigDict(frozen=True)

    left: float = Field(..., description="First operand")
    operator: Operator = Field(..., description="Operator symbol")
    right: float = Field(..., description="Second operand")


class NumericResult(BaseModel):
    """Successful outcome of an operation."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: float = Field(..., description="Computed numeric value")


class ErrorResult(BaseModel):
    """Outcome of an operation that could not produce a number."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str = Field(..., description="Human readable reason")


CalculationResult = Annotated[Union[NumericResult, ErrorResult], Field(discriminator="kind")]
