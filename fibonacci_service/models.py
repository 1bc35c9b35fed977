import math
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, List, Literal, Union

from pydantic import BaseModel, Field, field_validator


def coerce_position(value: Any) -> int:
    """Normalize a number or numeric string to an integer index.

    Integral floats ("7.0", 7.0, "1e3") are accepted, anything fractional,
    non-finite, boolean or non-numeric is rejected with ValueError.
    """
    if isinstance(value, bool):
        raise ValueError("boolean is not a valid position")
    if isinstance(value, int):
        return value

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("empty string is not a valid position")
        try:
            number = Decimal(text)
        except InvalidOperation:
            raise ValueError(f"'{text}' is not a number") from None
        # parsed exactly, no float rounding before the integrality check
        if not number.is_finite():
            raise ValueError(f"{text} is not a finite number")
        if number != number.to_integral_value():
            raise ValueError(f"{text} is not a whole number")
        return int(number)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"{value} is not a finite number")
        if not value.is_integer():
            raise ValueError(f"{value} is not a whole number")
        return int(value)

    raise ValueError(f"unsupported input type: {type(value).__name__}")


class FibonacciInput(BaseModel):
    position: int = Field(..., description="Position in the sequence")

    @field_validator("position", mode="before")
    @classmethod
    def normalize_position(cls, value: Any) -> int:
        return coerce_position(value)


class FibonacciSequenceInput(BaseModel):
    count: int = Field(..., description="Number of leading terms")

    @field_validator("count", mode="before")
    @classmethod
    def normalize_count(cls, value: Any) -> int:
        return coerce_position(value)


class FibonacciErrorKind(str, Enum):
    NEGATIVE_INPUT = "NegativeInput"
    INVALID_INPUT = "InvalidInput"


class FibonacciResult(BaseModel):
    operation: str = "fibonacci"
    ok: Literal[True] = True
    n: int
    result: int


class FibonacciSequenceResult(BaseModel):
    operation: str = "fibonacci_sequence"
    ok: Literal[True] = True
    count: int
    result: List[int]


class FibonacciError(BaseModel):
    operation: str = "fibonacci"
    ok: Literal[False] = False
    kind: FibonacciErrorKind
    message: str


FibonacciOutcome = Union[FibonacciResult, FibonacciError]
FibonacciSequenceOutcome = Union[FibonacciSequenceResult, FibonacciError]
