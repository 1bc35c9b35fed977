"""
Iterative Fibonacci computation.

Both entry points accept a position as a number or numeric string and never
raise for bad input: they return a FibonacciError value instead.
"""

from typing import Any, Iterator

from pydantic import ValidationError

from ..exceptions.handlers import handle_negative_input, handle_validation_error
from ..models import (FibonacciInput, FibonacciOutcome, FibonacciResult,
                      FibonacciSequenceInput, FibonacciSequenceOutcome,
                      FibonacciSequenceResult)
from ..utils.logger import get_logger

logger = get_logger()


def _iterate(count: int) -> Iterator[int]:
    """Yield F(0) .. F(count - 1) keeping only the two previous terms."""
    second_prev, first_prev = 0, 1
    for _ in range(count):
        yield second_prev
        second_prev, first_prev = first_prev, first_prev + second_prev


def _compute(n: int) -> int:
    if n == 0:
        return 0
    if n == 1:
        return 1

    first_prev, second_prev = 1, 0  # F(1), F(0)
    for _ in range(2, n + 1):
        first_prev, second_prev = first_prev + second_prev, first_prev
    return first_prev


def fibonacci(position: Any) -> FibonacciOutcome:
    """Return F(position) as a FibonacciResult, or a FibonacciError.

    Errors are InvalidInput for text or numbers that are not whole and
    finite, and NegativeInput for positions below zero.
    """
    try:
        data = FibonacciInput(position=position)
    except ValidationError as e:
        return handle_validation_error(e, operation="fibonacci")

    if data.position < 0:
        return handle_negative_input(data.position, operation="fibonacci")

    result = _compute(data.position)
    logger.debug(f"fibonacci({data.position}) = {result}")
    return FibonacciResult(n=data.position, result=result)


def fibonacci_sequence(count: Any) -> FibonacciSequenceOutcome:
    """Return the first `count` Fibonacci numbers, starting at F(0)."""
    try:
        data = FibonacciSequenceInput(count=count)
    except ValidationError as e:
        return handle_validation_error(e, operation="fibonacci_sequence")

    if data.count < 0:
        return handle_negative_input(data.count, operation="fibonacci_sequence")

    sequence = list(_iterate(data.count))
    logger.debug(f"fibonacci_sequence({data.count}) computed {len(sequence)} terms")
    return FibonacciSequenceResult(count=data.count, result=sequence)
