from pydantic import ValidationError

from ..models import FibonacciError, FibonacciErrorKind
from ..utils.logger import get_logger

logger = get_logger()


def handle_validation_error(
    error: ValidationError, operation: str = "fibonacci"
) -> FibonacciError:
    details = "; ".join(err["msg"] for err in error.errors())
    logger.warning(f"Input invalid for {operation}: {details}")
    return FibonacciError(
        operation=operation,
        kind=FibonacciErrorKind.INVALID_INPUT,
        message=details,
    )


def handle_negative_input(value: int, operation: str = "fibonacci") -> FibonacciError:
    message = f"Fibonacci not defined for negative numbers (got {value})"
    logger.warning(f"{operation}: {message}")
    return FibonacciError(
        operation=operation,
        kind=FibonacciErrorKind.NEGATIVE_INPUT,
        message=message,
    )
