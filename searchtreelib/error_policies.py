"""
Error handling policies for SearchTreeLib.

Tree operations themselves never fail for well-ordered values, but visitors
are caller code and may raise. This module provides a flexible error handling
system through the Policy pattern, letting users decide what a traversal does
when its visitor fails on a value.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
import sys

from .config import TraversalOrder


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors
    raised by a visitor during traversal. Returning normally lets the
    traversal continue with the next value; raising stops it.
    """

    @abstractmethod
    def handle(self, error: Exception, value: Any, order: TraversalOrder) -> None:
        """
        Handle an error raised by a visitor.

        Args:
            error: The exception that was raised
            value: The value being visited when the error occurred
            order: The traversal order in progress
        """
        pass


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping traversal.

    This is the default behavior - the visitor's exception propagates to
    the caller unchanged, exactly as if no policy were involved.
    """

    def handle(self, error: Exception, value: Any, order: TraversalOrder) -> None:
        """Re-raise the error immediately."""
        raise error


def _error_record(error: Exception, value: Any, order: TraversalOrder) -> Dict[str, Any]:
    return {
        'value': value,
        'order': order.value,
        'error': error,
        'error_type': type(error).__name__,
        'error_message': str(error),
    }


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that reports errors and continues traversal.

    Errors are collected for later inspection and the traversal moves on to
    the next value. Useful when a visitor should process as much as possible
    despite some failures.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors: List[Dict[str, Any]] = []
        self.verbose = verbose

    def handle(self, error: Exception, value: Any, order: TraversalOrder) -> None:
        """Record the error, warn if verbose, and continue."""
        self.errors.append(_error_record(error, value, order))

        if self.verbose:
            print(f"\nWARNING: Visitor failed on value {value!r} during {order.value} traversal: {error}",
                  file=sys.stderr)

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with the error count, counts per exception type,
            the values that failed, and full error details
        """
        by_type: Dict[str, int] = {}
        for record in self.errors:
            by_type[record['error_type']] = by_type.get(record['error_type'], 0) + 1

        return {
            'total_errors': len(self.errors),
            'by_type': by_type,
            'failed_values': [record['value'] for record in self.errors],
            'errors': self.errors,
        }


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that collects all errors without output, for batch processing.

    Similar to ContinueOnErrorsPolicy but silent.
    """

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []

    def handle(self, error: Exception, value: Any, order: TraversalOrder) -> None:
        """Silently collect the error."""
        self.errors.append(_error_record(error, value, order))


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when a few failures are expected but many indicate
    a systemic problem with the visitor.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, print warnings for errors
        """
        self.max_errors = max_errors
        self.error_count = 0
        self.verbose = verbose
        self.errors: List[Exception] = []

    def handle(self, error: Exception, value: Any, order: TraversalOrder) -> None:
        """Continue if under threshold, otherwise raise."""
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            raise RuntimeError(f"Error threshold exceeded ({self.max_errors} errors)") from error

        if self.verbose:
            print(f"\nWARNING [{self.error_count}/{self.max_errors}]: Visitor failed on value {value!r}: {error}",
                  file=sys.stderr)
