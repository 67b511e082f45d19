"""Assertion helpers used inside test bodies."""

from collections.abc import Callable
from dataclasses import dataclass
from numbers import Real
from typing import Any, Generic, TypeVar

T = TypeVar("T")

# Types compared by value in ``to_be``; everything else is compared by identity.
SCALAR_TYPES = (int, float, complex, str, bytes, bool, type(None))


class ExpectationError(AssertionError):
    """Raised when an assertion made through ``expect`` does not hold."""


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Expectation(Generic[T]):
    """Assertion handle around a single value.

    Every method checks one contract and raises ``ExpectationError`` when it
    is violated. Methods are independent, so a handle can be reused or thrown
    away after a single check.
    """

    value: T

    def to_be_defined(self) -> None:
        """Fail when the value is ``None``."""
        if self.value is None:
            raise ExpectationError(
                f"Expected value to be defined, but got {self.value!r}"
            )

    def to_be(self, expected: object) -> None:
        """Fail unless the value is strictly the same as ``expected``.

        Scalars of the same type compare by value, anything else must be the
        very same object. No coercion happens, so ``1`` is not ``True`` and
        ``[1]`` is not ``[1]``.
        """
        if self.value is expected:
            return
        if (
            type(self.value) is type(expected)
            and isinstance(expected, SCALAR_TYPES)
            and self.value == expected
        ):
            return
        raise ExpectationError(f"Expected {self.value!r} to be {expected!r}")

    def to_equal(self, expected: object) -> None:
        """Fail unless the value compares equal to ``expected``."""
        if self.value != expected:
            raise ExpectationError(f"Expected {self.value!r} to equal {expected!r}")

    def to_be_greater_than(self, expected: float) -> None:
        """Fail unless the value is a number strictly greater than ``expected``."""
        self._check_threshold(expected)
        if not _is_number(self.value) or not self.value > expected:  # type: ignore[operator]
            raise ExpectationError(
                f"Expected {self.value!r} to be greater than {expected!r}"
            )

    def to_be_less_than(self, expected: float) -> None:
        """Fail unless the value is a number strictly less than ``expected``."""
        self._check_threshold(expected)
        if not _is_number(self.value) or not self.value < expected:  # type: ignore[operator]
            raise ExpectationError(
                f"Expected {self.value!r} to be less than {expected!r}"
            )

    def to_throw(self, exc_type: type[Exception] | None = None) -> None:
        """Fail unless calling the value raises.

        Any ``Exception`` counts unless ``exc_type`` narrows it down. The
        violation is raised outside the ``try`` block, so it can never be
        mistaken for an exception coming from the function under test.
        """
        if not callable(self.value):
            raise ExpectationError("Expected value to be a function")
        func: Callable[[], Any] = self.value
        try:
            func()
        except Exception as exc:
            if exc_type is None or isinstance(exc, exc_type):
                return
            raise ExpectationError(
                f"Expected function to throw {exc_type.__name__}, "
                f"but it threw {type(exc).__name__}: {exc}"
            ) from exc
        raise ExpectationError("Expected function to throw an error, but it did not")

    @staticmethod
    def _check_threshold(expected: object) -> None:
        if not _is_number(expected):
            raise TypeError(
                f"Threshold must be a real number, got {type(expected).__name__}"
            )


def expect(value: T) -> Expectation[T]:
    """Wrap ``value`` in an assertion handle."""
    return Expectation(value)
