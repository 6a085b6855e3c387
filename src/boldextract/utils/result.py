"""Minimal ``Result[T, E]`` container for fallible operations.

A result is either ``ok`` and carries a value, or ``err`` and carries an
error.  Reading the wrong side raises :class:`ValueError`.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")

_MISSING = object()


class Result(Generic[T, E]):
    """Success value or error, never both."""

    __slots__ = ("_value", "_error")

    def __init__(self, value: object = _MISSING, error: object = _MISSING) -> None:
        if (value is _MISSING) == (error is _MISSING):
            raise ValueError("Result requires exactly one of value or error")
        self._value = value
        self._error = error

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(value=value)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self._error is _MISSING

    @property
    def is_err(self) -> bool:
        return not self.is_ok

    @property
    def value(self) -> T:
        if self.is_err:
            raise ValueError("Called value on Result.err")
        return self._value  # type: ignore[return-value]

    @property
    def error(self) -> E:
        if self.is_ok:
            raise ValueError("Called error on Result.ok")
        return self._error  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self.is_ok:
            return f"Result.ok({self._value!r})"
        return f"Result.err({self._error!r})"


__all__ = ["Result"]
