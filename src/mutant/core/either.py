"""Two-variant result type used as the parse-phase error channel.

A value is either a :class:`Left` (carrying an error, by convention a
message string) or a :class:`Right` (carrying a successful result).
There is no implicit coercion between the two: consumers branch
explicitly, either with the combinators below or with structural
pattern matching::

    match apply(world, config, arguments):
        case Left(message):
            ...
        case Right(config):
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from mutant.exceptions import EitherError

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")


class Either(Generic[L, R]):
    """Abstract base of :class:`Left` and :class:`Right`."""

    __slots__ = ()

    value: Any

    def is_left(self) -> bool:
        return isinstance(self, Left)

    def is_right(self) -> bool:
        return isinstance(self, Right)

    def fmap(self, fn: Callable[[R], T]) -> Either[L, T]:
        """Map *fn* over a right value; lefts pass through untouched."""
        raise NotImplementedError  # pragma: no cover

    def bind(self, fn: Callable[[R], Either[L, T]]) -> Either[L, T]:
        """Chain *fn* (which itself returns an ``Either``) onto a right value."""
        raise NotImplementedError  # pragma: no cover

    def lmap(self, fn: Callable[[L], T]) -> Either[T, R]:
        """Map *fn* over a left value; rights pass through untouched."""
        raise NotImplementedError  # pragma: no cover

    def either(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        """Fold both arms into a single value."""
        raise NotImplementedError  # pragma: no cover

    def from_right(self) -> R:
        raise NotImplementedError  # pragma: no cover

    def from_left(self) -> L:
        raise NotImplementedError  # pragma: no cover

    @staticmethod
    def wrap_error(
        fn: Callable[[], T],
        *exceptions: type[BaseException],
    ) -> Either[BaseException, T]:
        """Call *fn*, turning any of *exceptions* into a :class:`Left`.

        Exceptions not listed propagate unchanged.
        """
        try:
            return Right(fn())
        except exceptions as exc:
            return Left(exc)


@dataclass(frozen=True, slots=True)
class Left(Either[L, R]):
    """Failure arm."""

    value: L

    def fmap(self, fn: Callable[[R], T]) -> Either[L, T]:
        return self  # type: ignore[return-value]

    def bind(self, fn: Callable[[R], Either[L, T]]) -> Either[L, T]:
        return self  # type: ignore[return-value]

    def lmap(self, fn: Callable[[L], T]) -> Either[T, R]:
        return Left(fn(self.value))

    def either(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        return on_left(self.value)

    def from_right(self) -> NoReturn:
        raise EitherError(f"Expected right value, got {self!r}")

    def from_left(self) -> L:
        return self.value


@dataclass(frozen=True, slots=True)
class Right(Either[L, R]):
    """Success arm."""

    value: R

    def fmap(self, fn: Callable[[R], T]) -> Either[L, T]:
        return Right(fn(self.value))

    def bind(self, fn: Callable[[R], Either[L, T]]) -> Either[L, T]:
        return fn(self.value)

    def lmap(self, fn: Callable[[L], T]) -> Either[T, R]:
        return self  # type: ignore[return-value]

    def either(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        return on_right(self.value)

    def from_right(self) -> R:
        return self.value

    def from_left(self) -> NoReturn:
        raise EitherError(f"Expected left value, got {self!r}")
