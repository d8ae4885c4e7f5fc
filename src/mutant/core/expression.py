"""Match expressions and their parser.

A match expression selects the subjects eligible for mutation.  The
grammar is intentionally small::

    Foo::Bar        exact namespace
    Foo::Bar*       namespace and everything below it
    *               everything
    Foo::Bar#baz    instance method
    Foo::Bar.baz    singleton method
    Foo::Bar#       all instance methods of a scope
    Foo::Bar.       all singleton methods of a scope

Parsing never raises; it returns an :class:`~mutant.core.either.Either`
so that the option parser can thread failures into its own result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from mutant.core.either import Either, Left, Right

_SCOPE_NAME = r"[A-Z][A-Za-z0-9_]*"
_NAMESPACE = rf"{_SCOPE_NAME}(?:::{_SCOPE_NAME})*"
_METHOD_NAME = r"(?:[A-Za-z_][A-Za-z0-9_]*[?!=]?|\[\]=?|<=>|===?|=~|!=|!~|<<|>>|<=|>=|\*\*|[+\-*/%<>!~&|^]|[+\-~]@)"
_SCOPE_SYMBOL = r"[.#]"


class Expression:
    """Base class of all match expressions."""

    __slots__ = ()

    @property
    def syntax(self) -> str:
        raise NotImplementedError  # pragma: no cover

    def match_length(self, other: Expression) -> int:
        """Return how specifically this expression matches *other*.

        Zero means no match; otherwise the length of the matched syntax.
        """
        if self.syntax == other.syntax:
            return len(self.syntax)
        return 0

    def is_prefix_of(self, other: Expression) -> bool:
        return self.match_length(other) > 0

    def __str__(self) -> str:
        return self.syntax


@dataclass(frozen=True, slots=True)
class ExactNamespace(Expression):
    """``Foo::Bar`` — matches exactly one scope."""

    scope_name: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(rf"\A(?P<scope_name>{_NAMESPACE})\Z")

    @property
    def syntax(self) -> str:
        return self.scope_name


@dataclass(frozen=True, slots=True)
class RecursiveNamespace(Expression):
    """``Foo::Bar*`` — matches a scope and everything nested in it."""

    scope_name: str = ""

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(rf"\A(?P<scope_name>{_NAMESPACE})?\*\Z")

    @property
    def syntax(self) -> str:
        return f"{self.scope_name}*"

    def match_length(self, other: Expression) -> int:
        if not self.scope_name:
            return 1
        other_syntax = other.syntax
        if other_syntax == self.scope_name or re.match(
            rf"\A{re.escape(self.scope_name)}(?:::|[.#]|\Z)", other_syntax
        ):
            return len(self.scope_name)
        return 0


@dataclass(frozen=True, slots=True)
class Method(Expression):
    """``Foo#bar`` / ``Foo.bar`` — matches a single method."""

    scope_name: str
    scope_symbol: str
    method_name: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        rf"\A(?P<scope_name>{_NAMESPACE})(?P<scope_symbol>{_SCOPE_SYMBOL})"
        rf"(?P<method_name>{_METHOD_NAME})\Z"
    )

    @property
    def syntax(self) -> str:
        return f"{self.scope_name}{self.scope_symbol}{self.method_name}"


@dataclass(frozen=True, slots=True)
class Methods(Expression):
    """``Foo#`` / ``Foo.`` — matches every method of one kind on a scope."""

    scope_name: str
    scope_symbol: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        rf"\A(?P<scope_name>{_NAMESPACE})(?P<scope_symbol>{_SCOPE_SYMBOL})\Z"
    )

    @property
    def syntax(self) -> str:
        return f"{self.scope_name}{self.scope_symbol}"

    def match_length(self, other: Expression) -> int:
        if isinstance(other, Method) and other.syntax.startswith(self.syntax):
            return len(self.syntax)
        return Expression.match_length(self, other)


class ExpressionParser:
    """Parse expression strings against a fixed set of expression types."""

    TYPES: tuple[type[Expression], ...] = (
        ExactNamespace,
        RecursiveNamespace,
        Method,
        Methods,
    )

    def __init__(self, types: tuple[type[Expression], ...] | None = None) -> None:
        self._types: tuple[type[Expression], ...] = types or self.TYPES

    def parse(self, text: str) -> Either[str, Expression]:
        """Parse *text* into an :class:`Expression`.

        Returns a :class:`Left` with a message when no type (or more
        than one) accepts the input.
        """
        candidates = [
            expression
            for expression in (self._try_parse(kind, text) for kind in self._types)
            if expression is not None
        ]
        if not candidates:
            return Left(f'Expression: "{text}" is not valid')
        if len(candidates) > 1:
            return Left(f'Expression: "{text}" is ambiguous')
        return Right(candidates[0])

    def __call__(self, text: str) -> Either[str, Expression]:
        return self.parse(text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpressionParser):
            return NotImplemented
        return self._types == other._types

    def __hash__(self) -> int:
        return hash(self._types)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(types={self._types!r})"

    @staticmethod
    def _try_parse(kind: type[Expression], text: str) -> Expression | None:
        match = kind.PATTERN.match(text)  # type: ignore[attr-defined]
        if match is None:
            return None
        fields = {key: value for key, value in match.groupdict().items() if value is not None}
        return kind(**fields)
