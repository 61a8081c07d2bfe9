# fpbox/ftypes.py
# Функциональные контейнеры: Box (identity), Maybe и Result
# Все три иммутабельны, каждая операция возвращает новый экземпляр.

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
R = TypeVar("R")


# своя копия identity: ftypes не зависит от других модулей
def _identity(x):
    return x


# Box (identity container)


@dataclass(frozen=True)
class Box(Generic[T]):
    """
    Коробка для одного значения.
    Box.wrap(value).map(f).map(g).unwrap(h)

    Ошибок не моделирует: исключение внутри f просто летит наружу.
    """

    value: T

    @staticmethod
    def wrap(value: T) -> "Box[T]":
        return Box(value)

    def map(self, fn: Callable[[T], U]) -> "Box[U]":
        return Box(fn(self.value))

    # терминальная операция: выходим из контейнера
    def unwrap(self, fn: Callable[[T], R] = _identity) -> R:
        return fn(self.value)

    fold = unwrap

    def __repr__(self) -> str:
        return f"Box({self.value!r})"


# Maybe (Present / Absent)


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """
    Maybe-обёртка (Option) как tagged union: тег is_some + значение.
    Фабрики: Maybe.some(v), Maybe.nothing(), Maybe.from_nullable(v).
    Методы: map, flat_map, get_or_else, fold.

    Тег хранится отдельно, поэтому Maybe.some(None) означает Present(None),
    а не Nothing.
    """

    is_some: bool
    value: Optional[T]

    # factories
    @staticmethod
    def some(value: T) -> "Maybe[T]":
        return Maybe(True, value)

    @staticmethod
    def nothing() -> "Maybe[Any]":
        return Maybe(False, None)

    @staticmethod
    def from_nullable(value: Optional[T], missing: Any = None) -> "Maybe[T]":
        """Значение, равное sentinel (по умолчанию None), → Nothing"""
        if value is missing or value == missing:
            return Maybe.nothing()
        return Maybe.some(value)

    # frozen init
    def __init__(self, is_some: bool, value: Optional[T] = None):
        object.__setattr__(self, "is_some", is_some)
        object.__setattr__(self, "value", value if is_some else None)

    @property
    def is_none(self) -> bool:
        return not self.is_some

    # functor / monad operations (работают только на Present)
    def map(self, fn: Callable[[T], U]) -> "Maybe[U]":
        return Maybe.some(fn(self.value)) if self.is_some else self  # type: ignore[return-value]

    def flat_map(self, fn: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        return fn(self.value) if self.is_some else self  # type: ignore[return-value]

    # extractors
    def get_or_else(self, fallback: Callable[[], U]) -> T | U:
        """fallback вызывается лениво, только для Nothing"""
        return self.value if self.is_some else fallback()  # type: ignore[return-value]

    def fold(self, on_none: Callable[[], R], on_some: Callable[[T], R]) -> R:
        return on_some(self.value) if self.is_some else on_none()  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"Some({self.value!r})" if self.is_some else "Nothing"


# Result (Success / Failure)


@dataclass(frozen=True)
class Result(Generic[E, T]):
    """
    Result<E, T>: Failure(error) слева, Success(value) справа.
    Ошибка хранится как значение, а не бросается исключением.

    Фабрики: Result.success(v), Result.failure(e)
    Методы: map, flat_map, map_failure, fold
    """

    is_failure: bool
    value: Union[E, T]

    # factories
    @staticmethod
    def success(value: T) -> "Result[Any, T]":
        return Result(False, value)

    @staticmethod
    def failure(error: E) -> "Result[E, Any]":
        return Result(True, error)

    # frozen init
    def __init__(self, is_failure: bool, value: Union[E, T]):
        object.__setattr__(self, "is_failure", is_failure)
        object.__setattr__(self, "value", value)

    @property
    def is_success(self) -> bool:
        return not self.is_failure

    # Failure проходит сквозь цепочку без изменений
    def map(self, fn: Callable[[T], U]) -> "Result[E, U]":
        return self if self.is_failure else Result.success(fn(self.value))  # type: ignore[arg-type, return-value]

    def flat_map(self, fn: Callable[[T], "Result[E, U]"]) -> "Result[E, U]":
        return self if self.is_failure else fn(self.value)  # type: ignore[arg-type, return-value]

    def map_failure(self, fn: Callable[[E], F]) -> "Result[F, T]":
        return Result.failure(fn(self.value)) if self.is_failure else self  # type: ignore[arg-type, return-value]

    def fold(self, on_failure: Callable[[E], R], on_success: Callable[[T], R]) -> R:
        if self.is_failure:
            return on_failure(self.value)  # type: ignore[arg-type]
        return on_success(self.value)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"Failure({self.value!r})" if self.is_failure else f"Success({self.value!r})"


# module-level aliases, как в заметках
wrap = Box.wrap
from_nullable = Maybe.from_nullable
success = Result.success
failure = Result.failure
