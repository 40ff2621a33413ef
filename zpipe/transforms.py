from .types import *
from .enumerable import IEnum


class SelectEnum(IEnum[U]):
    """each element of the wrapped enumerator passed through f. same length, same order."""

    def __init__(self, source: IEnum[T], f: Selector[T, U]):
        self._source = source.copy()
        self._f = f

    def current(self) -> U:
        return self._f(self._source.current())

    def over(self) -> bool:
        return self._source.over()

    def advance(self) -> None:
        self._source.advance()

    def copy(self) -> 'SelectEnum[U]':
        clone = super().copy()
        clone._source = self._source.copy()
        return clone

    def __repr__(self) -> str:
        return f"SelectEnum({self._source!r})"


class WhereEnum(IEnum[T]):
    """
    the elements of the wrapped enumerator that satisfy f, in order.
    construction already skips leading non-matches, so current() never
    shows an element that fails f.
    """

    def __init__(self, source: IEnum[T], f: Predicate[T]):
        self._source = source.copy()
        self._f = f
        self._skip()

    def _skip(self) -> None:
        while not self._source.over() and not self._f(self._source.current()):
            self._source.advance()

    def current(self) -> T:
        return self._source.current()

    def over(self) -> bool:
        return self._source.over()

    def advance(self) -> None:
        self._source.advance()
        self._skip()

    def copy(self) -> 'WhereEnum[T]':
        clone = super().copy()
        clone._source = self._source.copy()
        return clone

    def __repr__(self) -> str:
        return f"WhereEnum({self._source!r})"


class Select(Generic[T, U]):
    """stage object: Select(f)(e) maps e through f"""

    def __init__(self, f: Selector[T, U]):
        self.f = f

    def __call__(self, enum: IEnum[T]) -> SelectEnum[U]:
        return SelectEnum(enum, self.f)


class Where(Generic[T]):
    """stage object: Where(f)(e) keeps the elements of e that satisfy f"""

    def __init__(self, f: Predicate[T]):
        self.f = f

    def __call__(self, enum: IEnum[T]) -> WhereEnum[T]:
        return WhereEnum(enum, self.f)


def iselect(f: Selector[T, U]) -> Select[T, U]:
    return Select(f)


def iwhere(f: Predicate[T]) -> Where[T]:
    return Where(f)
