from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import IEnum

# every terminal drains the enumerator it is given, in place


class ToVector:
    """all remaining elements, in traversal order"""

    def __call__(self, enum: 'IEnum[T]') -> List[T]:
        result = []
        while not enum.over():
            result.append(enum.current())
            enum.advance()
        return result


to_vector = ToVector()


class ToArray:
    """drain into a numpy array"""

    def __init__(self, dtype: typing.Any = None):
        self.dtype = dtype

    def __call__(self, enum: 'IEnum[T]') -> np.ndarray:
        return np.array(to_vector(enum), dtype=self.dtype)


to_array = ToArray()


class ToSeries:
    """drain into a pandas series"""

    def __init__(self, name: Optional[str] = None):
        self.name = name

    def __call__(self, enum: 'IEnum[T]') -> pd.Series:
        return pd.Series(to_vector(enum), name=self.name)


to_series = ToSeries()


# --- folds ---

class Aggregate(Generic[T]):
    """
    fold seeded with the first element: acc = f(acc, x) over the rest.
    an empty enumerator gives back `default` instead of failing.
    """

    def __init__(self, f: BinaryOp[T], default: Optional[T] = None):
        self.f = f
        self.default = default

    def __call__(self, enum: 'IEnum[T]') -> Optional[T]:
        if enum.over():
            return self.default
        result = enum.current()
        enum.advance()
        while not enum.over():
            result = self.f(result, enum.current())
            enum.advance()
        return result


class Aggregate2(Generic[T, U]):
    """left fold from an explicit seed, which may be of another type than the elements"""

    def __init__(self, f: Accumulator[U, T], init: U):
        self.f = f
        self.init = init

    def __call__(self, enum: 'IEnum[T]') -> U:
        result = self.init
        while not enum.over():
            result = self.f(result, enum.current())
            enum.advance()
        return result


def iaggregate(f: BinaryOp[T], default: Optional[T] = None) -> Aggregate[T]:
    return Aggregate(f, default)


def iaggregate2(f: Accumulator[U, T], init: U) -> Aggregate2[T, U]:
    return Aggregate2(f, init)


class Max:
    def __call__(self, u, v):
        return v if v > u else u


class Min:
    def __call__(self, u, v):
        return v if v < u else u


class Sum:
    def __call__(self, u, v):
        return u + v


class Count(Generic[T]):
    """one more each time the element equals x"""

    def __init__(self, x: T):
        self.x = x

    def __call__(self, u: int, v: T) -> int:
        return u + 1 if v == self.x else u


class Concat(Generic[T]):
    """u + separator + v; nothing leads or trails"""

    def __init__(self, separator: T):
        self.separator = separator

    def __call__(self, u: T, v: T) -> T:
        return u + self.separator + v


def imax(default: Optional[T] = None) -> Aggregate[T]:
    return Aggregate(Max(), default)


def imin(default: Optional[T] = None) -> Aggregate[T]:
    return Aggregate(Min(), default)


def isum(init: U = 0) -> Aggregate2[T, U]:
    return Aggregate2(Sum(), init)


def icount(x: T, init: int = 0) -> Aggregate2[T, int]:
    return Aggregate2(Count(x), init)


def iconcat(separator: str = '', n: int = 1) -> Aggregate[str]:
    """
    join text elements. iconcat() joins with nothing, iconcat(', ') with the
    given text, iconcat('-', 3) with '---'. an empty enumerator gives ''.
    """
    return Aggregate(Concat(separator * n), '')


# --- quantifiers ---

class All(Generic[T]):
    """false at the first element failing f, true otherwise (including empty)"""

    def __init__(self, f: Predicate[T]):
        self.f = f

    def __call__(self, enum: 'IEnum[T]') -> bool:
        while not enum.over():
            if not self.f(enum.current()):
                return False
            enum.advance()
        return True


# shadows the typing.Any pulled in by the star import; annotations spell out typing.Any
class Any(Generic[T]):
    """true at the first element satisfying f, false otherwise (including empty)"""

    def __init__(self, f: Predicate[T]):
        self.f = f

    def __call__(self, enum: 'IEnum[T]') -> bool:
        while not enum.over():
            if self.f(enum.current()):
                return True
            enum.advance()
        return False


def iall(f: Predicate[T]) -> All[T]:
    return All(f)


def iany(f: Predicate[T]) -> Any[T]:
    return Any(f)


# --- accessor ---

_NO_SEED = object()

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'IEnum[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return to_vector(self._enumerable)

    def array(self, dtype: typing.Any = None) -> np.ndarray:
        """convert to numpy array"""
        return ToArray(dtype)(self._enumerable)

    def series(self, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series"""
        return ToSeries(name)(self._enumerable)

    def aggregate(self, accumulator: Callable, seed: typing.Any = _NO_SEED, default: typing.Any = None) -> typing.Any:
        """fold; with a seed it is a left fold from it, without one it starts at the first element"""
        if seed is not _NO_SEED:
            return Aggregate2(accumulator, seed)(self._enumerable)
        return Aggregate(accumulator, default)(self._enumerable)

    def max(self, default: Optional[T] = None) -> Optional[T]:
        return imax(default)(self._enumerable)

    def min(self, default: Optional[T] = None) -> Optional[T]:
        return imin(default)(self._enumerable)

    def sum(self, init: typing.Any = 0) -> typing.Any:
        return isum(init)(self._enumerable)

    def count(self, x: T, init: int = 0) -> int:
        """how many elements equal x"""
        return icount(x, init)(self._enumerable)

    def concat(self, separator: str = '', n: int = 1) -> str:
        return iconcat(separator, n)(self._enumerable)

    def all(self, predicate: Predicate[T]) -> bool:
        return All(predicate)(self._enumerable)

    def any(self, predicate: Predicate[T]) -> bool:
        return Any(predicate)(self._enumerable)
