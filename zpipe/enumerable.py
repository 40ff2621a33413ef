from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- method chaining ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IEnum(ABC, _CoreOperations[T]):
    """
    a single-pass, pull-based cursor over values of type T.
    current() is only defined while over() is false, and so is advance().
    """

    @abstractmethod
    def current(self) -> T:
        """the element under the cursor"""
        pass

    @abstractmethod
    def over(self) -> bool:
        """true once no element remains"""
        pass

    @abstractmethod
    def advance(self) -> None:
        """move the cursor one element forward"""
        pass

    def copy(self) -> 'IEnum[T]':
        """an independent enumerator with the same cursor state"""
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        return clone

    def __copy__(self) -> 'IEnum[T]':
        return self.copy()

    def __or__(self, stage: Stage) -> Any:
        # e | f is f(e), nothing more
        return stage(self)

    def __iter__(self) -> Iterator[T]:
        # draining: the instance is spent once the loop ends
        while not self.over():
            yield self.current()
            self.advance()

    @property
    def to(self) -> TerminalAccessor[T]:
        return TerminalAccessor(self)

    def __str__(self) -> str:
        # printing must not consume the caller's instance
        from .render import render
        return render(self.copy())


def pipe(enum: Any, *stages: Stage) -> Any:
    """apply stages left to right: pipe(e, f, g) == g(f(e))"""
    result = enum
    for stage in stages:
        result = stage(result)
    return result
