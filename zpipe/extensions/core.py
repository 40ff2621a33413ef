from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import IEnum
    from ..transforms import SelectEnum, WhereEnum


class _CoreOperations(Generic[T]):
    def where(self: 'IEnum[T]', predicate: Predicate[T]) -> 'WhereEnum[T]':
        """filter elements based on a predicate"""
        from ..transforms import WhereEnum
        return WhereEnum(self, predicate)

    def select(self: 'IEnum[T]', selector: Selector[T, U]) -> 'SelectEnum[U]':
        """project each element to a new form"""
        from ..transforms import SelectEnum
        return SelectEnum(self, selector)

    def pipe(self: 'IEnum[T]', *stages: Stage) -> Any:
        """apply stages left to right, starting from this enumerator"""
        from ..enumerable import pipe
        return pipe(self, *stages)
