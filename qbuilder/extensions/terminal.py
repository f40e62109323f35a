from __future__ import annotations
import typing
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import QueryBuilder

class _TerminalOperations(Generic[T]):
    def to_array(self: 'QueryBuilder[T]') -> List[T]:
        """materialize as a new list; mutating it leaves the query untouched"""
        return list(self._get_data())

    to_list = to_array

    def to_dict(self: 'QueryBuilder[T]', key_selector: KeySelector[T, K],
                value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary; later items overwrite earlier keys"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._get_data()}

    def to_df(self: 'QueryBuilder[T]') -> pd.DataFrame:
        """convert records to a pandas dataframe"""
        return pd.DataFrame(self._get_data())

    def count(self: 'QueryBuilder[T]') -> int:
        """count elements"""
        return len(self._get_data())

    def any(self: 'QueryBuilder[T]') -> bool:
        """true when the sequence holds at least one element"""
        return self.count() > 0

    def all(self: 'QueryBuilder[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition; true for an empty sequence"""
        return all(predicate(x) for x in self._get_data())

    def first(self: 'QueryBuilder[T]') -> Optional[T]:
        """first element, or None when empty"""
        data = self._get_data()
        return data[0] if data else None

    def last(self: 'QueryBuilder[T]') -> Optional[T]:
        """last element, or None when empty"""
        data = self._get_data()
        return data[-1] if data else None
