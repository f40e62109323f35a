from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *
from .config import QueryOptions, load_options

# --- operation mixins ---
from .extensions.core import _CoreOperations
from .extensions.grouping import _GroupingOperations
from .extensions.join import _JoinOperations
from .extensions.stats import _StatsOperations
from .extensions.terminal import _TerminalOperations

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IQuery(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base query implementation ---

class _BaseQuery(IQuery[T]):
    def __init__(self, items: Optional[Iterable[T]] = None, options: Optional[QueryOptions] = None):
        """init with an optional starting sequence; evaluation is always eager"""
        self._items: List[T] = list(items) if items is not None else []
        self._options = options if options is not None else load_options()

    def _get_data(self) -> List[T]:
        return self._items

    def _derive(self, items: Iterable[Any]) -> 'QueryBuilder[Any]':
        """wrap a freshly computed sequence in a new engine sharing these options"""
        return QueryBuilder(items, self._options)

    @property
    def options(self) -> QueryOptions:
        return self._options

    def from_(self, items: Iterable[T]) -> 'QueryBuilder[T]':
        """replace the wrapped sequence in place and return this same engine"""
        self._items = list(items)
        logger.debug("source replaced with %d items", len(self._items))
        return self

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(items={len(self._items)})"

# --- main query class ---

class QueryBuilder(
    _BaseQuery[T],
    _CoreOperations[T],
    _GroupingOperations[T],
    _JoinOperations[T],
    _StatsOperations[T],
    _TerminalOperations[T]
):
    """
    a chainable, eager query builder over in-memory records.

    every operator except `from_` returns a new engine wrapping a new list,
    so a query can be branched freely:

        adults = QueryBuilder(people).where(lambda p: p['age'] >= 18)
        names = adults.order_by('name').select('name').to_array()
        oldest = adults.max('age')
    """
