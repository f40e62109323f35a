from __future__ import annotations
import logging
import math
import typing
import numpy as np
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import QueryBuilder

logger = logging.getLogger(__name__)

class _StatsOperations(Generic[T]):
    def _get_values(self: 'QueryBuilder[T]', key: FieldOrSelector[T]) -> List[Union[int, float]]:
        """helper to extract coerced numeric values for sum/avg."""
        selector = field_selector(key)
        strict = self._options.strict_numbers
        values = [to_number(selector(item), strict=strict) for item in self._get_data()]
        if not strict and any(isinstance(v, float) and math.isnan(v) for v in values):
            logger.debug("non-numeric values in %r coerced to nan", key)
        return values

    def sum(self: 'QueryBuilder[T]', key: FieldOrSelector[T]) -> Union[int, float]:
        """sum of a numeric field; 0 for an empty sequence"""
        values = self._get_values(key)
        if not values: return 0
        try:
            arr = np.asarray(values)
        except (TypeError, ValueError, OverflowError):
            # mixed types numpy can't hold in one array
            return sum(values)
        # fixed-width int dtypes wrap on overflow; python ints are exact
        if arr.dtype.kind in 'iub': return sum(values)
        result = np.sum(arr)
        return result.item() if hasattr(result, 'item') else result

    def avg(self: 'QueryBuilder[T]', key: FieldOrSelector[T]) -> float:
        """average of a numeric field; 0 for an empty sequence"""
        count = self.count()
        if count == 0: return 0
        return self.sum(key) / count

    def _extreme(self: 'QueryBuilder[T]', key: FieldOrSelector[T], wins: Callable[[Any, Any], bool]) -> Optional[T]:
        """scan for the record whose value beats every earlier one; ties keep the first"""
        data = self._get_data()
        if not data: return None
        selector = field_selector(key)
        best, best_value = data[0], selector(data[0])
        for item in data[1:]:
            value = selector(item)
            if wins(value, best_value):
                best, best_value = item, value
        return best

    def max(self: 'QueryBuilder[T]', key: FieldOrSelector[T]) -> Optional[T]:
        """the whole record holding the largest field value, or None when empty"""
        return self._extreme(key, lambda value, best: value > best)

    def min(self: 'QueryBuilder[T]', key: FieldOrSelector[T]) -> Optional[T]:
        """the whole record holding the smallest field value, or None when empty"""
        return self._extreme(key, lambda value, best: value < best)
