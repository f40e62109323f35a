import typing
from .types import *
from .config import QueryOptions

if typing.TYPE_CHECKING:
    from .query import QueryBuilder

def from_iterable(data: Iterable[T], options: Optional[QueryOptions] = None) -> 'QueryBuilder[T]':
    """create a query from any iterable"""
    from .query import QueryBuilder
    return QueryBuilder(data, options)

def empty(options: Optional[QueryOptions] = None) -> 'QueryBuilder[Any]':
    """create an empty query"""
    from .query import QueryBuilder
    return QueryBuilder(None, options)

# --- aliases ---
Q = from_iterable
