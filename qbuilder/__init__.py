"""
    .---------------------.
    |  q . b u i l d e r  |
    '---------------------'
    chainable queries over in-memory records
"""

import logging

# expose the main classes
from .query import QueryBuilder

# expose the factory functions
from .factories import from_iterable, empty, Q

# expose supporting data classes and options
from .types import Grouping
from .config import QueryOptions, load_options

# library logging stays silent unless the host app configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "QueryBuilder",
    "from_iterable",
    "empty",
    "Q",
    "Grouping",
    "QueryOptions",
    "load_options",
]
