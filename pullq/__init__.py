"""
'              .__  .__
'   ______ __ _|  | |  |   ______
'   \____ \  |  \  | |  |  / ____/
'   |  |_> >  |  /  |_|  |_< <_|  |
'   |   __/|____/|____/____/\__   |
'   |__|                       |__|
"""

import logging

# expose the main class
from .iterator import PullIterator

# expose the contract and the canonical sources
from .types import Producible, EXHAUSTED
from .sources import ArraySource, MappingSource, IterableSource

# expose the factory functions
from .factories import (
    iterate,
    from_list,
    from_mapping,
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    pullq,
    P
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "PullIterator",
    "Producible",
    "EXHAUSTED",
    "ArraySource",
    "MappingSource",
    "IterableSource",
    "iterate",
    "from_list",
    "from_mapping",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "pullq",
    "P"
]
