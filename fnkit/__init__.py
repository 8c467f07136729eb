""" Package for generic functional helpers that could be useful in many applications.
    They are sorted into modules based on operation type, but are all accessible from the top-level package:

    cache - The main attraction. memoize and memoize_func wrap any function in a bounded cache of previous calls,
    matched by strict (identity or primitive value) equality of the arguments, with first-in, first-out eviction.
    The module is named for the cache so that fnkit.memoize is always the decorator.

    compare - cmp-style comparators and a way to flip them.

    functional - A builder for left-to-right function composition, and the do-nothing function.

    validate - Wrappers that check the type or class of the first argument of a call, with optional fallbacks.

    array, typecheck - The equality and type tests used by the above.

    config, log, exception - Support for reading default options from .cfg files, writing trace messages to
    streams, and the exception types raised by this package. """

from .array import *
from .cache import *
from .compare import *
from .config import *
from .exception import *
from .functional import *
from .log import *
from .typecheck import *
from .validate import *
