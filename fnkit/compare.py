""" Comparator functions in the style of cmp(): negative, zero, or positive depending on order. """

import functools
from typing import Any, Callable

from .array import strict_equal

Comparator = Callable[[Any, Any], int]


def default_comparator(a:Any, b:Any) -> int:
    """ Return 0 if <a> and <b> are strictly equal, otherwise 1 if <a> is greater, otherwise -1.
        Values that are equal but not strictly so (i.e. two distinct lists with the same items) compare as -1. """
    if strict_equal(a, b):
        return 0
    return 1 if a > b else -1


def inverse_comparator(comparator:Comparator) -> Comparator:
    """ Return a comparator that reverses the order given by <comparator>. """
    def inverse(a:Any, b:Any) -> int:
        return -1 * comparator(a, b)
    return inverse


def comparator_key(comparator:Comparator=default_comparator):
    """ Return a key function for sorted(), min(), etc. which orders items using <comparator>. """
    return functools.cmp_to_key(comparator)
