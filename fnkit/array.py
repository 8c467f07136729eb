""" Utility module for shallow equality of sequences and mappings.
    Equality here is strict: objects are compared by identity, and only primitive values by value. """

from typing import Any, Mapping, Sequence

# Types compared by value. Anything else must be the same object to be equal.
PRIMITIVE_TYPES = frozenset([type(None), bool, int, float, complex, str, bytes])


def strict_equal(a:Any, b:Any, _primitives=PRIMITIVE_TYPES) -> bool:
    """ Return True if <a> and <b> are the same object, or are primitives of the same kind with equal values.
        Booleans are their own kind; True does not equal 1 here even though Python says it does. """
    if a is b:
        return True
    tp_a = type(a)
    tp_b = type(b)
    if tp_a not in _primitives or tp_b not in _primitives:
        return False
    return (tp_a is bool) == (tp_b is bool) and a == b


def shallow_equal(seq_a:Sequence, seq_b:Sequence) -> bool:
    """ Return True if both sequences have the same length and every pair of elements is strictly equal.
        Nested containers are not recursed into. """
    if len(seq_a) != len(seq_b):
        return False
    return all(map(strict_equal, seq_a, seq_b))


def shallow_equal_mappings(map_a:Mapping, map_b:Mapping) -> bool:
    """ Return True if both mappings have the same keys and strictly equal values under every key.
        Key order does not matter. """
    if len(map_a) != len(map_b):
        return False
    for k, v in map_a.items():
        if k not in map_b or not strict_equal(v, map_b[k]):
            return False
    return True
