""" Runtime classification of values by primitive type name. """

from collections.abc import Mapping, Sequence
from numbers import Number
from typing import Any, Callable, Dict, List


def _is_int(obj:Any) -> bool:
    return isinstance(obj, int) and not isinstance(obj, bool)


def _is_number(obj:Any) -> bool:
    return isinstance(obj, Number) and not isinstance(obj, bool)


# Predicates keyed by the type name used to request them.
TYPE_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "none":     lambda obj: obj is None,
    "bool":     lambda obj: isinstance(obj, bool),
    "int":      _is_int,
    "float":    lambda obj: isinstance(obj, float),
    "number":   _is_number,
    "str":      lambda obj: isinstance(obj, str),
    "bytes":    lambda obj: isinstance(obj, (bytes, bytearray)),
    "list":     lambda obj: isinstance(obj, list),
    "tuple":    lambda obj: isinstance(obj, tuple),
    "dict":     lambda obj: isinstance(obj, dict),
    "set":      lambda obj: isinstance(obj, (set, frozenset)),
    "sequence": lambda obj: isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray)),
    "mapping":  lambda obj: isinstance(obj, Mapping),
    "function": callable,
}


def type_names() -> List[str]:
    """ Return every type name that is_type() accepts. """
    return [*TYPE_CHECKS]


def get_type_check(type_name:str) -> Callable[[Any], bool]:
    """ Return the predicate for <type_name>. An unknown name raises ValueError. """
    try:
        return TYPE_CHECKS[type_name]
    except KeyError:
        raise ValueError(f'Unknown type name "{type_name}". Valid names: {", ".join(TYPE_CHECKS)}') from None


def is_type(obj:Any, type_name:str) -> bool:
    """ Return True if <obj> belongs to the primitive type called <type_name>.
        Booleans are never counted as numbers. """
    return get_type_check(type_name)(obj)
