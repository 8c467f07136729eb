""" Unit tests for runtime type classification. """

import pytest

from fnkit import is_type, type_names


@pytest.mark.parametrize("obj, type_name, expected", [
    (None, "none", True),
    (0, "none", False),
    (True, "bool", True),
    (1, "bool", False),
    (1, "int", True),
    (True, "int", False),
    (1.0, "float", True),
    (1.0, "number", True),
    (3, "number", True),
    (False, "number", False),
    ("s", "str", True),
    (b"s", "bytes", True),
    ("s", "bytes", False),
    ([], "list", True),
    ((), "tuple", True),
    ({}, "dict", True),
    (frozenset(), "set", True),
    ([], "sequence", True),
    ("s", "sequence", False),
    ({}, "mapping", True),
    (len, "function", True),
    (1, "function", False),
])
def test_is_type(obj, type_name, expected) -> None:
    assert is_type(obj, type_name) is expected


def test_names() -> None:
    names = type_names()
    assert "int" in names and "function" in names
    with pytest.raises(ValueError, match="Unknown type name"):
        is_type(1, "integer")
