""" Wrappers that check the first argument of a call before passing it along.

    On success, the validated function returns the first argument itself. On failure it returns the result of
    the <on_error> fallback, which receives *every* original argument (not only the one that failed), so it has
    the full context to build a substitute. Without a fallback, failure raises ValidationError. """

from typing import Any, Callable, Tuple, Type, TypeVar, Union

from .exception import ValidationError
from .typecheck import get_type_check

T = TypeVar("T")

Fallback = Callable[..., Any]
ClassInfo = Union[Type[T], Tuple[type, ...]]  # Anything isinstance() accepts as its second argument.


def _class_names(cls:ClassInfo) -> str:
    """ Name one class, or every class in a tuple of them. """
    if isinstance(cls, tuple):
        return " or ".join(map(_class_names, cls))
    return getattr(cls, "__name__", repr(cls))


def _first_arg(args:tuple) -> Any:
    """ A call with no arguments is checked as if None had been passed. """
    return args[0] if args else None


def create_single_arg_instance_validation(cls:ClassInfo, on_error:Fallback=None) -> Callable[..., T]:
    """ Return a function that passes through its first argument if it is an instance of <cls>. """
    def validated(*args:Any) -> T:
        value = _first_arg(args)
        if isinstance(value, cls):
            return value
        if on_error is not None:
            return on_error(*args)
        raise ValidationError(f'Provided arg must have instance of {_class_names(cls)}')
    return validated


def create_single_arg_type_validation(type_name:str, on_error:Fallback=None) -> Callable[..., Any]:
    """ Return a function that passes through its first argument if it has the primitive type named <type_name>.
        See typecheck.TYPE_CHECKS for the valid names. """
    check = get_type_check(type_name)
    def validated(*args:Any) -> Any:
        value = _first_arg(args)
        if check(value):
            return value
        if on_error is not None:
            return on_error(*args)
        raise ValidationError(f'Provided arg must have {type_name} type')
    return validated
