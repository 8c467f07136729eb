""" Utility module for functional operations. """

import functools
from typing import Callable, Generic, TypeVar

P = TypeVar("P")  # Parameter type of the first function.
R = TypeVar("R")  # Return type of the last function.
X = TypeVar("X")  # Return type of a function added to the end.


def nop(*args, **kwargs) -> None:
    """ ... """


class FunctionComposer(Generic[P, R]):
    """ Builds a chain of functions, each receiving the result of the last.
        Composers are immutable; next() returns a new one and leaves this one usable as it was.
        Nothing in the chain is called until the produced function is. """

    def __init__(self, func:Callable[[P], R]) -> None:
        self._func = func  # Composition of every function added so far.

    def next(self, new_func:Callable[[R], X]) -> "FunctionComposer[P, X]":
        """ Return a composer for a function that calls <new_func> on the result of the current one.
            The first function in the chain receives all of the original arguments. """
        func = self._func
        def composed(*args, **kwargs):
            return new_func(func(*args, **kwargs))
        return FunctionComposer(composed)

    def produce(self) -> Callable[[P], R]:
        """ Return the finished function. """
        return self._func


def compose(func:Callable[[P], R]) -> FunctionComposer[P, R]:
    """ Start a new composition with <func> as the first function called. """
    return FunctionComposer(func)


def _identity(x):
    return x


def pipe(*funcs:Callable) -> Callable:
    """ Compose a series of n callables to create a single callable that combines
        their effects, calling each one in turn with the result of the previous.
        The order is defined such that the first callable in the sequence receives
        the original arguments, i.e. pipe(h, g, f)(*args) evaluates to f(g(h(*args))). """
    # Degenerate case: composition of 0 functions = identity function (single argument only).
    if not funcs:
        return _identity
    f_first, *f_rest = funcs
    return functools.reduce(FunctionComposer.next, f_rest, compose(f_first)).produce()
