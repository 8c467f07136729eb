""" Module for a bounded memoization cache that works on functions of any arity.

    Calls are remembered by their exact arguments under strict equality: primitives by value, everything else by
    identity. Two distinct lists with the same contents are two different calls. This avoids any requirement that
    arguments be hashable, at the cost of a linear scan through the cache on every call. Keep caches small.

    Eviction is first-in, first-out. A cache hit does not refresh its record, so the oldest record to be *stored*
    is always the next to go, no matter how often it is used. """

from collections import deque, namedtuple
import functools
import math
import sys
from types import MethodType
from typing import Any, Callable, Deque, Generic, Optional, TypeVar

from .array import shallow_equal, shallow_equal_mappings
from .exception import ExceptionLogger

__all__ = ["CacheInfo", "CallRecord", "MemoizeOptions", "MemoizedFunction", "memoize_func", "memoize"]

R = TypeVar("R")  # Return type of the wrapped function.

LogFn = Callable[[str], Any]

CacheInfo = namedtuple("CacheInfo", "hits misses maxsize currsize")


class CallRecord(namedtuple("CallRecord", "args kwargs result")):
    """ The arguments of one call to a wrapped function along with its result. """

    __slots__ = ()

    def matches(self, args:tuple, kwargs:dict) -> bool:
        """ Return True if <args> and <kwargs> are shallowly equal to the arguments of this call. """
        return shallow_equal(self.args, args) and shallow_equal_mappings(self.kwargs, kwargs)


class MemoizeOptions:
    """ Options for a memoized function. """

    def __init__(self, cache_size:Optional[int]=None) -> None:
        self.cache_size = self._check_size(cache_size)  # Maximum number of call records, or None for no limit.

    @staticmethod
    def _check_size(cache_size) -> Optional[int]:
        """ Normalize the cache bound. Both None and infinity mean unbounded. """
        if cache_size is None or cache_size == math.inf:
            return None
        if isinstance(cache_size, bool) or not isinstance(cache_size, int):
            raise ValueError(f'Cache size must be a non-negative integer or None, got {cache_size!r}.')
        if cache_size < 0:
            raise ValueError(f'Cache size must not be negative, got {cache_size}.')
        return cache_size

    def __repr__(self) -> str:
        return f'{type(self).__name__}(cache_size={self.cache_size!r})'


class MemoizedFunction(Generic[R]):
    """ Wraps a function and remembers the results of previous calls.

        Every instance owns its cache; nothing is shared between instances. Exceptions raised by the wrapped
        function pass straight through and are never cached, so a failed call will be retried in full.
        There is no locking. A memoized function shared between threads must be guarded by the caller. """

    def __init__(self, func:Callable[..., R], options:MemoizeOptions=None, *, log:LogFn=None) -> None:
        # Copy metadata first. The wrapped function's __dict__ must not overwrite our own state.
        functools.update_wrapper(self, func)
        options = options or MemoizeOptions()
        self._func = func                          # Wrapped function.
        self._name = getattr(func, "__qualname__", repr(func))  # Name used in log messages.
        self._cache_size = options.cache_size      # Maximum number of stored records (None = unbounded).
        self._cache: Deque[CallRecord] = deque()   # Call records in order of insertion, oldest first.
        self._log = log                            # Optional string callable for trace messages.
        self._hits = 0
        self._misses = 0

    def _find(self, args:tuple, kwargs:dict) -> Optional[CallRecord]:
        """ Return the first stored record matching these arguments, or None. """
        for record in self._cache:
            if record.matches(args, kwargs):
                return record
        return None

    def _store(self, record:CallRecord) -> None:
        """ Add a new record at the end, then evict from the front until the cache is back within its bound. """
        cache = self._cache
        cache.append(record)
        if self._cache_size is not None:
            while len(cache) > self._cache_size:
                evicted = cache.popleft()
                if self._log is not None:
                    self._log(f'{self._name}: evicted call with args {evicted.args!r}')

    def __call__(self, *args:Any, **kwargs:Any) -> R:
        record = self._find(args, kwargs)
        if record is not None:
            self._hits += 1
            return record.result
        self._misses += 1
        if self._log is not None:
            self._log(f'{self._name}: cache miss with args {args!r}')
        try:
            result = self._func(*args, **kwargs)
        except Exception:
            if self._log is not None:
                ExceptionLogger(self._log)(*sys.exc_info())
            raise
        # The wrapped function may have called back into us with the same arguments. Keep the first record.
        record = self._find(args, kwargs)
        if record is not None:
            return record.result
        self._store(CallRecord(args, kwargs, result))
        return result

    def __get__(self, instance:Any, owner:type=None) -> Callable[..., R]:
        """ Bind to instances like a normal function when used as a method.
            The instance becomes the first positional argument and is matched by identity. """
        if instance is None:
            return self
        return MethodType(self, instance)

    def clear_cache(self) -> None:
        """ Forget every stored call and reset the statistics. The size bound is kept. """
        self._cache.clear()
        self._hits = self._misses = 0
        if self._log is not None:
            self._log(f'{self._name}: cache cleared')

    def cache_info(self) -> CacheInfo:
        """ Report cache statistics in the same form as functools.lru_cache. """
        return CacheInfo(self._hits, self._misses, self._cache_size, len(self._cache))

    def __repr__(self) -> str:
        return f'<memoized {self._func!r}>'


def memoize_func(func:Callable[..., R], options:MemoizeOptions=None, *, log:LogFn=None) -> MemoizedFunction[R]:
    """ Return a memoized version of <func> with an optional bound on the number of stored calls. """
    return MemoizedFunction(func, options, log=log)


def memoize(fn:Callable=None, *, cache_size:Optional[int]=None, log:LogFn=None):
    """ Decorator form of memoize_func. Usable either bare or with keyword options:

        @memoize
        def f(x): ...

        @memoize(cache_size=16)
        def g(x, y): ... """
    options = MemoizeOptions(cache_size)
    def decorator(func:Callable[..., R]) -> MemoizedFunction[R]:
        return memoize_func(func, options, log=log)
    if fn is None:
        return decorator
    return decorator(fn)
