""" Unit tests for the bounded memoization cache. """

import io

import pytest

from fnkit import CallRecord, MemoizedFunction, MemoizeOptions, StreamLogger, memoize, memoize_func


class _Counter:
    """ Function that records every call made to it and returns a tuple of its arguments. """

    def __init__(self) -> None:
        self.calls = []

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        return (*args, *sorted(kwargs.items()))


def _memoized(cache_size=None):
    counter = _Counter()
    return counter, memoize_func(counter, MemoizeOptions(cache_size))


def test_equal_calls_invoke_once() -> None:
    """ Calls with shallowly equal arguments should reach the wrapped function only once. """
    counter, fn = _memoized()
    obj = object()
    first = fn(1, "a", obj, None)
    second = fn(1, "a", obj, None)
    assert first is second
    assert len(counter.calls) == 1
    # Different arity is a different call, even as a prefix.
    fn(1, "a", obj)
    fn()
    fn()
    assert len(counter.calls) == 3


def test_identity_not_contents() -> None:
    """ Distinct objects with equal contents count as different calls. The same object counts as the same call. """
    counter, fn = _memoized()
    a = [1, 2]
    b = [1, 2]
    fn(a)
    fn(b)
    fn(a)
    assert len(counter.calls) == 2
    assert counter.calls[0][0][0] is a
    assert counter.calls[1][0][0] is b


@pytest.mark.parametrize("x, y", [(1, True), (0, False), (1, 1.5), ("1", 1), (b"x", "x"), (None, 0)])
def test_primitives_of_different_kinds(x, y) -> None:
    counter, fn = _memoized()
    fn(x)
    fn(y)
    assert len(counter.calls) == 2


def test_primitives_by_value() -> None:
    """ Primitive values are matched by value even when they are different objects. """
    counter, fn = _memoized()
    big = 10 ** 30
    fn(big, "".join(["ab", "cd"]))
    fn(int(str(big)), "abcd")
    fn(1, 2.0)
    fn(1, 2)
    assert len(counter.calls) == 2


def test_keyword_arguments() -> None:
    counter, fn = _memoized()
    fn(1, x=2, y=3)
    fn(1, y=3, x=2)
    assert len(counter.calls) == 1
    fn(1, x=2)
    fn(1, x=2, y=4)
    fn(1, 2, 3)
    assert len(counter.calls) == 4


def test_fifo_eviction() -> None:
    """ With two slots, X is the first one to go after X, Y, Z. """
    counter, fn = _memoized(2)
    fn("X")
    fn("Y")
    fn("Z")
    assert len(counter.calls) == 3
    fn("Y")
    fn("Z")
    assert len(counter.calls) == 3
    fn("X")
    assert len(counter.calls) == 4
    assert counter.calls[-1] == (("X",), {})


def test_no_promotion_on_hit() -> None:
    """ A hit on X must not save it from eviction. X was stored first, so after X, Y, X, Z it is the one gone. """
    counter, fn = _memoized(2)
    fn("X")
    fn("Y")
    fn("X")
    fn("Z")
    assert len(counter.calls) == 3
    fn("Y")
    fn("Z")
    assert len(counter.calls) == 3
    fn("X")
    assert len(counter.calls) == 4
    # X came back in at the end, so Y (now the oldest) was evicted.
    fn("Z")
    assert len(counter.calls) == 4
    fn("Y")
    assert len(counter.calls) == 5


def test_zero_size_retains_nothing() -> None:
    counter, fn = _memoized(0)
    fn(1)
    fn(1)
    assert len(counter.calls) == 2
    assert fn.cache_info().currsize == 0


def test_errors_not_cached() -> None:
    """ A failing call propagates its exception and leaves the cache unchanged. """
    attempts = []
    def flaky(x):
        attempts.append(x)
        if len(attempts) == 1:
            raise KeyError(x)
        return x * 2
    fn = memoize_func(flaky, MemoizeOptions(1))
    with pytest.raises(KeyError):
        fn(21)
    assert fn.cache_info().currsize == 0
    assert fn(21) == 42
    assert fn(21) == 42
    assert attempts == [21, 21]


def test_errors_do_not_evict() -> None:
    """ A full cache keeps its records when a new call fails. """
    calls = []
    def fail_on_bad(x):
        calls.append(x)
        if x == "bad":
            raise RuntimeError("boom")
        return x
    fn = memoize_func(fail_on_bad, MemoizeOptions(1))
    fn("kept")
    with pytest.raises(RuntimeError, match="boom"):
        fn("bad")
    assert fn("kept") == "kept"
    assert calls == ["kept", "bad"]


def test_clear_cache() -> None:
    counter, fn = _memoized(3)
    fn(1)
    fn(2)
    fn.clear_cache()
    assert fn.cache_info() == (0, 0, 3, 0)
    fn(1)
    assert len(counter.calls) == 3
    # Clearing is idempotent and the bound survives it.
    fn.clear_cache()
    fn.clear_cache()
    for i in range(5):
        fn(i)
    assert fn.cache_info().currsize == 3


def test_cache_info() -> None:
    counter, fn = _memoized(2)
    fn(1)
    fn(1)
    fn(2)
    fn(3)
    fn(3)
    info = fn.cache_info()
    assert info.hits == 2
    assert info.misses == 3
    assert info.maxsize == 2
    assert info.currsize == 2


def test_caches_are_private() -> None:
    """ Two wrappers around the same function never share records. """
    counter = _Counter()
    fn_a = memoize_func(counter)
    fn_b = memoize_func(counter)
    fn_a(1)
    fn_b(1)
    assert len(counter.calls) == 2


@pytest.mark.parametrize("size", [None, float("inf")])
def test_unbounded(size) -> None:
    counter, fn = _memoized(size)
    for i in range(500):
        fn(i)
    for i in range(500):
        fn(i)
    assert len(counter.calls) == 500
    assert fn.cache_info().maxsize is None


@pytest.mark.parametrize("size", [-1, 2.5, "10", True])
def test_invalid_size(size) -> None:
    with pytest.raises(ValueError):
        MemoizeOptions(size)


def test_decorator_forms() -> None:
    """ The decorator works bare or with options, and keeps the metadata of the wrapped function. """
    @memoize
    def square(x):
        """ Squares x. """
        return x * x

    @memoize(cache_size=1)
    def cube(x):
        return x ** 3

    assert isinstance(square, MemoizedFunction)
    assert square.__name__ == "square"
    assert square.__doc__ == " Squares x. "
    assert square(3) == 9
    assert cube(2) == 8
    cube(3)
    assert cube.cache_info().currsize == 1


def test_method_binding() -> None:
    """ Memoized methods bind to their instance, and different instances are different calls. """
    class Doubler:
        def __init__(self) -> None:
            self.count = 0

        @memoize
        def double(self, x):
            self.count += 1
            return 2 * x

    d1 = Doubler()
    d2 = Doubler()
    assert d1.double(4) == 8
    assert d1.double(4) == 8
    assert d2.double(4) == 8
    assert d1.count == 1
    assert d2.count == 1
    assert Doubler.double.cache_info().currsize == 2


def test_call_record_matches() -> None:
    obj = object()
    record = CallRecord((obj, 1), {"k": "v"}, "result")
    assert record.matches((obj, 1), {"k": "v"})
    assert not record.matches((obj, 1), {})
    assert not record.matches((object(), 1), {"k": "v"})


def test_logging() -> None:
    """ Misses, evictions, failures, and clears are logged. Hits are not. """
    stream = io.StringIO()
    logger = StreamLogger(stream, time_fmt=None, repeat_mark=None)
    def fail_on_none(x):
        if x is None:
            raise ValueError("no value")
        return x
    fn = memoize_func(fail_on_none, MemoizeOptions(1), log=logger)
    fn(1)
    fn(1)
    fn(2)
    with pytest.raises(ValueError):
        fn(None)
    fn.clear_cache()
    text = stream.getvalue()
    assert text.count("cache miss") == 3
    assert text.count("evicted call with args (1,)") == 1
    assert "ValueError: no value" in text
    assert text.rstrip().endswith("cache cleared")


def test_reentrant_call_stores_once() -> None:
    """ A function that calls its own memoized wrapper with the same arguments must leave a single record,
        and both levels return the result of the innermost call. """
    fn = None
    depth = []
    def recurse(x):
        depth.append(x)
        if len(depth) == 1:
            return ("outer", fn(x))
        return "inner"
    fn = memoize_func(recurse)
    assert fn(1) == "inner"
    assert fn.cache_info().currsize == 1
    assert fn(1) == "inner"
    assert len(depth) == 2


def test_nan_same_object() -> None:
    """ The same NaN object is the same call by identity, even though NaN != NaN. Different NaN objects are not. """
    counter, fn = _memoized()
    nan = float("nan")
    fn(nan)
    fn(nan)
    assert len(counter.calls) == 1
    fn(float("nan"))
    assert len(counter.calls) == 2


def test_package_names() -> None:
    """ The decorator is what fnkit.memoize names, and the cache module only exports its public API. """
    import fnkit
    from fnkit import cache
    assert fnkit.memoize is cache.memoize
    assert callable(fnkit.memoize)
    assert not hasattr(fnkit, "deque")
