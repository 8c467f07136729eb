""" Benchmark test generators for memoized functions. Each returns a callable to be profiled.
    Lookup is a linear scan, so the cost of a call grows with the number of stored records. """


def _square(x:int) -> int:
    return x * x


def _random_args(n:int, spread:int) -> list:
    from random import Random
    rnd = Random(n)
    return [rnd.randrange(spread) for _ in range(n)]


def memo_hits(n=100000, cache_size=100):
    """ Every call after the first pass is a hit somewhere in a full cache. """
    from fnkit import MemoizeOptions, memoize_func
    fn = memoize_func(_square, MemoizeOptions(cache_size))
    args = _random_args(n, cache_size)
    def run() -> None:
        for x in args:
            fn(x)
    return run


def memo_misses(n=100000, cache_size=100):
    """ Arguments are spread wider than the cache, so most calls scan everything, miss, and evict. """
    from fnkit import MemoizeOptions, memoize_func
    fn = memoize_func(_square, MemoizeOptions(cache_size))
    args = _random_args(n, cache_size * 10)
    def run() -> None:
        for x in args:
            fn(x)
    return run


def lru_hits(n=100000, cache_size=100):
    """ The same workload as memo_hits using functools.lru_cache for comparison. """
    from functools import lru_cache
    fn = lru_cache(maxsize=cache_size)(_square)
    args = _random_args(n, cache_size)
    def run() -> None:
        for x in args:
            fn(x)
    return run
