""" Profilers for benchmark callables from benchmarks.tests. """

from cProfile import Profile
from io import StringIO
import pstats
import time


class AbstractProfiler:
    """ Abstract tool to measure and format details about the execution of a Python callable. """

    def run(self, func, *, repeat=3) -> None:
        """ Evaluate <func> with no arguments <repeat> times and record its performance on each run. """
        raise NotImplementedError

    def format_best(self) -> str:
        """ Format a string with the details about the quickest recorded run. """
        raise NotImplementedError


class RawProfiler(AbstractProfiler):
    """ Records wall-clock time only. """

    def __init__(self) -> None:
        self._times = []  # Time in seconds for each run.

    def run(self, func, *, repeat=3) -> None:
        for _ in range(repeat):
            start_time = time.perf_counter()
            func()
            self._times.append(time.perf_counter() - start_time)

    def format_best(self) -> str:
        best = min(self._times)
        mean = sum(self._times) / len(self._times)
        return f'Best time = {best:.3f}s, mean time = {mean:.3f}s over {len(self._times)} runs\n'


class DetailedProfiler(AbstractProfiler):
    """ Records time spent in every function called under cProfile.
        Memoized calls are tiny, so profiling overhead is a large share of the total. """

    def __init__(self, *, max_lines=20, sort_key='tottime') -> None:
        self._profiles = []         # Finished cProfile.Profile objects, one per run.
        self._max_lines = max_lines  # Maximum number of functions to print statistics on.
        self._sort_key = sort_key    # pstats sort key for the printout.

    def run(self, func, *, repeat=3) -> None:
        for _ in range(repeat):
            pr = Profile()
            pr.runcall(func)
            pr.create_stats()
            self._profiles.append(pr)

    @staticmethod
    def _total_time(pr:Profile) -> float:
        return sum(s[2] for s in pr.stats.values())

    def format_best(self) -> str:
        best_pr = min(self._profiles, key=self._total_time)
        s_buf = StringIO()
        ps = pstats.Stats(best_pr, stream=s_buf)
        ps.strip_dirs().sort_stats(self._sort_key).print_stats(self._max_lines)
        return s_buf.getvalue()
