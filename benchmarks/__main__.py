#!/usr/bin/env python3

""" Primary entry point for fnkit benchmarks. Usage:

    python -m benchmarks [operation] [n] [cache_size]

    where <operation> is the name of a generator in benchmarks.tests. """

import subprocess
import sys

from benchmarks.profilers import DetailedProfiler, RawProfiler
from benchmarks import tests

PROFILERS = {cls.__name__: cls() for cls in [RawProfiler, DetailedProfiler]}
SECTION_DELIM = '-' * 78


def main(script:str, operation="memo_hits", *argv:str) -> int:
    """ Run each profiler in its own subprocess so that neither one's overhead affects the other. """
    if argv and argv[0] in PROFILERS:
        pf_name, *args = argv
        setup = getattr(tests, operation)
        func = setup(*map(int, args))
        profiler = PROFILERS[pf_name]
        profiler.run(func)
        results = profiler.format_best()
        print(f'Benchmark for {operation} using {pf_name}:\n\n{results}', end='')
        return 0
    print()
    for name in PROFILERS:
        cmd = (sys.executable, '-m', 'benchmarks', operation, name, *argv)
        result = subprocess.run(cmd, capture_output=True, text=True)
        print(f'{SECTION_DELIM}\n')
        if result.returncode:
            print(result.stderr)
        else:
            print(result.stdout)
    print(SECTION_DELIM)
    return 0


if __name__ == '__main__':
    sys.exit(main(*sys.argv))
