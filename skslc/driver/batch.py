"""
skslc Batch Driver

Splits a command line into `--`-separated jobs and reduces their outcomes to
a single exit status.
"""

from typing import Callable, List

from .errors import ResultCode


DELIMITER = "--"


def split_batch(argv: List[str]) -> List[List[str]]:
    """
    Split a command line into jobs.

    Every job starts with the program name (argv[0]). Empty segments, from
    doubled or leading/trailing delimiters, are dropped.

    Example:
        split_batch(["skslc", "a.vert", "a.glsl", "--", "b.frag", "b.metal"])
        # [["skslc", "a.vert", "a.glsl"], ["skslc", "b.frag", "b.metal"]]
    """
    if not argv:
        return []
    jobs: List[List[str]] = []
    args = [argv[0]]
    for arg in argv[1:]:
        if arg != DELIMITER:
            args.append(arg)
        elif len(args) > 1:
            jobs.append(args)
            args = [argv[0]]
    if len(args) > 1:
        jobs.append(args)
    return jobs


def run_batch(argv: List[str],
              run_job: Callable[[List[str]], ResultCode],
              debug: bool = False) -> ResultCode:
    """
    Run every job on the command line, in order.

    A failing job does not stop the batch. Compile errors rank lowest since
    they are expected in unit tests; input and output errors are never
    expected during a build.

    Returns:
        The most severe result code seen, or SUCCESS if no job ran
    """
    result = ResultCode.SUCCESS
    for args in split_batch(argv):
        outcome = ResultCode(run_job(args))
        if debug:
            print(f"skslc: {' '.join(args[1:])}: {outcome.name}")
        result = max(result, outcome)
    return result
