"""
skslc Command Line

usage: skslc <input> <output> [--settings|--nosettings] -- <input2> <output2> ...
"""

import sys
from typing import List, Mapping, Optional

from .compiler.caps import ShaderCapsCache
from .config import ConfigError, load_config
from .driver.batch import run_batch
from .driver.errors import ResultCode
from .driver.job import JobRunner


def run(argv: List[str], environ: Optional[Mapping[str, str]] = None) -> ResultCode:
    """Run a whole command line, returning the worst result code."""
    try:
        config = load_config(environ)
    except ConfigError as e:
        print(f"skslc: {e}")
        return ResultCode.INPUT_ERROR

    runner = JobRunner(config.compiler_factory, ShaderCapsCache(), debug=config.debug)
    return run_batch(argv, runner.run, debug=config.debug)


def main(argv: Optional[List[str]] = None) -> None:
    argv = sys.argv if argv is None else argv
    sys.exit(int(run(argv)))


if __name__ == '__main__':
    main()
