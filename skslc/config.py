"""
skslc Configuration

Driver options read from the environment.
"""

import importlib
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .compiler.base import CompilerFactory, UnavailableCompiler


# Import path (`module:attr`) of the CompilerFactory to use
COMPILER_ENV = "SKSLC_COMPILER"

# Set to a non-empty value other than "0" to trace every job
DEBUG_ENV = "SKSLC_DEBUG"


class ConfigError(Exception):
    """Raised for unusable configuration values."""
    pass


@dataclass
class DriverConfig:
    compiler_factory: CompilerFactory = UnavailableCompiler
    debug: bool = False


def load_compiler_factory(spec: str) -> CompilerFactory:
    """
    Import a compiler factory from a `module:attr` string.

    Raises:
        ConfigError: If the string is malformed or does not resolve
    """
    module_name, sep, attr = spec.partition(':')
    if not sep or not module_name or not attr:
        raise ConfigError(f"{COMPILER_ENV} must look like 'module:factory', got '{spec}'")
    try:
        module = importlib.import_module(module_name)
    except (ImportError, TypeError, ValueError) as e:
        raise ConfigError(f"cannot import compiler module '{module_name}': {e}")

    factory = module
    for part in attr.split('.'):
        factory = getattr(factory, part, None)
        if factory is None:
            raise ConfigError(f"'{module_name}' has no attribute '{attr}'")
    if not callable(factory):
        raise ConfigError(f"'{spec}' is not callable")
    return factory


def load_config(environ: Optional[Mapping[str, str]] = None) -> DriverConfig:
    """Build the driver configuration from environment variables."""
    environ = os.environ if environ is None else environ
    config = DriverConfig()

    spec = environ.get(COMPILER_ENV)
    if spec:
        config.compiler_factory = load_compiler_factory(spec)

    config.debug = environ.get(DEBUG_ENV, "") not in ("", "0")
    return config
