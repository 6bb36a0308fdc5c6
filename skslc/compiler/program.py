"""
SkSL Program Types

Program kinds and per-program compilation settings.
"""

from enum import Enum, auto
from dataclasses import dataclass


# Inline threshold used when no pragma overrides it
DEFAULT_INLINE_THRESHOLD = 50

# Largest 32-bit signed integer; selected by `InlineThresholdMax`
INLINE_THRESHOLD_MAX = 2**31 - 1


class ProgramKind(Enum):
    """Shader stage a source file represents."""

    VERTEX = auto()
    FRAGMENT = auto()
    GEOMETRY = auto()
    FRAGMENT_PROCESSOR = auto()
    PIPELINE_STAGE = auto()


@dataclass
class ProgramSettings:
    """
    Compilation toggles for a single program.

    These are distinct from the target capabilities (see ShaderCaps): they
    describe how to compile, not what the target supports. One instance is
    created per job and is only mutated by the settings pragma parser and the
    backend that forces `replace_settings` off.
    """

    flip_y: bool = False
    force_high_precision: bool = False
    inline_threshold: int = DEFAULT_INLINE_THRESHOLD
    sharpen_textures: bool = False
    replace_settings: bool = True
