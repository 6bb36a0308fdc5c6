"""
skslc Settings Pragma

Reads the optional settings comment embedded in a shader, e.g.

    /*#pragma settings Default Sharpen*/

and applies it to the job's ProgramSettings and capability bundle.

Tokens are consumed from the end of the comment: every pass tries each known
token as a suffix and strips whatever matches, until nothing is left. A pass
that strips nothing means the remainder holds a token we do not know.
"""

from typing import Callable, List, Optional, Tuple

from ..compiler.caps import CAPS_NAMES, ShaderCaps, ShaderCapsCache
from ..compiler.program import INLINE_THRESHOLD_MAX, ProgramSettings
from .errors import PragmaError


PRAGMA_SETTINGS = "/*#pragma settings "
PRAGMA_END = "*/"


def _flip_y(settings: ProgramSettings) -> None:
    settings.flip_y = True


def _force_high_precision(settings: ProgramSettings) -> None:
    settings.force_high_precision = True


def _no_inline(settings: ProgramSettings) -> None:
    settings.inline_threshold = 0


def _inline_threshold_max(settings: ProgramSettings) -> None:
    settings.inline_threshold = INLINE_THRESHOLD_MAX


def _sharpen(settings: ProgramSettings) -> None:
    settings.sharpen_textures = True


# Tested after the capability names, in this order
SETTINGS_TOKENS: List[Tuple[str, Callable[[ProgramSettings], None]]] = [
    ("FlipY", _flip_y),
    ("ForceHighPrecision", _force_high_precision),
    ("NoInline", _no_inline),
    ("InlineThresholdMax", _inline_threshold_max),
    ("Sharpen", _sharpen),
]


def extract_settings_text(text: str) -> Optional[str]:
    """
    Isolate the body of the settings comment.

    The leading space after `settings` is kept so that the first token can be
    matched as a ` Token` suffix like every other one.

    Returns:
        The body, or None if the source has no complete settings comment
    """
    start = text.find(PRAGMA_SETTINGS)
    if start < 0:
        return None
    start += len(PRAGMA_SETTINGS) - 1
    end = text.find(PRAGMA_END, start)
    if end < 0:
        return None
    return text[start:end]


def _consume_suffix(text: str, token: str) -> Optional[str]:
    suffix = " " + token
    if text.endswith(suffix):
        return text[:-len(suffix)]
    return None


def detect_shader_settings(text: str,
                           settings: ProgramSettings,
                           caps: ShaderCaps,
                           cache: ShaderCapsCache) -> ShaderCaps:
    """
    Apply a `#pragma settings` comment found in shader source.

    Args:
        text: Shader source
        settings: Settings to update in place
        caps: Capability bundle in effect before the pragma
        cache: Where named capability bundles come from

    Returns:
        The capability bundle to compile with. When several bundle names
        appear, the last one consumed (the leftmost) wins.

    Raises:
        PragmaError: If the comment holds a token that is not recognized
    """
    remaining = extract_settings_text(text)
    if remaining is None:
        return caps

    while True:
        starting_length = len(remaining)

        for name in CAPS_NAMES:
            rest = _consume_suffix(remaining, name)
            if rest is not None:
                remaining = rest
                caps = cache.get(name)

        for token, apply in SETTINGS_TOKENS:
            rest = _consume_suffix(remaining, token)
            if rest is not None:
                remaining = rest
                apply(settings)

        if not remaining:
            return caps
        if len(remaining) == starting_length:
            raise PragmaError(f"Unrecognized #pragma settings: {remaining}")
