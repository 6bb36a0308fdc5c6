"""
SkSL Shader Capabilities

Named capability bundles and the process-wide cache that hands them out.
"""

import threading
from dataclasses import dataclass
from typing import Callable, Dict, Optional


# Bundle used when no pragma selects one
STANDALONE_CAPS = "Standalone"

# Bundle names selectable from a `#pragma settings` comment, in the order the
# pragma parser tests them.
CAPS_NAMES = (
    "AddAndTrueToLoopCondition",
    "BlendModesFailRandomlyForAllZeroVec",
    "CannotUseFractForNegativeValues",
    "CannotUseFragCoord",
    "CannotUseMinAndAbsTogether",
    "Default",
    "EmulateAbsIntFunction",
    "FragCoordsOld",
    "FragCoordsNew",
    "GeometryShaderExtensionString",
    "GeometryShaderSupport",
    "GSInvocationsExtensionString",
    "IncompleteShortIntPrecision",
    "MustGuardDivisionEvenAfterExplicitZeroCheck",
    "MustForceNegatedAtanParamToFloat",
    "NoGSInvocationsSupport",
    "RemovePowWithConstantExponent",
    "RewriteDoWhileLoops",
    "ShaderDerivativeExtensionString",
    "UnfoldShortCircuitAsTernary",
    "UsesPrecisionModifiers",
    "Version110",
    "Version450Core",
)


@dataclass(frozen=True)
class ShaderCaps:
    """
    Opaque description of a target's quirks and limits.

    The driver never looks inside a bundle; it only selects one by name and
    hands it to the compiler backend.
    """
    name: str


CapsFactory = Callable[[str], ShaderCaps]


class ShaderCapsCache:
    """
    Lookup table of capability bundles, one instance per name.

    A bundle is built by `factory` the first time its name is requested and
    the same object is returned for the rest of the cache's life.

    Example:
        cache = ShaderCapsCache()
        assert cache.get("Version110") is cache.get("Version110")
    """

    def __init__(self, factory: Optional[CapsFactory] = None):
        self._factory = factory or ShaderCaps
        self._bundles: Dict[str, ShaderCaps] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> ShaderCaps:
        """Return the bundle for `name`, building it on first use."""
        bundle = self._bundles.get(name)
        if bundle is not None:
            return bundle
        with self._lock:
            bundle = self._bundles.get(name)
            if bundle is None:
                bundle = self._factory(name)
                self._bundles[name] = bundle
            return bundle

    def standalone(self) -> ShaderCaps:
        """Return the default bundle used when no pragma selects one."""
        return self.get(STANDALONE_CAPS)

    def __contains__(self, name: str) -> bool:
        return name in self._bundles

    def __len__(self) -> int:
        return len(self._bundles)
