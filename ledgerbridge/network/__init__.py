"""Network presets and preset/override resolution."""

from .presets import PRESETS, NetworkPreset, lookup
from .resolver import resolve_layer, resolve_network

__all__ = ["PRESETS", "NetworkPreset", "lookup", "resolve_layer", "resolve_network"]
