"""Signal synthesis from name heuristics and the drive cycle."""

from .archetypes import Archetype, SignalProfile, classify
from .aliasing import alias_channel
from .heuristics import guess_range, guess_unit, resolve_range
from .quantize import quantize, decimals_for
from .synthesizer import SignalSynthesizer

__all__ = [
    "Archetype",
    "SignalProfile",
    "SignalSynthesizer",
    "alias_channel",
    "classify",
    "decimals_for",
    "guess_range",
    "guess_unit",
    "quantize",
    "resolve_range",
]
