"""Signal discovery strategies."""

from .base import BaseDiscovery
from .description import DescriptionFileParser
from .binary import BinaryStringScanner
from .delimited import DelimitedTextParser, parse_flexible_float, sniff_delimiter
from .cascade import SignalDiscovery

__all__ = [
    "BaseDiscovery",
    "DescriptionFileParser",
    "BinaryStringScanner",
    "DelimitedTextParser",
    "SignalDiscovery",
    "parse_flexible_float",
    "sniff_delimiter",
]
