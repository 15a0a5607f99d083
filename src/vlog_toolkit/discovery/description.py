"""Parser for signal description files (DBC-style databases)."""

import re
import logging
from typing import List, Optional, Tuple

from .base import BaseDiscovery, decode_text
from ..models.signal import SignalDescriptor, UNIT_PLACEHOLDER

logger = logging.getLogger(__name__)

SIGNAL_KEYWORD = "SG_ "

# Decimal or scientific notation
_NUMBER = r"[+\-]?(?:0|[1-9]\d*)(?:\.\d*)?(?:[eE][+\-]?\d+)?"

_SCALE_RE = re.compile(rf"\(\s*({_NUMBER})\s*,\s*({_NUMBER})\s*\)")
_RANGE_RE = re.compile(rf"\[\s*({_NUMBER})\s*\|\s*({_NUMBER})\s*\]")
_UNIT_RE = re.compile(r'"([^"]*)"')


class DescriptionFileParser(BaseDiscovery):
    """
    Extracts signal definitions from description files.

    Only lines of the form
    ``SG_ <Name> [multiplexor] : <bits> (<factor>,<offset>) [<min>|<max>] "<unit>" <receivers>``
    are considered. Name, scale, range and unit are taken; everything else is ignored.
    """

    @property
    def name(self) -> str:
        return "description"

    def discover(self, content: bytes) -> List[SignalDescriptor]:
        return self.parse_text(decode_text(content))

    def parse_text(self, text: str) -> List[SignalDescriptor]:
        """
        Parse description text.

        Args:
            text: Full description file content

        Returns:
            Descriptors, first occurrence of each name wins
        """
        descriptors: List[SignalDescriptor] = []
        seen = set()

        for line in text.splitlines():
            stripped = line.strip()
            if not stripped.startswith(SIGNAL_KEYWORD):
                continue

            try:
                parsed = self.parse_line(stripped)
            except ValueError as e:
                logger.debug(f"Skipping malformed signal line {stripped!r}: {e}")
                continue

            if parsed is None:
                logger.debug(f"Skipping signal line without name: {stripped!r}")
                continue

            name, unit, min_value, max_value, factor, offset = parsed
            if name in seen:
                continue
            seen.add(name)

            descriptors.append(self.create_descriptor(
                name,
                len(descriptors),
                unit=unit,
                min_value=min_value,
                max_value=max_value,
                factor=factor,
                offset=offset,
            ))

        logger.info(f"Description file declared {len(descriptors)} signal(s)")
        return descriptors

    def parse_line(self, line: str) -> Optional[Tuple[str, str, float, float, float, float]]:
        """
        Parse a single signal definition line.

        Args:
            line: Trimmed line starting with the signal keyword

        Returns:
            Tuple of (name, unit, min, max, factor, offset) or None if no name
        """
        if ":" not in line:
            return None

        head, metadata = line.split(":", 1)
        name_parts = head.split()
        if len(name_parts) < 2:
            return None
        name = name_parts[1]

        factor, offset = self._extract_scale(metadata)
        min_value, max_value = self._extract_range(metadata)

        unit_match = _UNIT_RE.search(metadata)
        unit = unit_match.group(1) if unit_match else UNIT_PLACEHOLDER

        return name, unit, min_value, max_value, factor, offset

    @staticmethod
    def _extract_scale(metadata: str) -> Tuple[float, float]:
        match = _SCALE_RE.search(metadata)
        if not match:
            return 1.0, 0.0
        return float(match.group(1)), float(match.group(2))

    @staticmethod
    def _extract_range(metadata: str) -> Tuple[float, float]:
        match = _RANGE_RE.search(metadata)
        if not match:
            return 0.0, 0.0
        return float(match.group(1)), float(match.group(2))
