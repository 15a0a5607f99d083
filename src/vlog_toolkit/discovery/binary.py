"""String scanner for binary logs with unknown layout."""

import re
import logging
from typing import List

from .base import BaseDiscovery
from ..models.signal import SignalDescriptor

logger = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 3
MAX_TOKEN_LENGTH = 49

_TOKEN_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_.-]+$")
_CHANNEL_TAG_RE = re.compile(r"<CN>(.*?)</CN>")
_NUMERIC_RE = re.compile(r"^\d+$")

# Format and vendor banner words that are never channel names
BLOCK_LIST = (
    "MDF4", "Vector", "CANape", "Intel", "Motorola", "Version", "Format",
    "Date", "Time", "Program", "Block", "HDBlock", "DGBlock",
)


class BinaryStringScanner(BaseDiscovery):
    """Finds plausible channel names in printable runs of a binary file."""

    @property
    def name(self) -> str:
        return "binary"

    def discover(self, content: bytes) -> List[SignalDescriptor]:
        names = self.scan(content)[:self._config.max_binary_signals]
        return [self.create_descriptor(name, i) for i, name in enumerate(names)]

    def scan(self, content: bytes) -> List[str]:
        """
        Collect candidate names from the start of a binary blob.

        Args:
            content: Raw file bytes

        Returns:
            Unique candidate names in order of first appearance
        """
        window = content[:self._config.max_binary_bytes]
        candidates = []

        for run in self._printable_runs(window):
            token = self._accept(run)
            if token is not None:
                candidates.append(token)

        names = [c for c in candidates if self._is_plausible(c)]
        unique = list(dict.fromkeys(names))
        logger.debug(f"Binary scan found {len(unique)} candidate name(s) in {len(window)} bytes")
        return unique

    @staticmethod
    def _printable_runs(window: bytes):
        start = None
        for i, b in enumerate(window):
            if 32 <= b <= 126:
                if start is None:
                    start = i
            elif start is not None:
                if i - start >= MIN_TOKEN_LENGTH:
                    yield window[start:i].decode("ascii")
                start = None
        if start is not None and len(window) - start >= MIN_TOKEN_LENGTH:
            yield window[start:].decode("ascii")

    @staticmethod
    def _accept(run: str):
        cleaned = run.strip()
        if _TOKEN_RE.fullmatch(cleaned):
            if MIN_TOKEN_LENGTH <= len(cleaned) <= MAX_TOKEN_LENGTH:
                return cleaned
            return None
        if "<CN>" in cleaned:
            match = _CHANNEL_TAG_RE.search(cleaned)
            if match:
                return match.group(1)
        return None

    @staticmethod
    def _is_plausible(token: str) -> bool:
        if any(bad in token for bad in BLOCK_LIST):
            return False
        if _NUMERIC_RE.match(token):
            return False
        return MIN_TOKEN_LENGTH <= len(token) <= MAX_TOKEN_LENGTH
