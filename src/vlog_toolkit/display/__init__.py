"""Display and terminal output utilities."""

from .console import Console
from .tables import TableDisplay

__all__ = ["Console", "TableDisplay"]
