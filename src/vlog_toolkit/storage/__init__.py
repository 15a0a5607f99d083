"""Persistence of parsed logs."""

from .exporter import ResultExporter

__all__ = ["ResultExporter"]
