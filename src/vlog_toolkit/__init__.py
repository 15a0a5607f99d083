"""Vehicle log toolkit: signal discovery and drive-cycle based signal synthesis."""

__version__ = "1.0.0"
