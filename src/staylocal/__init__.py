"""StayLocal booking engine: pricing, availability and booking services."""

__version__ = "0.1.0"
