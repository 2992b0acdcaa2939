"""Construction-site hazard lookup and cost estimation."""

__version__ = "0.1.0"
