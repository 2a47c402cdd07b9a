"""School of Uke song browser - catalog filtering, metadata normalization and materials."""

__version__ = "0.1.0"
