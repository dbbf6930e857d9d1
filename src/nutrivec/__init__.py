"""Food vector arithmetic and nearest-match search."""

__version__ = "0.1.0"
