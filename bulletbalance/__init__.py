"""Entity-component circle simulation with spatial-hash overlap detection, drawn with pygame."""

__version__ = "0.1.0"