"""Height maps, XPM images, pixel buffers, colour names and an in-memory event loop."""

__version__ = "0.1.0"