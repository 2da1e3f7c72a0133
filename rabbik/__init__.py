"""Game engine core: maths, transforms, a node tree, frame timing and file access."""

__version__ = "0.1.0"