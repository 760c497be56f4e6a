"""blockgraph — dependency graph viewer for feature-builder blocks."""

__version__ = "0.1.0"
