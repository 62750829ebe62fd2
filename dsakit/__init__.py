"""Classic data structures and algorithms: hashing, trees, graphs, coding and record files."""

__version__ = "0.1.0"