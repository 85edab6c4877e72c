"""Classic data structures and algorithms: graphs, hash tables, search trees, heap sort and record files."""

__version__ = "0.1.0"