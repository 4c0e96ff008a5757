"""Classic data structures and algorithms: graphs, heaps, linked lists, queues and math helpers."""

__version__ = "0.1.0"