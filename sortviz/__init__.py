"""Interactive terminal visualizer that animates sorting algorithms on a doubly linked list."""

__version__ = "0.1.0"