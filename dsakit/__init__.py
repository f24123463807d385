"""Classic data structures and algorithms: arrays, lists, stacks, queues, trees, heaps and shortest paths."""

__version__ = "0.1.0"