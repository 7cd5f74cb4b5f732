"""Classic algorithms and data structures: dynamic programming, simple ciphers, graphs, trees, lists, queues, stacks and a genetic algorithm."""

__version__ = "0.1.0"