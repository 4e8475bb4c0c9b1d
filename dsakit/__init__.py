"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "greedy",
    "grid",
    "queues",
    "recursion",
    "sorting",
    "stacks",
    "trees",
]