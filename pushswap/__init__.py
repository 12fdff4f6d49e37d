"""Sort integers on two stacks with the push_swap move set and report the moves."""

__version__ = "0.1.0"
__all__ = ["cli", "parsing", "sorter", "stack"]