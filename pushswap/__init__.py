"""Sort distinct integers with two stacks and report the operations used."""

__version__ = "0.1.0"
__all__ = ["cli", "parsing", "sorting", "stacks"]