"""useenv: run a program in a modified environment."""

__version__ = "0.1.0"
