"""Personal task list kept in a pipe-delimited text file."""

__version__ = "0.3.0"
