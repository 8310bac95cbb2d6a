"""Named todo lists with a focused list, kept in one JSON state file."""

__version__ = "0.1.0"
