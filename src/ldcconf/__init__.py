"""ldcconf: locate and read the LDC compiler configuration file."""

__version__ = "0.1.0"
