"""grit — conventional commit compiler."""

__version__ = "0.3.0"
