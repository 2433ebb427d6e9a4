"""Teams API - read-only HTTP resources for teams and their matches."""

__version__ = "0.1.0"
