"""modcheck: check digit calculation and validation for structured identifier codes."""

__version__ = "0.1.0"
