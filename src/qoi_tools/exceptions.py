"""
Exceptions raised by qoi_tools.
"""


class QOIError(Exception):
    """Base class for all errors raised by qoi_tools."""


class ValidationError(QOIError, ValueError):
    """Invalid caller-supplied argument, such as channels or buffer size."""


class FormatError(QOIError, ValueError):
    """Malformed or truncated QOI data."""
