"""Response format exports."""

from .response_format_builder import (
    RESPONSE_FORMAT_TYPE,
    ResponseFormatError,
    build_response_format,
)

__all__ = [
    "RESPONSE_FORMAT_TYPE",
    "ResponseFormatError",
    "build_response_format",
]
