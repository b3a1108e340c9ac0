"""Type resolution exports."""

from .type_locator import TypeResolutionError, resolve_type

__all__ = ["TypeResolutionError", "resolve_type"]
