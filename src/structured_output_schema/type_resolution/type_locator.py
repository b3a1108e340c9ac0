"""Resolution of ``module:QualName`` references to Python types."""

from __future__ import annotations

import importlib
from typing import Any


class TypeResolutionError(Exception):
    """Raised when a type reference cannot be imported."""


def resolve_type(reference: str) -> Any:
    """Import the object named by ``package.module:Outer.Inner``."""
    module_name, separator, qualname = reference.strip().partition(":")
    if not separator or not module_name or not qualname:
        raise TypeResolutionError(
            f"Type reference '{reference}' must look like 'package.module:QualName'."
        )
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise TypeResolutionError(f"Cannot import module '{module_name}': {exc}") from exc

    for part in qualname.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise TypeResolutionError(
                f"Module '{module_name}' has no attribute '{qualname}'."
            ) from exc
    return target
