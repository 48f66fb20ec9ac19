from __future__ import annotations

import types
from typing import Annotated, Any, TypeGuard, Union, get_args, get_origin


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def unwrap_annotated(annotation: Any) -> Any:
    """Recursively unwrap Annotated[T, ...] into T."""
    if get_origin(annotation) is not Annotated:
        return annotation
    return unwrap_annotated(get_args(annotation)[0])


def unwrap_new_type(annotation: Any) -> Any:
    """Follow NewType chains down to the runtime supertype."""
    while callable(annotation) and hasattr(annotation, "__supertype__"):
        annotation = annotation.__supertype__
    return annotation


def normalize_descriptor(annotation: Any) -> Any:
    """Strip Annotated metadata and NewType wrappers from a type descriptor."""
    previous = None
    while annotation is not previous:
        previous = annotation
        annotation = unwrap_new_type(unwrap_annotated(annotation))
    return annotation


def is_union(annotation: Any) -> bool:
    """Return true for typing.Union/Optional and PEP 604 ``X | Y`` unions."""
    origin = get_origin(annotation)
    return origin is Union or origin is types.UnionType


def is_fixed_tuple(annotation: Any) -> bool:
    """Return true for ``tuple[X, Y]`` aliases with a fixed member list."""
    if get_origin(annotation) is not tuple:
        return False
    args = get_args(annotation)
    return bool(args) and args[-1] is not Ellipsis


__all__ = [
    "is_fixed_tuple",
    "is_runtime_class",
    "is_union",
    "normalize_descriptor",
    "unwrap_annotated",
    "unwrap_new_type",
]
