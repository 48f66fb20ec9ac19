from __future__ import annotations

from typing import Any, Final, TypeAlias, final

TypeDescriptor: TypeAlias = Any
"""A class or typing annotation to synthesize a value for."""


@final
class NoDefault:
    """Result variant meaning that no default value could be synthesized.

    ``NO_DEFAULT`` is the only instance. It is falsy and must be compared by
    identity: ``if value is NO_DEFAULT: ...``. ``None`` is an ordinary value
    (for example the default of ``Optional[T]``) and never means absence.
    """

    __slots__ = ()

    _instance: NoDefault | None = None

    def __new__(cls) -> NoDefault:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __reduce__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Final = NoDefault()
"""The single absence marker returned by providers and synthesis."""
