"""Recursion ceiling and non-null mode.

This module demonstrates:

1. Composites nested deeper than the ceiling receive ``None``.
2. Non-null mode rejects composites with a missing parameter.
3. Invalid ceilings are rejected and the previous value is kept.
"""

from __future__ import annotations

from dataclasses import dataclass

from defaultwire import DefaultWireInvalidConfigurationError, create_synthesizer


@dataclass
class Leaf:
    value: int


@dataclass
class Branch:
    leaf: Leaf


@dataclass
class Root:
    branch: Branch


def main() -> None:
    synthesizer = create_synthesizer(recursion_ceiling=2)

    print(synthesizer.get_default(Root))  # => Root(branch=Branch(leaf=None))

    synthesizer.set_recursion_ceiling(3)
    print(synthesizer.get_default(Root))  # => Root(branch=Branch(leaf=Leaf(value=0)))

    synthesizer.set_recursion_ceiling(2)
    synthesizer.set_non_null(True)
    print(f"non_null_root={synthesizer.get_default(Root)}")  # => non_null_root=None

    try:
        synthesizer.set_recursion_ceiling(0)
    except DefaultWireInvalidConfigurationError as error:
        print(error)  # => Recursion ceiling must be one or higher, got 0.
    print(f"ceiling={synthesizer.recursion_ceiling}")  # => ceiling=2


if __name__ == "__main__":
    main()
