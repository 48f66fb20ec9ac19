"""Alternate constructors: cheaper factories as classmethods.

This module demonstrates:

1. Marking a classmethod with ``@alternate_constructor``.
2. The constructor with the fewest required parameters wins.
3. Constructors that need the target itself are rejected.
"""

from __future__ import annotations

from decimal import Decimal

from typing_extensions import Self

from defaultwire import alternate_constructor, create_synthesizer


class Money:
    def __init__(self, amount: Decimal, currency: str) -> None:
        self.amount = amount
        self.currency = currency

    @alternate_constructor
    def zero(cls) -> Self:
        return cls(Decimal("0.00"), "EUR")

    def __repr__(self) -> str:
        return f"Money({self.amount} {self.currency})"


class Version:
    def __init__(self, previous: Version) -> None:
        self.previous = previous

    @alternate_constructor
    def initial(cls, label: str) -> Self:
        instance = object.__new__(cls)
        instance.previous = None  # type: ignore[assignment]
        return instance


def main() -> None:
    synthesizer = create_synthesizer()

    constructor = synthesizer.get_minimum_constructor(Money)
    print(f"constructor={constructor.name}")  # => constructor=Money.zero()
    print(synthesizer.get_default(Money))  # => Money(0.00 EUR)

    constructor = synthesizer.get_minimum_constructor(Version)
    print(f"constructor={constructor.name}")  # => constructor=Version.initial()
    print(f"previous={synthesizer.get_default(Version).previous}")  # => previous=None


if __name__ == "__main__":
    main()
