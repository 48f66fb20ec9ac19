"""Providers: plug known values into synthesis.

This module demonstrates:

1. ``ExistingValuesProvider`` serving objects you already have.
2. A custom provider implementing ``create(target)``.
3. Passing a provider chain for a single call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from defaultwire import (
    NO_DEFAULT,
    ExistingValuesProvider,
    ProviderChain,
    create_synthesizer,
    default_providers,
)


@dataclass
class Settings:
    dsn: str
    pool_size: int


@dataclass
class Repository:
    settings: Settings
    table: str


class TableNameProvider:
    def create(self, target: Any) -> Any:
        if target is str:
            return "items"
        return NO_DEFAULT


def main() -> None:
    settings = Settings(dsn="sqlite://", pool_size=4)
    providers = ProviderChain([ExistingValuesProvider.from_values(settings), *default_providers()])
    synthesizer = create_synthesizer(providers)

    repository = synthesizer.get_default(Repository)
    print(f"settings_reused={repository.settings is settings}")  # => settings_reused=True
    print(f"table={repository.table!r}")  # => table=''

    per_call = ProviderChain([TableNameProvider(), *providers])
    repository = synthesizer.get_default(Repository, per_call)
    print(f"table={repository.table!r}")  # => table='items'

    print(f"chain_length={len(synthesizer.providers)}")  # => chain_length=3


if __name__ == "__main__":
    main()
