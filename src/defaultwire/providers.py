from __future__ import annotations

import enum
import pathlib
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Literal, Protocol, get_args, get_origin, runtime_checkable

from defaultwire._internal.type_checks import is_runtime_class
from defaultwire.defaults import (
    DEFAULT_CONCRETE_CONTAINERS,
    DEFAULT_CONTAINER_INTERFACES,
    DEFAULT_SCALAR_FACTORIES,
)
from defaultwire.exceptions import DefaultWireInvalidConfigurationError
from defaultwire.types import NO_DEFAULT, TypeDescriptor


@runtime_checkable
class InstanceProvider(Protocol):
    """A strategy that yields a default value for matching types without constructors.

    Providers receive descriptors already stripped of ``Annotated`` metadata and
    ``NewType`` wrappers. A provider that recurses into a synthesizer must guard
    its own recursion.
    """

    def create(self, target: TypeDescriptor) -> Any:
        """Return a value for ``target`` or ``NO_DEFAULT`` to decline."""
        ...


class ProviderChain:
    """An immutable, priority-ordered sequence of instance providers.

    Safe to share between synthesizers and threads as long as every provider is.
    """

    __slots__ = ("_providers",)

    def __init__(self, providers: Iterable[InstanceProvider] = ()) -> None:
        collected = tuple(providers)
        for provider in collected:
            if not callable(getattr(provider, "create", None)):
                msg = f"Provider {provider!r} does not implement create(target)."
                raise DefaultWireInvalidConfigurationError(msg)
        self._providers: tuple[InstanceProvider, ...] = collected

    @classmethod
    def of(cls, providers: ProviderChain | Iterable[InstanceProvider]) -> ProviderChain:
        """Return ``providers`` as a chain, reusing it when it already is one."""
        if isinstance(providers, ProviderChain):
            return providers
        return cls(providers)

    def try_create(self, target: TypeDescriptor) -> Any:
        """Return the first present value produced by the chain, or ``NO_DEFAULT``."""
        for provider in self._providers:
            value = provider.create(target)
            if value is not NO_DEFAULT:
                return value
        return NO_DEFAULT

    def __iter__(self) -> Iterator[InstanceProvider]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)

    def __getitem__(self, index: int) -> InstanceProvider:
        return self._providers[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProviderChain):
            return NotImplemented
        return self._providers == other._providers

    def __hash__(self) -> int:
        return hash(self._providers)

    def __repr__(self) -> str:
        return f"ProviderChain({list(self._providers)!r})"


class PrimitiveProvider:
    """Provide zero values for scalars, enums, literals, paths and tuples.

    - Scalars and value objects get the entry from ``DEFAULT_SCALAR_FACTORIES``.
    - Enums get their first declared member; an empty enum is declined.
    - ``Literal[...]`` gets its first value.
    - ``pathlib.PurePath`` subclasses get the current-directory path.
    - Bare ``tuple`` and ``tuple[X, ...]`` get an empty tuple.
    """

    def create(self, target: TypeDescriptor) -> Any:
        if is_runtime_class(target):
            return self._create_for_class(target)

        origin = get_origin(target)
        if origin is Literal:
            return get_args(target)[0]
        if origin is tuple:
            args = get_args(target)
            if not args or args[-1] is Ellipsis:
                return ()
        return NO_DEFAULT

    def _create_for_class(self, target: type[Any]) -> Any:
        factory = DEFAULT_SCALAR_FACTORIES.get(target)
        if factory is not None:
            return factory()
        if issubclass(target, enum.Enum):
            members = list(target)
            return members[0] if members else NO_DEFAULT
        if issubclass(target, pathlib.PurePath):
            return target()
        if target is tuple:
            return ()
        return NO_DEFAULT

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CollectionProvider:
    """Provide the most appropriate empty container for container types.

    Works for bare classes (``list``), parametrized aliases (``list[int]``,
    ``typing.Dict[str, int]``) and abstract ``collections.abc`` interfaces such
    as ``Sequence`` or ``Mapping``.
    """

    def create(self, target: TypeDescriptor) -> Any:
        origin = get_origin(target) or target
        if not is_runtime_class(origin):
            return NO_DEFAULT
        if origin in DEFAULT_CONCRETE_CONTAINERS:
            return origin()
        interface = DEFAULT_CONTAINER_INTERFACES.get(origin)
        if interface is not None:
            return interface()
        return NO_DEFAULT

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ExistingValuesProvider:
    """Provide pre-built values, matched by descriptor and then by isinstance.

    Exact descriptor matches win. Otherwise the first registered value that is
    an instance of the requested class is served, in registration order.
    """

    def __init__(self, values: Mapping[TypeDescriptor, object]) -> None:
        self._values: Mapping[TypeDescriptor, object] = MappingProxyType(dict(values))

    @classmethod
    def from_values(cls, *values: object) -> ExistingValuesProvider:
        """Build a provider keyed by the runtime type of each value."""
        return cls({type(value): value for value in values})

    @property
    def values(self) -> Mapping[TypeDescriptor, object]:
        return self._values

    def create(self, target: TypeDescriptor) -> Any:
        try:
            if target in self._values:
                return self._values[target]
        except TypeError:
            # unhashable descriptor
            return NO_DEFAULT

        if not is_runtime_class(target):
            return NO_DEFAULT
        for value in self._values.values():
            if isinstance(value, target):
                return value
        return NO_DEFAULT

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._values)!r})"


def default_providers() -> ProviderChain:
    """Return the standard chain: primitives first, then containers."""
    return ProviderChain((PrimitiveProvider(), CollectionProvider()))


__all__ = [
    "CollectionProvider",
    "ExistingValuesProvider",
    "InstanceProvider",
    "PrimitiveProvider",
    "ProviderChain",
    "default_providers",
]
