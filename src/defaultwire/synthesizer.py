from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar, overload

from typing_extensions import Self

from defaultwire._internal.type_checks import is_fixed_tuple, is_union, normalize_descriptor
from defaultwire.constructors import ConstructorCandidate, ConstructorKind, ConstructorSelector
from defaultwire.defaults import DEFAULT_RECURSION_CEILING
from defaultwire.exceptions import DefaultWireInvalidConfigurationError
from defaultwire.instantiation import DirectInstantiation, InstantiationStrategy
from defaultwire.providers import InstanceProvider, ProviderChain, default_providers
from defaultwire.types import NO_DEFAULT, NoDefault, TypeDescriptor

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Synthesizer:
    """Synthesize placeholder instances of arbitrary types.

    A synthesizer first asks its provider chain for a value. When no provider
    matches it picks the constructor with the fewest required parameters,
    synthesizes each parameter recursively and hands everything to its
    instantiation strategy. Anything that cannot be built yields "no default":
    ``None`` from ``get_default`` or ``NO_DEFAULT`` from ``try_get_default``.

    Examples:
        .. code-block:: python

            @dataclass
            class Account:
                id: int
                tags: list[str]


            synthesizer = create_synthesizer()
            account = synthesizer.get_default(Account)  # Account(id=0, tags=[])

    Build a synthesizer once and reuse it. Concurrent calls are safe as long as
    the configuration is not changed while they run.
    """

    def __init__(
        self,
        providers: ProviderChain | Iterable[InstanceProvider],
        *,
        recursion_ceiling: int = DEFAULT_RECURSION_CEILING,
        non_null: bool = False,
        instantiation: InstantiationStrategy | None = None,
        constructor_selector: ConstructorSelector | None = None,
    ) -> None:
        """Initialize the synthesizer.

        Args:
            providers: Instance providers, highest priority first.
            recursion_ceiling: Maximum composite nesting depth, one or higher.
            non_null: When true, a composite whose required parameter cannot
                be synthesized yields no default instead of receiving ``None``.
            instantiation: Strategy for the final construction step. Defaults
                to ``DirectInstantiation``.
            constructor_selector: Selector used to pick constructors.

        Raises:
            DefaultWireInvalidConfigurationError: If ``recursion_ceiling`` is
                below one, a provider lacks ``create`` or ``instantiation`` is
                not callable.

        """
        _validate_recursion_ceiling(recursion_ceiling)
        _validate_instantiation(instantiation)
        self._providers = ProviderChain.of(providers)
        self._recursion_ceiling = recursion_ceiling
        self._non_null = non_null
        self._instantiation: InstantiationStrategy = (
            instantiation if instantiation is not None else DirectInstantiation()
        )
        self._constructor_selector = (
            constructor_selector if constructor_selector is not None else ConstructorSelector()
        )

    @property
    def providers(self) -> ProviderChain:
        """The registered provider chain, highest priority first."""
        return self._providers

    @property
    def recursion_ceiling(self) -> int:
        return self._recursion_ceiling

    @property
    def non_null(self) -> bool:
        return self._non_null

    @property
    def instantiation(self) -> InstantiationStrategy:
        return self._instantiation

    def set_recursion_ceiling(self, recursion_ceiling: int) -> None:
        """Set the maximum composite nesting depth.

        Raises:
            DefaultWireInvalidConfigurationError: If the value is below one or
                not an integer. The current ceiling is kept.

        """
        _validate_recursion_ceiling(recursion_ceiling)
        self._recursion_ceiling = recursion_ceiling

    def set_non_null(self, non_null: bool) -> None:  # noqa: FBT001
        """Set whether every synthesized constructor parameter must be present."""
        self._non_null = non_null

    def with_instantiation_strategy(self, instantiation: InstantiationStrategy) -> Self:
        """Return a copy of this synthesizer that only swaps the instantiation strategy.

        The copy shares the provider chain and constructor selector and starts
        with the same recursion ceiling and non-null flag.
        """
        _validate_instantiation(instantiation)
        return type(self)(
            self._providers,
            recursion_ceiling=self._recursion_ceiling,
            non_null=self._non_null,
            instantiation=instantiation,
            constructor_selector=self._constructor_selector,
        )

    @overload
    def get_default(
        self,
        target: type[T],
        providers: ProviderChain | Iterable[InstanceProvider] | None = None,
    ) -> T | None: ...

    @overload
    def get_default(
        self,
        target: Any,
        providers: ProviderChain | Iterable[InstanceProvider] | None = None,
    ) -> Any: ...

    def get_default(
        self,
        target: Any,
        providers: ProviderChain | Iterable[InstanceProvider] | None = None,
    ) -> Any:
        """Return a default value assignable to ``target``, or None if not possible.

        This covers scalars (zero values, empty strings), enums (first member),
        tuples, containers (the most appropriate empty container) and any type
        with a constructor whose required parameters can be synthesized.

        Args:
            target: Class or typing annotation to synthesize.
            providers: Optional provider chain used for this call only.

        """
        value = self.try_get_default(target, providers)
        return None if value is NO_DEFAULT else value

    def try_get_default(
        self,
        target: Any,
        providers: ProviderChain | Iterable[InstanceProvider] | None = None,
    ) -> Any:
        """Return a default value for ``target`` or ``NO_DEFAULT``.

        Unlike ``get_default`` this keeps ``None`` defaults (``Optional[T]``)
        distinguishable from absence.
        """
        chain = self._providers if providers is None else ProviderChain.of(providers)
        return self.synthesize(target, chain, 0)

    def get_minimum_constructor(self, target: TypeDescriptor) -> ConstructorCandidate | None:
        """Return the constructor with the fewest required parameters, or None."""
        return self._constructor_selector.select_minimal(normalize_descriptor(target))

    def synthesize(self, target: TypeDescriptor, providers: ProviderChain, depth: int) -> Any:
        """Synthesize ``target`` at nesting ``depth`` using ``providers``.

        Providers are consulted at every depth and never count against the
        recursion ceiling. Unions and fixed tuples are structural: their
        members are synthesized at the same depth and the ceiling only applies
        to the composites inside them. Constructor selection, nested synthesis
        and instantiation failures are logged and reported as ``NO_DEFAULT``.
        Exceptions raised by providers for ``target`` itself propagate.
        """
        target = normalize_descriptor(target)

        value = providers.try_create(target)
        if value is not NO_DEFAULT:
            return value

        structural = is_union(target) or is_fixed_tuple(target)
        if depth >= self._recursion_ceiling and not structural:
            logger.debug("Recursion ceiling %d reached at %r", self._recursion_ceiling, target)
            return NO_DEFAULT

        try:
            constructor = self._constructor_selector.select_minimal(target)
        except Exception:
            logger.debug("Constructor selection for %r failed", target, exc_info=True)
            return NO_DEFAULT
        if constructor is None:
            logger.debug("No usable constructor for %r", target)
            return NO_DEFAULT

        arguments = self._synthesize_arguments(constructor, providers, depth)
        if arguments is NO_DEFAULT:
            return NO_DEFAULT
        return self._instantiate(target, constructor, arguments)

    def _synthesize_arguments(
        self,
        constructor: ConstructorCandidate,
        providers: ProviderChain,
        depth: int,
    ) -> tuple[Any, ...] | NoDefault:
        member_depth = depth if constructor.kind is ConstructorKind.PASSTHROUGH else depth + 1
        arguments: list[Any] = []
        for parameter, parameter_type in zip(
            constructor.parameters,
            constructor.parameter_types,
            strict=True,
        ):
            try:
                argument = self.synthesize(parameter_type, providers, member_depth)
            except Exception:
                logger.debug(
                    "Synthesis of parameter '%s' of %s failed",
                    parameter.name,
                    constructor.name,
                    exc_info=True,
                )
                argument = NO_DEFAULT
            if argument is NO_DEFAULT:
                if self._non_null:
                    logger.debug(
                        "Parameter '%s' of %s has no default; non-null mode rejects %r",
                        parameter.name,
                        constructor.name,
                        constructor.target,
                    )
                    return NO_DEFAULT
                argument = None
            arguments.append(argument)
        return tuple(arguments)

    def _instantiate(
        self,
        target: TypeDescriptor,
        constructor: ConstructorCandidate,
        arguments: tuple[Any, ...],
    ) -> Any:
        try:
            return self._instantiation(target, constructor, constructor.parameter_types, arguments)
        except Exception:
            logger.debug(
                "Instantiation of %r through %s failed",
                target,
                constructor.name,
                exc_info=True,
            )
            return NO_DEFAULT

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(providers={self._providers!r}, "
            f"recursion_ceiling={self._recursion_ceiling}, non_null={self._non_null}, "
            f"instantiation={self._instantiation!r})"
        )


def create_synthesizer(
    providers: ProviderChain | Iterable[InstanceProvider] | None = None,
    *,
    recursion_ceiling: int = DEFAULT_RECURSION_CEILING,
    non_null: bool = False,
    instantiation: InstantiationStrategy | None = None,
) -> Synthesizer:
    """Build a synthesizer, using ``default_providers()`` when no providers are given."""
    return Synthesizer(
        default_providers() if providers is None else providers,
        recursion_ceiling=recursion_ceiling,
        non_null=non_null,
        instantiation=instantiation,
    )


def _validate_recursion_ceiling(recursion_ceiling: object) -> None:
    if not isinstance(recursion_ceiling, int) or isinstance(recursion_ceiling, bool):
        msg = f"Recursion ceiling must be an integer, got {recursion_ceiling!r}."
        raise DefaultWireInvalidConfigurationError(msg)
    if recursion_ceiling < 1:
        msg = f"Recursion ceiling must be one or higher, got {recursion_ceiling}."
        raise DefaultWireInvalidConfigurationError(msg)


def _validate_instantiation(instantiation: object) -> None:
    if instantiation is not None and not callable(instantiation):
        msg = f"Instantiation strategy {instantiation!r} is not callable."
        raise DefaultWireInvalidConfigurationError(msg)


__all__ = ["Synthesizer", "create_synthesizer"]
