class DefaultWireError(Exception):
    """Represent a base class for all defaultwire-specific failures.

    Catch this type when you want to handle any defaultwire error path without
    matching each concrete exception class individually.

    Note that "no default available" is never raised: synthesis reports it as
    the ``NO_DEFAULT`` result variant (or ``None`` from ``get_default``).
    """


class DefaultWireInvalidConfigurationError(DefaultWireError, ValueError):
    """Signal invalid synthesizer configuration.

    Raised synchronously by ``Synthesizer.set_recursion_ceiling`` and
    ``create_synthesizer`` when the recursion ceiling is below one or is not an
    integer, and by ``Synthesizer.with_instantiation_strategy`` or
    ``ProviderChain`` when the supplied strategy or provider has the wrong shape.
    The previous configuration is left untouched.

    Typical fixes include passing a ceiling of one or higher and passing
    providers that implement ``create(target)``.
    """


class DefaultWireContextNotSetError(DefaultWireError):
    """Signal a read of a task context outside any active scope.

    Raised by ``TaskContext.get_current`` when no marker was set by
    ``run_with_context``, ``arun_with_context`` or ``use`` in the current thread
    or asyncio task.

    Typical fixes include wrapping the work with ``run_with_context`` or using
    ``TaskContext.find_current`` when absence is expected.
    """
