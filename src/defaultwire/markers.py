from typing import Any

ALTERNATE_CONSTRUCTOR_MARKER = "__defaultwire_alternate_constructor__"


def alternate_constructor(method: Any) -> classmethod:  # type: ignore[type-arg]
    """Mark a classmethod as an alternate constructor for synthesis.

    Python classes have a single call constructor; alternate constructors are
    conventionally classmethods. Only marked classmethods are considered by the
    constructor selector, next to the class call itself. The decorator accepts
    either a plain function (it is wrapped in ``classmethod``) or an existing
    ``classmethod`` object.

    Examples:
        .. code-block:: python

            class Money:
                def __init__(self, amount: Decimal, currency: Currency) -> None: ...

                @alternate_constructor
                def zero(cls) -> Self:
                    return cls(Decimal(0), Currency.EUR)

    """
    function = method.__func__ if isinstance(method, classmethod) else method
    setattr(function, ALTERNATE_CONSTRUCTOR_MARKER, True)
    if isinstance(method, classmethod):
        return method
    return classmethod(function)


def is_alternate_constructor(attribute: object) -> bool:
    """Return true for classmethod objects marked with ``alternate_constructor``."""
    if not isinstance(attribute, classmethod):
        return False
    return getattr(attribute.__func__, ALTERNATE_CONSTRUCTOR_MARKER, False) is True


__all__ = ["alternate_constructor", "is_alternate_constructor"]
