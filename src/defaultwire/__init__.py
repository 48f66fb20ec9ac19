from defaultwire.constructors import ConstructorCandidate, ConstructorKind, ConstructorSelector
from defaultwire.exceptions import (
    DefaultWireContextNotSetError,
    DefaultWireError,
    DefaultWireInvalidConfigurationError,
)
from defaultwire.instantiation import DirectInstantiation, InstantiationStrategy, SubtypeInstantiation
from defaultwire.markers import alternate_constructor
from defaultwire.providers import (
    CollectionProvider,
    ExistingValuesProvider,
    InstanceProvider,
    PrimitiveProvider,
    ProviderChain,
    default_providers,
)
from defaultwire.synthesizer import Synthesizer, create_synthesizer
from defaultwire.task_context import TaskContext
from defaultwire.types import NO_DEFAULT, NoDefault

__all__ = [
    "NO_DEFAULT",
    "CollectionProvider",
    "ConstructorCandidate",
    "ConstructorKind",
    "ConstructorSelector",
    "DefaultWireContextNotSetError",
    "DefaultWireError",
    "DefaultWireInvalidConfigurationError",
    "DirectInstantiation",
    "ExistingValuesProvider",
    "InstanceProvider",
    "InstantiationStrategy",
    "NoDefault",
    "PrimitiveProvider",
    "ProviderChain",
    "SubtypeInstantiation",
    "Synthesizer",
    "TaskContext",
    "alternate_constructor",
    "create_synthesizer",
    "default_providers",
]
