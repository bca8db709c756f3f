"""Minimal dependency injection kernel.

This package builds object graphs from registered component models,
wiring constructor dependencies declared as types or registered names, and
can validate a whole dependency graph before anything is constructed.

Exports:
- `Container`: kernel supporting type, named, instance and auto factory registrations.
- `Lifetime`: singleton or transient lifetime of a component.
- `DependencyGraphAnalyzer`: pre-flight check for unregistered components and cycles.
- `inject` / `named`: record constructor dependency tokens from type hints.
- `ResolverBase` / `DEFAULT_RESOLVERS`: extension point for custom component kinds.
"""

from ._analyzer import DependencyGraphAnalyzer
from ._container import Container
from ._errors import (
    CircularDependencyError,
    DependencyGraphError,
    MissingInjectionMetadataError,
    MissingResolverError,
    ResolutionError,
    UnregisteredComponentError,
    UnresolvedDependencyError,
)
from ._inject import constructor_dependencies, inject, named
from ._models import (
    AutoFactoryComponentModel,
    ComponentModel,
    ComponentModelModifier,
    InstanceComponentModel,
    Lifetime,
    TypeComponentModel,
)
from ._registration import ComponentRegistrar
from ._registry import Registry
from ._resolvers import (
    DEFAULT_RESOLVERS,
    AutoFactory,
    AutoFactoryResolver,
    InstanceResolver,
    Kernel,
    ResolverBase,
    TypeResolver,
)


__all__ = [
    "DEFAULT_RESOLVERS",
    "AutoFactory",
    "AutoFactoryComponentModel",
    "AutoFactoryResolver",
    "CircularDependencyError",
    "ComponentModel",
    "ComponentModelModifier",
    "ComponentRegistrar",
    "Container",
    "DependencyGraphAnalyzer",
    "DependencyGraphError",
    "InstanceComponentModel",
    "InstanceResolver",
    "Kernel",
    "Lifetime",
    "MissingInjectionMetadataError",
    "MissingResolverError",
    "Registry",
    "ResolutionError",
    "ResolverBase",
    "TypeComponentModel",
    "TypeResolver",
    "UnregisteredComponentError",
    "UnresolvedDependencyError",
    "constructor_dependencies",
    "inject",
    "named",
]
