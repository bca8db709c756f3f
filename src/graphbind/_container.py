from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, TypeVar, overload

from ._analyzer import DependencyGraphAnalyzer
from ._errors import MissingResolverError, UnregisteredComponentError
from ._models import ComponentModel, TypeComponentModel
from ._registration import ComponentRegistrar
from ._registry import Registry
from ._resolvers import DEFAULT_RESOLVERS


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._models import ComponentModelModifier
    from ._resolvers import ResolverBase, ResolverFactory

    T = TypeVar("T")


class Container:
    """Minimal DI kernel.

    - register types, named types, instances, instance factories and auto factories
    - resolve with constructor injection from declared dependency tokens
    - lifetimes: singleton / transient, with post-creation hooks
    - optional dependency graph analysis before resolving.

    `resolvers` is the list of `(kind, resolver_factory)` pairs the dispatch
    table is built from; it cannot change once the container exists. With
    `analyze=True` every `resolve` call first validates the graph of the
    requested component.
    """

    def __init__(
        self,
        resolvers: Iterable[tuple[str, ResolverFactory]] = DEFAULT_RESOLVERS,
        *,
        analyze: bool = False,
    ) -> None:
        self._registry = Registry()
        self._singleton_cache: dict[str, Any] = {}
        self._analyze = analyze
        self._analyzer = DependencyGraphAnalyzer(self._registry)
        self._resolvers: dict[str, ResolverBase] = {
            kind: factory(self, self._singleton_cache) for kind, factory in resolvers
        }
        logger.debug("Container created with resolvers for kinds: %s", ", ".join(self._resolvers))

    @property
    def models(self) -> tuple[ComponentModel, ...]:
        return tuple(self._registry)

    def register_named(self, name: str) -> ComponentRegistrar:
        """Start registering a component bound to `name`.

        Example:
          container.register_named("Keyboard").as_type(Logitech).singleton()

        """
        if not isinstance(name, str) or not name:
            msg = f"Component name must be a non-empty string, got {name!r}"
            raise ValueError(msg)
        return ComponentRegistrar(self._registry, name)

    def register_type(self, cls: type[T], *, dependencies: list[Any] | None = None) -> ComponentModelModifier:
        """Register `cls` under its own name and type.

        `dependencies` lists the constructor arguments as types or registered
        names, in order. When omitted, the list recorded by `@inject` is used.
        """
        if not inspect.isclass(cls):
            msg = f"register_type expects a class, got {cls!r}"
            raise TypeError(msg)

        model = TypeComponentModel.of(cls, dependencies=dependencies)
        logger.debug("Registering Type component %r", model.name)
        self._registry.add(model)
        return model

    def register_model(self, model: ComponentModel) -> None:
        """Register a pre-built component model, e.g. of a custom kind."""
        if not isinstance(model, ComponentModel):
            msg = f"register_model expects a ComponentModel, got {type(model).__name__}"
            raise TypeError(msg)

        logger.debug("Registering %s component %r", model.kind, model.name)
        self._registry.add(model)

    @overload
    def resolve(self, token: type[T]) -> T: ...

    @overload
    def resolve(self, token: str) -> Any: ...

    def resolve(self, token: type[T] | str) -> Any:
        """Resolve the token to an instance.

        A string token matches the first model with that name, a type token
        the first type registration of exactly that type.
        """
        if self._analyze:
            self._analyzer.analyze(token)

        model = self._registry.find(token)
        if model is None:
            raise UnregisteredComponentError(token)

        return self._resolve_model(model)

    def analyze(self, token: type | str) -> None:
        """Validate the dependency graph of `token` without constructing anything."""
        self._analyzer.analyze(token)

    def _resolve_model(self, model: ComponentModel) -> Any:
        resolver = self._resolvers.get(model.kind)
        if resolver is None:
            raise MissingResolverError(model.kind)

        return resolver.resolve(model)
