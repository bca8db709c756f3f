from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

from ._errors import MissingInjectionMetadataError, token_name
from ._models import (
    AutoFactoryComponentModel,
    ComponentModel,
    InstanceComponentModel,
    Lifetime,
    TypeComponentModel,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")

if TYPE_CHECKING:
    from collections.abc import Callable, MutableMapping

    ResolverFactory = Callable[..., "ResolverBase"]


class Kernel(Protocol):
    """Resolve-only view of a container, handed to resolvers, factories and hooks."""

    def resolve(self, token: Any) -> Any: ...


class ResolverBase(ABC):
    """Materializes one kind of component model.

    Lifetime handling is shared here: singletons are looked up in and stored
    to `cache` by model name, with the post-creation hook applied before
    storing. Subclasses only implement `get_instance`.
    """

    def __init__(self, kernel: Kernel, cache: MutableMapping[str, Any]) -> None:
        self.kernel = kernel
        self.cache = cache

    @abstractmethod
    def get_instance(self, model: Any) -> Any:
        raise NotImplementedError

    def resolve(self, model: ComponentModel) -> Any:
        if model.scope == Lifetime.SINGLETON:
            if model.name not in self.cache:
                self.cache[model.name] = self._create(model)
            return self.cache[model.name]

        return self._create(model)

    def _create(self, model: ComponentModel) -> Any:
        instance = self.get_instance(model)
        logger.debug("Created %s component %r (%s)", model.kind, model.name, model.scope.value)
        if model.on_created_callback is not None:
            instance = model.on_created_callback(instance, self.kernel)
        return instance


class TypeResolver(ResolverBase):
    def get_instance(self, model: TypeComponentModel) -> Any:
        required, maximum, keyword_only = _constructor_arity(model.type)
        count = len(model.dependencies)
        if not model.dependencies and required > 0:
            raise MissingInjectionMetadataError(model.type)
        if keyword_only:
            raise MissingInjectionMetadataError(
                model.type, f"required keyword-only parameters {', '.join(keyword_only)} cannot be injected"
            )
        if count < required or (maximum is not None and count > maximum):
            upper = "any" if maximum is None else maximum
            raise MissingInjectionMetadataError(
                model.type, f"{count} dependencies declared, constructor takes {required} to {upper} positional arguments"
            )

        args = [self.kernel.resolve(dep) for dep in model.dependencies]
        return model.type(*args)


class InstanceResolver(ResolverBase):
    def get_instance(self, model: InstanceComponentModel) -> Any:
        if inspect.isroutine(model.value):
            return model.value(self.kernel)
        return model.value


class AutoFactory(Generic[T]):
    """Deferred handle resolving its target from the kernel on every `get()`.

    The target's own lifetime applies: a singleton target yields the same
    instance each call, a transient one a fresh instance.
    """

    def __init__(self, kernel: Kernel, component: type[T] | str) -> None:
        self._kernel = kernel
        self._component = component

    def get(self) -> T:
        return self._kernel.resolve(self._component)

    __call__ = get

    def __repr__(self) -> str:
        return f"AutoFactory({token_name(self._component)})"


class AutoFactoryResolver(ResolverBase):
    def get_instance(self, model: AutoFactoryComponentModel) -> AutoFactory[Any]:
        return AutoFactory(self.kernel, model.component)


DEFAULT_RESOLVERS: tuple[tuple[str, ResolverFactory], ...] = (
    (TypeComponentModel.kind, TypeResolver),
    (InstanceComponentModel.kind, InstanceResolver),
    (AutoFactoryComponentModel.kind, AutoFactoryResolver),
)


def _constructor_arity(cls: type) -> tuple[int, int | None, list[str]]:
    """Required positional count, maximum positional count (None with *args), required keyword-only names."""
    try:
        sig = inspect.signature(cls)
    except (TypeError, ValueError):
        # builtins without a retrievable signature
        return 0, None, []

    params = sig.parameters.values()
    positional = [p for p in params if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)]
    required = sum(1 for p in positional if p.default is p.empty)
    maximum = None if any(p.kind is p.VAR_POSITIONAL for p in params) else len(positional)
    keyword_only = [p.name for p in params if p.kind is p.KEYWORD_ONLY and p.default is p.empty]
    return required, maximum, keyword_only
