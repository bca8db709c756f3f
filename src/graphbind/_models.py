from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Protocol

from ._inject import constructor_dependencies


if TYPE_CHECKING:
    from collections.abc import Callable

    from ._resolvers import Kernel

    OnCreated = Callable[[Any, Kernel], Any]


class Lifetime(Enum):
    SINGLETON = "singleton"
    TRANSIENT = "transient"


class ComponentModelModifier(Protocol):
    """Fluent surface returned by registration, used to adjust a model before first use."""

    def singleton(self) -> ComponentModelModifier: ...

    def on_created(self, callback: OnCreated) -> ComponentModelModifier: ...


@dataclass(eq=False)
class ComponentModel:
    """Registered description of a component.

    `kind` selects the resolver, `name` is the binding key used for
    name lookups and for the singleton cache. `analyzed` is only
    written by the dependency graph analyzer.
    """

    kind: ClassVar[str] = ""

    name: str
    scope: Lifetime = field(default=Lifetime.TRANSIENT, kw_only=True)
    on_created_callback: OnCreated | None = field(default=None, kw_only=True)
    analyzed: bool = field(default=False, kw_only=True)

    def singleton(self) -> ComponentModel:
        self.scope = Lifetime.SINGLETON
        return self

    def on_created(self, callback: OnCreated) -> ComponentModel:
        self.on_created_callback = callback
        return self


@dataclass(eq=False)
class TypeComponentModel(ComponentModel):
    kind: ClassVar[str] = "Type"

    type: type = field(kw_only=True)
    dependencies: list[Any] = field(default_factory=list, kw_only=True)

    @classmethod
    def of(
        cls,
        type_: type,
        name: str | None = None,
        *,
        dependencies: list[Any] | None = None,
    ) -> TypeComponentModel:
        """Build a model for `type_`, reading injection metadata when no dependencies are given."""
        if dependencies is None:
            dependencies = constructor_dependencies(type_)
        return cls(name or type_.__name__, type=type_, dependencies=list(dependencies))


@dataclass(eq=False)
class InstanceComponentModel(ComponentModel):
    kind: ClassVar[str] = "Instance"

    # Either the instance itself or a routine `(kernel) -> instance`.
    value: Any = field(default=None, kw_only=True)


@dataclass(eq=False)
class AutoFactoryComponentModel(ComponentModel):
    kind: ClassVar[str] = "AutoFactory"

    component: type | str = field(kw_only=True)
