from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ._models import AutoFactoryComponentModel, InstanceComponentModel, TypeComponentModel


if TYPE_CHECKING:
    from ._models import ComponentModel, ComponentModelModifier
    from ._registry import Registry


logger = logging.getLogger(__name__)


class ComponentRegistrar:
    """Registers a component under a fixed name.

    Returned by `Container.register_named`. Pick how the component is built:

      container.register_named("Processor").as_type(Intel)
      container.register_named("Monitor").as_instance(LGMonitor())
      container.register_named("Monitor").as_instance(lambda kernel: LGMonitor(kernel.resolve(Display)))
      container.register_named("ComputerFactory").as_auto_factory(Computer)

    """

    def __init__(self, registry: Registry, name: str) -> None:
        self._registry = registry
        self._name = name

    def as_type(self, type_: type, *, dependencies: list[Any] | None = None) -> ComponentModelModifier:
        return self._register(TypeComponentModel.of(type_, self._name, dependencies=dependencies))

    def as_instance(self, value: Any) -> ComponentModelModifier:
        """Bind a pre-built instance, or a routine `(kernel) -> instance` called on each creation."""
        return self._register(InstanceComponentModel(self._name, value=value))

    def as_auto_factory(self, component: type | str) -> ComponentModelModifier:
        return self._register(AutoFactoryComponentModel(self._name, component=component))

    def _register(self, model: ComponentModel) -> ComponentModelModifier:
        logger.debug("Registering %s component %r", model.kind, model.name)
        self._registry.add(model)
        return model
