"""Pre-flight validation of dependency graphs.

The analyzer walks declared dependency tokens without constructing anything.
It reports the first unregistered component or cycle together with the path
from the requested root, e.g. ``Computer -> Monitor -> LCDScreen``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ._errors import CircularDependencyError, UnresolvedDependencyError, token_name
from ._models import TypeComponentModel
from ._registry import Registry


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from ._models import ComponentModel


logger = logging.getLogger(__name__)


class DependencyGraphAnalyzer:
    """Checks that every transitive dependency of a root is registered and acyclic.

    Cycles are detected against the names on the current traversal path, so
    shared (diamond shaped) dependencies are not mistaken for cycles. Models
    whose subgraph has been fully validated get `analyzed = True` and are not
    walked again, whichever root reaches them.
    """

    def __init__(self, models: Registry | Iterable[ComponentModel]) -> None:
        self._registry = models if isinstance(models, Registry) else Registry(models)

    def analyze(self, root: Any, path: Sequence[str] = ()) -> None:
        """Validate the graph reachable from `root`.

        Raises:
          UnresolvedDependencyError: a component on the graph is not registered.
          CircularDependencyError: a dependency path returns to one of its ancestors.

        """
        model = self._registry.find(root)
        if model is None:
            error = UnresolvedDependencyError([*path, token_name(root)])
            logger.debug("Dependency analysis failed: %s", error)
            raise error

        if model.analyzed:
            return

        if model.name in path:
            error = CircularDependencyError([*path, model.name])
            logger.debug("Dependency analysis failed: %s", error)
            raise error

        current = [*path, model.name]
        # only type models declare dependencies, other kinds are leaves
        if isinstance(model, TypeComponentModel):
            for dependency in model.dependencies:
                self.analyze(dependency, current)

        model.analyzed = True
