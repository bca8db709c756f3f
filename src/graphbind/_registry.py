from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._models import ComponentModel, TypeComponentModel


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class Registry:
    """Insertion-ordered collection of component models.

    Lookups return the first match. Registering the same name or type twice
    is allowed, but only the first registration is ever found.
    """

    def __init__(self, models: Iterable[ComponentModel] = ()) -> None:
        self._models: list[ComponentModel] = list(models)

    def add(self, model: ComponentModel) -> None:
        self._models.append(model)

    def find(self, token: Any) -> ComponentModel | None:
        if isinstance(token, str):
            return next((m for m in self._models if m.name == token), None)
        return next(
            (m for m in self._models if isinstance(m, TypeComponentModel) and m.type is token),
            None,
        )

    def __iter__(self) -> Iterator[ComponentModel]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)
