from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated, Any, TypeVar, get_args, get_origin, get_type_hints


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    T = TypeVar("T")

DEPENDENCIES_ATTR = "__inject_dependencies__"


@dataclass(frozen=True)
class Named:
    """`Annotated` marker binding a constructor parameter to a component registered by name."""

    name: str


def named(name: str) -> Named:
    """Mark a parameter to be injected by name.

    Example:
      def __init__(self, processor: Annotated[Processor, named("Processor")]): ...

    """
    return Named(name)


def inject(cls: type[T]) -> type[T]:
    """Record the constructor dependency tokens of `cls`.

    Each positional constructor parameter becomes a token: its annotated type,
    or the name given with `named()`. Collection stops at the first
    unannotated parameter that has a default; that parameter and the ones
    after it keep their defaults.
    """
    if not inspect.isclass(cls):
        msg = f"@inject can only decorate classes, got {cls!r}"
        raise TypeError(msg)

    hints = _get_init_type_hints(cls)
    params = list(inspect.signature(cls.__init__).parameters.values())[1:]  # drop self

    tokens: list[Any] = []
    for p in params:
        if p.kind not in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD):
            break
        hint = hints.get(p.name, inspect.Parameter.empty)
        if hint is inspect.Parameter.empty:
            if p.default is not p.empty:
                break
            msg = f"Cannot determine dependency for parameter '{p.name}' of {cls.__name__}: no annotation"
            raise TypeError(msg)
        tokens.append(_token_from_hint(hint))

    setattr(cls, DEPENDENCIES_ATTR, tokens)
    logger.debug("Recorded %d constructor dependencies for %s", len(tokens), cls.__qualname__)
    return cls


def constructor_dependencies(cls: type) -> list[Any]:
    """Dependency tokens for `cls`, falling back to the nearest ancestor declaring a constructor.

    A class that declares neither `__init__` nor injection metadata uses the
    constructor of its base, so its dependency list is the base's list. A
    declared but undecorated `__init__` yields no dependencies.
    """
    for klass in cls.__mro__:
        if DEPENDENCIES_ATTR in klass.__dict__:
            return list(klass.__dict__[DEPENDENCIES_ATTR])
        if "__init__" in klass.__dict__:
            return []
    return []


def _token_from_hint(hint: Any) -> Any:
    if get_origin(hint) is Annotated:
        base, *metadata = get_args(hint)
        return next((m.name for m in metadata if isinstance(m, Named)), base)
    return hint


def _get_init_type_hints(cls: type) -> dict[str, Any]:
    try:
        init = inspect.getattr_static(cls, "__init__")
        hints = get_type_hints(init, include_extras=True)
    except TypeError:
        hints = {}
    except NameError as exc:
        msg = (
            f"Cannot resolve type hint '{exc.name}' in {cls.__qualname__}.__init__; "
            "define it at module level or pass dependencies explicitly"
        )
        raise TypeError(msg) from exc

    hints.pop("return", None)
    return hints
