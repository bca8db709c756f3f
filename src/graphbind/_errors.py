from __future__ import annotations

from typing import Any


class ResolutionError(RuntimeError):
    pass


class UnregisteredComponentError(ResolutionError):
    """Raised by the container when no model matches the requested token."""

    def __init__(self, token: Any) -> None:
        self.token = token
        if isinstance(token, str):
            msg = f"Trying to resolve {token}, but its not registered in the container"
        else:
            msg = f"Trying to resolve type of {token_name(token)}, but its not registered in the container"
        super().__init__(msg)


class MissingResolverError(ResolutionError):
    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"No resolver registered for component model kind of {kind}")


class MissingInjectionMetadataError(ResolutionError):
    def __init__(self, type_: type, detail: str | None = None) -> None:
        self.type = type_
        msg = f"{type_.__name__} class requires @inject to get proper constructor parameter types"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class DependencyGraphError(ResolutionError):
    """Base for analyzer failures; `path` holds the rendered identifiers from the root."""

    def __init__(self, msg: str, path: list[str]) -> None:
        self.path = path
        super().__init__(msg)


class UnresolvedDependencyError(DependencyGraphError):
    def __init__(self, path: list[str]) -> None:
        msg = f"Trying to resolve {' -> '.join(path)} but {path[-1]} is not registered in container"
        super().__init__(msg, path)


class CircularDependencyError(DependencyGraphError):
    def __init__(self, path: list[str]) -> None:
        super().__init__(f"Circular dependency detected on: {' -> '.join(path)}", path)


def token_name(token: Any) -> str:
    """Render a type or name token the way error messages show it."""
    if isinstance(token, str):
        return token
    return getattr(token, "__name__", repr(token))
