"""Loading and caching of game resources."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")

_ID_LIMIT = 1 << 16


class ResourceManager:
    """Loads resources from the content folder and keeps track of their lifetime.

    A resource type is constructed with no arguments and must provide
    ``load(path, manager) -> bool``, ``is_cloneable() -> bool`` and ``clone()``.
    """

    def __init__(self, content_path: str = "") -> None:
        self.content_path = content_path
        self._resources: dict[str, Any] = {}
        self._clones: list[Any] = []
        self._next_id = 0

    def __contains__(self, path: str) -> bool:
        return path in self._resources

    def _assign_id(self, resource: Any) -> None:
        resource.resource_id = self._next_id
        self._next_id = (self._next_id + 1) % _ID_LIMIT

    def load(
        self,
        resource_type: type[T],
        path: str,
        cache: bool = True,
        append_content_path: bool = True,
    ) -> T:
        """Load a resource, returning the cached one (or a clone of it) when available."""
        cached = self._resources.get(path)
        if cached is not None:
            if not isinstance(cached, resource_type):
                raise TypeError(
                    f"resource {path!r} is a {type(cached).__name__}, "
                    f"not a {resource_type.__name__}"
                )
            if cached.is_cloneable():
                clone = cached.clone()
                self._assign_id(clone)
                self._clones.append(clone)
                return clone
            return cached

        resource = resource_type()
        resource.resource_manager = self
        full_path = self.content_path + path if append_content_path else path

        if not resource.load(full_path, self):
            raise OSError(f"could not load resource {full_path!r}")

        if cache:
            self._resources[path] = resource
        self._assign_id(resource)
        return resource

    def unload_all(self) -> None:
        """Forget every cached resource and every clone."""
        self._resources.clear()
        self._clones.clear()