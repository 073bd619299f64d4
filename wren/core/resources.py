from typing import Any, Dict, Type, TypeVar

T = TypeVar("T")


class ResourceManager:
    """
    Process-wide singletons keyed by their concrete type.
    A subclass instance is stored under its own type, not its base.
    """

    def __init__(self):
        self._resources: Dict[Type[Any], Any] = {}

    def add(self, resource: Any) -> Any | None:
        """Store `resource`, returning the one it replaced (if any)."""
        key = type(resource)
        previous = self._resources.get(key)
        self._resources[key] = resource
        return previous

    def get(self, resource_type: Type[T]) -> T:
        try:
            return self._resources[resource_type]
        except KeyError:
            raise KeyError(
                f"Resource not found: {resource_type.__name__}"
            ) from None

    def try_get(self, resource_type: Type[T]) -> T | None:
        return self._resources.get(resource_type)

    def remove(self, resource_type: Type[T]) -> T | None:
        return self._resources.pop(resource_type, None)

    def __contains__(self, resource_type: Type[Any]) -> bool:
        return resource_type in self._resources
