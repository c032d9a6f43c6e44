"""Per-actor memory for passing data between tasks and questions.

Values are stored under string keys. ``MemoryKey`` gives a slot a static
type so callers recalling it get the right type back:

    CART_ID: MemoryKey[int] = MemoryKey("cart_id")

    memory.remember(CART_ID, 42)
    cart_id = memory.recall(CART_ID)  # int

A key set to a falsy value (None, 0, "", False) counts as remembered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

from pipelinecraft.errors import UnknownMemoryKeyError

if TYPE_CHECKING:
    from pipelinecraft.http import HTTPResponse

T = TypeVar("T")


@dataclass(frozen=True)
class MemoryKey(Generic[T]):
    """A named, typed memory slot."""

    name: str

    def __str__(self) -> str:
        return self.name


def key_name(key: str | MemoryKey[Any]) -> str:
    return key.name if isinstance(key, MemoryKey) else key


# Slots written by the built-in tasks.
LAST_API_RESPONSE: MemoryKey[HTTPResponse] = MemoryKey("last_api_response")
AUTH_RESPONSE: MemoryKey[dict[str, Any]] = MemoryKey("auth_response")
CART_DATA: MemoryKey[dict[str, Any]] = MemoryKey("cart_data")
PRODUCTS_RESPONSE: MemoryKey[dict[str, Any]] = MemoryKey("products_response")
PRODUCTS: MemoryKey[list[dict[str, Any]]] = MemoryKey("products")


@dataclass
class Memory:
    """Key-value scratch space owned by one actor."""

    owner: str = "actor"
    _data: dict[str, Any] = field(default_factory=dict)

    def remember(self, key: str | MemoryKey[Any], value: Any) -> None:
        """Store a value, replacing any previous one."""
        self._data[key_name(key)] = value

    @overload
    def recall(self, key: MemoryKey[T]) -> T: ...

    @overload
    def recall(self, key: str) -> Any: ...

    def recall(self, key: str | MemoryKey[Any]) -> Any:
        """Return a remembered value.

        Raises:
            UnknownMemoryKeyError: If the key was never remembered.
        """
        name = key_name(key)
        if name not in self._data:
            raise UnknownMemoryKeyError(actor_name=self.owner, key=name)
        return self._data[name]

    def has(self, key: str | MemoryKey[Any]) -> bool:
        return key_name(key) in self._data

    def forget(self, key: str | MemoryKey[Any]) -> None:
        self._data.pop(key_name(key), None)

    def keys(self) -> list[str]:
        return list(self._data.keys())

    def __contains__(self, key: object) -> bool:
        if isinstance(key, (str, MemoryKey)):
            return self.has(key)
        return False

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Memory(owner={self.owner!r}, keys={self.keys()})"
