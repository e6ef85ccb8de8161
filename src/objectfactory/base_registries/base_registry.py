"""
# src/objectfactory/base_registries/base_registry.py

Object factory component, a key based registry that creates instances of an abstract type

对象工厂组件, 基于键的注册器, 用于创建抽象类型的实例
"""


from __future__ import annotations
from threading import Lock
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Dict, Generic, Hashable, Mapping, Optional, Tuple, Type, TypeVar, cast
import logging


logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

Creator = Callable[[], Any]


class KeyNotFound(KeyError):
    """
    Raised by ``ObjectFactory.create`` when no creator is stored for the key
    """

    def __init__(self, key: Any) -> None:
        super().__init__(f"factory key {key} not found.")
        self.key = key

    def __str__(self) -> str:
        return str(self.args[0])


def create_policy_new(abstract_type: Optional[Type[T]], obj_t: Type[Any]) -> Callable[[], T]:
    """
    Build the default creation policy for ``obj_t``.

    params
    ------
    abstract_type: base type the created instance is handed out as
    obj_t: concrete type to construct

    return
    ------
    Nullary callable returning a new ``obj_t`` instance
    """

    def creator() -> T:
        return cast(T, obj_t())

    creator.__qualname__ = f"create_policy_new[{obj_t.__name__}]"
    return creator


class ObjectFactory(Generic[K, T]):
    """
    Registry of creators indexed by key

    The first registration for a key wins, later ones are ignored.
    """

    _instances: ClassVar[Dict[Tuple[Any, Any], "ObjectFactory[Any, Any]"]] = {}
    _instances_lock: ClassVar[Lock] = Lock()

    def __init__(self, abstract_type: Optional[Type[T]] = None) -> None:
        self.abstract_type: Optional[Type[T]] = abstract_type
        self._objects: Dict[K, Creator] = {}
        self._lock = Lock()

    def __repr__(self) -> str:
        name = getattr(self.abstract_type, "__name__", None)
        return f"<ObjectFactory {name} keys={len(self)}>"

    def __len__(self) -> int:
        with self._lock:
            return len(self._objects)

    def __contains__(self, key: object) -> bool:
        return self.is_registered(cast(K, key))

    def register(self, key: K, creator: Creator) -> None:
        """
        Store ``creator`` under ``key`` unless the key is already taken.

        params
        ------
        key: identifier
        creator: create policy, a callable without arguments
        """

        with self._lock:
            inserted = key not in self._objects
            if inserted:
                self._objects[key] = creator
        if inserted:
            logger.debug(f"Registered *{key}* in {self!r}")
        else:
            logger.debug(f"{self!r}: key *{key}* already registered, keeping the first creator")

    def register_class(self, key: K, obj_t: Type[Any]) -> None:
        """
        Register ``obj_t`` through the default creation policy
        """
        self.register(key, create_policy_new(self.abstract_type, obj_t))

    def create(self, key: K) -> T:
        """
        Create an instance of the object identified by ``key``.

        The creator runs outside the registry lock, so it may use factories itself.
        """

        with self._lock:
            creator = self._objects.get(key)
        if creator is None:
            logger.debug(f"{self!r}: factory key *{key}* not found")
            raise KeyNotFound(key)
        return cast(T, creator())

    def is_registered(self, key: K) -> bool:
        try:
            with self._lock:
                return key in self._objects
        except TypeError:
            # Unhashable keys can never have been registered
            return False

    def get_objects(self) -> Mapping[K, Creator]:
        """
        Read-only snapshot of the key -> creator mapping
        """
        with self._lock:
            return MappingProxyType(dict(self._objects))

    @classmethod
    def instance(cls, abstract_type: Type[T], key_type: Type[Any] = str) -> "ObjectFactory[Any, T]":
        """
        Process-wide factory for the (key_type, abstract_type) pair.

        params
        ------
        abstract_type: base type produced by the factory
        key_type: type of the keys, part of the singleton identity

        return
        ------
        The same factory object on every call with the same pair
        """

        pair = (key_type, abstract_type)
        factory = cls._instances.get(pair)
        if factory is None:
            with cls._instances_lock:
                factory = cls._instances.get(pair)
                if factory is None:
                    factory = cls(abstract_type)
                    cls._instances[pair] = factory
                    logger.debug(f"Created singleton factory for {pair}")
        return cast("ObjectFactory[Any, T]", factory)


__all__ = ["ObjectFactory", "KeyNotFound", "create_policy_new", "Creator"]
