"""
# src/objectfactory/base_registries/registration.py

Self-registration helpers: a concrete type announces itself to a factory where it is defined

自注册组件: 具体类型在定义处向工厂注册自身
"""


from __future__ import annotations
from typing import Any, Callable, ClassVar, Hashable, Optional, Type, TypeVar

from .base_registry import ObjectFactory, create_policy_new


C = TypeVar("C", bound=type)


class ObjectFactoryRegister:
    """
    Constructing this value registers ``obj_t`` under ``key`` in ``factory``
    """

    __slots__ = ()

    def __init__(self, factory: ObjectFactory[Any, Any], key: Hashable, obj_t: Type[Any]) -> None:
        factory.register(key, create_policy_new(factory.abstract_type, obj_t))


def register_object(factory: ObjectFactory[Any, Any], key: Hashable) -> Callable[[C], C]:
    """
    Class decorator registering the decorated class in ``factory`` under ``key``.

    Usage example:
        @register_object(HANDLERS, "json")
        class JsonHandler(FormatHandler):
            ...

    params
    ------
    factory: target factory, usually ``ObjectFactory.instance(Base)``
    key: identifier of the decorated class

    return
    ------
    Decorator returning the class unchanged
    """

    def decorator(obj_t: C) -> C:
        ObjectFactoryRegister(factory, key, obj_t)
        return obj_t

    return decorator


class FactoryProduct:
    """
    Mixin binding an abstract root class to its singleton factory

    class Shape(FactoryProduct, factory_root=True): ...

    @Shape.register("circle")
    class Circle(Shape): ...

    Shape.create("circle")
    """

    _factory_root: ClassVar[Optional[type]] = None
    _factory_key_type: ClassVar[type] = str

    def __init_subclass__(cls, factory_root: bool = False, key_type: type = str, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if factory_root:
            cls._factory_root = cls
            cls._factory_key_type = key_type

    @classmethod
    def factory(cls) -> ObjectFactory[Any, Any]:
        if cls._factory_root is None:
            raise TypeError(
                f"{cls.__name__} has no factory root; declare one with factory_root=True"
            )
        return ObjectFactory.instance(cls._factory_root, cls._factory_key_type)

    @classmethod
    def register(cls, key: Hashable) -> Callable[[C], C]:
        """
        Register a subclass under ``key``.
        """
        return register_object(cls.factory(), key)

    @classmethod
    def create(cls, key: Hashable) -> Any:
        """
        Instantiate the subclass registered under ``key``.
        """
        return cls.factory().create(key)

    @classmethod
    def is_registered(cls, key: Hashable) -> bool:
        return cls.factory().is_registered(key)


__all__ = ["ObjectFactoryRegister", "register_object", "FactoryProduct"]
