"""
# src/objectfactory/base_registries

Object factory and its self-registration helpers

对象工厂及其自注册工具
"""


from .base_registry import ObjectFactory, KeyNotFound, create_policy_new
from .registration import ObjectFactoryRegister, register_object, FactoryProduct


__all__ = [
    "ObjectFactory",
    "KeyNotFound",
    "create_policy_new",
    "ObjectFactoryRegister",
    "register_object",
    "FactoryProduct",
]
