"""
# src/objectfactory

Key indexed object factory: implementations register under a key, callers create them by key

基于键的对象工厂: 实现以键注册, 调用方按键创建实例
"""


from .config import CONFIG, configure_logging
from .base_registries import (
    ObjectFactory,
    KeyNotFound,
    create_policy_new,
    ObjectFactoryRegister,
    register_object,
    FactoryProduct,
)
from .utils import autoload_packages, load_configured_plugins


configure_logging()


__version__ = "0.1.0"


__all__ = [
    "CONFIG",
    "ObjectFactory",
    "KeyNotFound",
    "create_policy_new",
    "ObjectFactoryRegister",
    "register_object",
    "FactoryProduct",
    "autoload_packages",
    "load_configured_plugins",
    "configure_logging",
]
