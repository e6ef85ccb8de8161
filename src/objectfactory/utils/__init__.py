"""
# src/objectfactory/utils

Registration phase tools

注册阶段工具
"""


from .plugins import autoload_packages, load_configured_plugins


__all__ = ["autoload_packages", "load_configured_plugins"]
