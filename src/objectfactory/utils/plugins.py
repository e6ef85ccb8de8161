"""
# src/objectfactory/utils/plugins.py

Registration phase: import implementation packages so their declarations fill the factories

注册阶段: 导入实现所在的包, 使其声明填充工厂
"""


from typing import Iterable, List
import importlib
import logging
import pkgutil

from objectfactory.config import CONFIG


logger = logging.getLogger(__name__)


def autoload_packages(packages: Iterable[str]) -> List[str]:
    """
    Import every direct submodule under the given packages, in order.

    params
    ------
    packages: dotted package (or module) names

    return
    ------
    Names of the imported modules
    """

    loaded: List[str] = []
    for pkg_name in packages:
        try:
            pkg = importlib.import_module(pkg_name)
        except ImportError as exc:
            logger.error(f"Cannot import plugin package *{pkg_name}*. Details: {exc}")
            raise
        loaded.append(pkg_name)

        # A plain module registers on import, nothing to walk
        if not hasattr(pkg, "__path__"):
            continue
        for module in sorted(pkgutil.iter_modules(pkg.__path__), key=lambda m: m.name):
            mod_name = f"{pkg_name}.{module.name}"
            try:
                importlib.import_module(mod_name)
            except Exception as exc:
                logger.error(f"Cannot import plugin module *{mod_name}*. Details: {exc}")
                raise
            loaded.append(mod_name)

    logger.info(f"Loaded {len(loaded)} plugin module(s)")
    return loaded


def load_configured_plugins() -> List[str]:
    """
    Run ``autoload_packages`` over the packages named by *OBJECTFACTORY_PLUGINS*
    """
    raw = str(CONFIG.get("OBJECTFACTORY_PLUGINS") or "")
    packages = [name.strip() for name in raw.split(",") if name.strip()]
    return autoload_packages(packages)


__all__ = ["autoload_packages", "load_configured_plugins"]
