"""
# src/objectfactory/config/constants.py

All customizable public constant definitions

所有可自定义公有常量定义处
"""


from typing import Dict, Any


CONSTANT_CONFIG: Dict[str, Any] = {
    # Logging
    "OBJECTFACTORY_LOG_LEVEL": "WARNING",
    # Registration phase: comma separated packages imported by load_configured_plugins
    "OBJECTFACTORY_PLUGINS": "",
}
