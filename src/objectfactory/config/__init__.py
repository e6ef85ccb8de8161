"""
# src/objectfactory/config

Public settings exposed to the user, read from defaults, .env and the environment

对外暴露可供用户设置的配置项, 依次读取默认值, .env 与环境变量
"""


from .settings import CONFIG, configure_logging


__all__ = ["CONFIG", "configure_logging"]
