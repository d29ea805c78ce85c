from .boxes import BarOption, BoxMeta, BoxRegistry, DrawCategory, HostOption, LinkOption, WindowOption, defaultRegistry
from .config import Config, DrawBox, HostEntry, Layout, freeConfig
from .configLoader import configFromHosts, loadConfig
from .parser import parseConfig

__all__ = [
    "BarOption",
    "BoxMeta",
    "BoxRegistry",
    "DrawCategory",
    "HostOption",
    "LinkOption",
    "WindowOption",
    "defaultRegistry",
    "Config",
    "DrawBox",
    "HostEntry",
    "Layout",
    "freeConfig",
    "configFromHosts",
    "loadConfig",
    "parseConfig",
]
