from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .boxes import BoxRegistry
from .config import Config, HostEntry
from .errors import ConfigIoError
from .parser import parseConfig
from .utils import safeStr

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.slantrc"


def hostEntries(hosts: Iterable[str]) -> list[HostEntry]:
    return [HostEntry(url=safeStr(h)) for h in hosts]


def configFromHosts(hosts: Iterable[str]) -> Config:
    return Config(hosts=hostEntries(hosts))


def loadConfig(
    configPath: str | Path = DEFAULT_CONFIG_PATH,
    hosts: Iterable[str] | None = None,
    *,
    registry: BoxRegistry | None = None,
) -> Config:
    """
    Read and parse a configuration file.

    A missing file is not an error: the hosts given on the command line are used
    instead (possibly none). Hosts given together with an existing file replace
    the file's servers, while its layout and global waittime still apply.
    """
    cfgPath = Path(configPath).expanduser()
    hostsList = list(hosts or [])

    try:
        dataBytes = cfgPath.read_bytes()
    except FileNotFoundError:
        log.info("%s: not found, using %d host(s) from arguments", cfgPath, len(hostsList))
        return configFromHosts(hostsList)
    except OSError as exc:
        err = ConfigIoError(exc.strerror or safeStr(exc), source=str(cfgPath))
        log.warning("%s", err)
        raise err from exc

    cfg = parseConfig(dataBytes, source=str(cfgPath), registry=registry)

    if hostsList:
        log.info("%s: replacing %d configured host(s) with %d from arguments", cfgPath, len(cfg.hosts), len(hostsList))
        cfg.hosts = hostEntries(hostsList)

    return cfg
