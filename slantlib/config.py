"""
Configuration data classes for slant.

HostEntry is one monitored server; a waittime of 0 means it polls at the global
Config.waittime. Hosts keep the order they were declared in, which is also the
order they are displayed in.

Layout describes the dashboard: an optional header line, the number of error log
lines to reserve, and the draw boxes in rendering order.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from .boxes import DrawCategory

DEFAULT_WAITTIME = 60
MIN_WAITTIME = 15


@dataclass
class HostEntry:
    url: str
    waittime: int = 0  # <- 0 == inherit global


@dataclass
class DrawBox:
    category: DrawCategory
    options: enum.Flag

    def optionNames(self) -> list[str]:
        return [name.lower() for name, member in type(self.options).__members__.items() if member in self.options]


@dataclass
class Layout:
    header: bool = False
    errlog: int = 0
    boxes: list[DrawBox] = field(default_factory=list)


@dataclass
class Config:
    waittime: int = DEFAULT_WAITTIME
    hosts: list[HostEntry] = field(default_factory=list)
    layout: Layout | None = None

    def effectiveWaittime(self, host: HostEntry) -> int:
        return host.waittime or self.waittime

    def toDict(self) -> dict[str, Any]:
        layoutObj: dict[str, Any] | None = None
        if self.layout is not None:
            layoutObj = {
                "header": self.layout.header,
                "errlog": self.layout.errlog,
                "boxes": [
                    {"category": b.category.value, "options": b.optionNames()}
                    for b in self.layout.boxes
                ],
            }

        return {
            "waittime": self.waittime,
            "hosts": [
                {"url": h.url, "waittime": h.waittime, "effectiveWaittime": self.effectiveWaittime(h)}
                for h in self.hosts
            ],
            "layout": layoutObj,
        }


def freeConfig(cfg: Config | None) -> None:
    if cfg is None:
        return

    cfg.hosts.clear()
    if cfg.layout is not None:
        cfg.layout.boxes.clear()
    cfg.layout = None
