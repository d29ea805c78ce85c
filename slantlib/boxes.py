"""
Draw box categories and their option vocabularies.

Each category accepts its own set of option keywords. The keyword of an option
is its flag name in lower case, so BarOption.QMIN_BARS is written "qmin_bars".
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field


class DrawCategory(enum.Enum):
    CPU = "cpu"
    MEM = "mem"
    NET = "net"
    DISC = "disc"
    LINK = "link"
    HOST = "host"
    PROCS = "nprocs"
    RPROCS = "rprocs"
    FILES = "nfiles"


class BarOption(enum.Flag):
    QMIN_BARS = enum.auto()
    QMIN = enum.auto()
    MIN = enum.auto()
    HOUR = enum.auto()
    DAY = enum.auto()
    WEEK = enum.auto()
    YEAR = enum.auto()


class WindowOption(enum.Flag):
    QMIN = enum.auto()
    MIN = enum.auto()
    HOUR = enum.auto()
    DAY = enum.auto()
    WEEK = enum.auto()
    YEAR = enum.auto()


class LinkOption(enum.Flag):
    IP = enum.auto()
    STATE = enum.auto()
    ACCESS = enum.auto()


class HostOption(enum.Flag):
    ACCESS = enum.auto()


def optionKeywords(optionType: type[enum.Flag]) -> dict[str, enum.Flag]:
    return {name.lower(): member for name, member in optionType.__members__.items()}


@dataclass(frozen=True)
class BoxMeta:
    category: DrawCategory
    optionType: type[enum.Flag]
    # accepted option keywords; the host box has none
    options: dict[str, enum.Flag] = field(default_factory=dict)
    defaultOptions: int = 0

    @property
    def keyword(self) -> str:
        return self.category.value

    def emptyOptions(self) -> enum.Flag:
        return self.optionType(self.defaultOptions)

    def resolveOption(self, keyword: str) -> enum.Flag | None:
        return self.options.get(keyword)


def barBox(category: DrawCategory) -> BoxMeta:
    return BoxMeta(category=category, optionType=BarOption, options=optionKeywords(BarOption))


def windowBox(category: DrawCategory) -> BoxMeta:
    return BoxMeta(category=category, optionType=WindowOption, options=optionKeywords(WindowOption))


BOX_METAS: tuple[BoxMeta, ...] = (
    barBox(DrawCategory.CPU),
    barBox(DrawCategory.MEM),
    windowBox(DrawCategory.NET),
    windowBox(DrawCategory.DISC),
    BoxMeta(category=DrawCategory.LINK, optionType=LinkOption, options=optionKeywords(LinkOption)),
    BoxMeta(category=DrawCategory.HOST, optionType=HostOption, defaultOptions=HostOption.ACCESS.value),
    barBox(DrawCategory.PROCS),
    barBox(DrawCategory.RPROCS),
    barBox(DrawCategory.FILES),
)


class BoxRegistry:
    def __init__(self, metas: tuple[BoxMeta, ...] | list[BoxMeta] = ()) -> None:
        self.boxesByKeyword: dict[str, BoxMeta] = {}
        for meta in metas:
            self.register(meta)

    def register(self, meta: BoxMeta) -> None:
        self.boxesByKeyword[meta.keyword] = meta

    def resolve(self, keyword: str) -> BoxMeta | None:
        return self.boxesByKeyword.get(keyword)


def defaultRegistry() -> BoxRegistry:
    return BoxRegistry(BOX_METAS)
