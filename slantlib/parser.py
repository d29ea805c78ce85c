"""
Recursive-descent parser for slant configuration files.

    servers url+ [ "{" [ "waittime" num [";"] ]* "}" ] ";"
    layout "{" [ item [";" item]* [";"] ] "}" ";"
        item := "header" | "errlog" num | "host" "{" [ box [";" box]* [";"] ] "}"
        box  := category option*
    waittime num ";"

Tokens are whitespace separated, so "{", "}" and ";" must stand alone.
"""
from __future__ import annotations

import logging

from .boxes import BoxRegistry, defaultRegistry
from .config import Config, DrawBox, HostEntry, Layout, MIN_WAITTIME, freeConfig
from .errors import (
    AllocationError,
    ConfigError,
    DuplicateLayoutError,
    EmptyServerListError,
    InvalidNumberError,
    UnknownTokenError,
)
from .tokens import TokenCursor, tokenize
from .utils import INT_MAX, parseBoundedInt

log = logging.getLogger(__name__)


def unknownToken(cur: TokenCursor) -> UnknownTokenError:
    return UnknownTokenError(cur.current(), source=cur.source, context=cur.context)


def parseNumber(cur: TokenCursor, fieldName: str, minVal: int) -> int:
    raw = cur.current()
    try:
        return parseBoundedInt(raw, minVal, INT_MAX)
    except ValueError as exc:
        raise InvalidNumberError(fieldName, raw, str(exc), source=cur.source, context=cur.context) from exc


def parseWaittime(cur: TokenCursor, cfg: Config) -> None:
    with cur.rule("waittime"):
        cfg.waittime = parseNumber(cur, "global waittime", MIN_WAITTIME)
        cur.advance()
        cur.expectAdvance(";")

    log.debug("%s: global waittime %d", cur.source, cfg.waittime)


def parseServerArgs(cur: TokenCursor, cfg: Config, count: int) -> None:
    waittime = 0

    with cur.rule("servers args"):
        while not cur.atEnd() and not cur.equals("}"):
            if not cur.equalsAdvance("waittime"):
                raise unknownToken(cur)
            waittime = parseNumber(cur, "server waittime", MIN_WAITTIME)
            cur.advance()
            cur.equalsAdvance(";")

        cur.expectAdvance("}")

    if not waittime:
        return

    # only the hosts named by this statement
    for hostEntry in cfg.hosts[len(cfg.hosts) - count :]:
        hostEntry.waittime = waittime


def parseServers(cur: TokenCursor, cfg: Config) -> None:
    count = 0

    with cur.rule("servers"):
        while not cur.atEnd():
            if cur.equals(";") or cur.equals("{"):
                break
            cfg.hosts.append(HostEntry(url=cur.take()))
            count += 1

        if not count:
            raise EmptyServerListError(source=cur.source, context=cur.context)

        if cur.equalsAdvance("{"):
            parseServerArgs(cur, cfg, count)
        cur.expectAdvance(";")

    log.debug("%s: %d server(s) declared", cur.source, count)


def parseBox(cur: TokenCursor, layout: Layout, registry: BoxRegistry) -> None:
    meta = registry.resolve(cur.current())
    if meta is None:
        raise unknownToken(cur)
    cur.take()

    box = DrawBox(category=meta.category, options=meta.emptyOptions())
    layout.boxes.append(box)

    while not cur.atEnd():
        if cur.equals(";") or cur.equals("}"):
            break
        flag = meta.resolveOption(cur.current())
        if flag is None:
            raise unknownToken(cur)
        box.options |= flag
        cur.take()


def parseLayoutHost(cur: TokenCursor, layout: Layout, registry: BoxRegistry) -> None:
    with cur.rule("layout host"):
        cur.expectAdvance("{")
        if cur.equalsAdvance("}"):
            return

        while not cur.atEnd():
            parseBox(cur, layout, registry)

            if cur.equals("}"):
                break
            cur.expectAdvance(";")
            if cur.equals("}"):
                break

        cur.expectAdvance("}")


def parseLayout(cur: TokenCursor, cfg: Config, registry: BoxRegistry) -> None:
    with cur.rule("layout"):
        cur.expectAdvance("{")
        if cur.equalsAdvance("}"):
            cur.expectAdvance(";")
            log.debug("%s: empty layout", cur.source)
            return

        layout = cfg.layout = Layout()

        while not cur.atEnd():
            if cur.equalsAdvance("header"):
                layout.header = True
            elif cur.equalsAdvance("errlog"):
                layout.errlog = parseNumber(cur, "layout errlog", 0)
                cur.advance()
            elif cur.equalsAdvance("host"):
                parseLayoutHost(cur, layout, registry)
            else:
                raise unknownToken(cur)

            if cur.equals("}"):
                break
            cur.expectAdvance(";")
            if cur.equals("}"):
                break

        cur.expectAdvance("}")
        cur.expectAdvance(";")

    log.debug("%s: layout with %d box(es)", cur.source, len(layout.boxes))


def parseStatements(cur: TokenCursor, cfg: Config, registry: BoxRegistry) -> None:
    # an empty layout leaves cfg.layout unset but still counts
    layoutSeen = False

    while not cur.atEnd():
        if cur.equalsAdvance("servers"):
            parseServers(cur, cfg)
        elif cur.equalsAdvance("layout"):
            if layoutSeen:
                raise DuplicateLayoutError(source=cur.source, context="layout")
            layoutSeen = True
            parseLayout(cur, cfg, registry)
        elif cur.equalsAdvance("waittime"):
            parseWaittime(cur, cfg)
        else:
            raise unknownToken(cur)


def parseConfig(data: str | bytes, *, source: str = "<config>", registry: BoxRegistry | None = None) -> Config:
    cfg = Config()

    try:
        cur = TokenCursor(tokenize(data), source=source)
        parseStatements(cur, cfg, registry or defaultRegistry())
    except ConfigError as exc:
        log.warning("%s", exc)
        freeConfig(cfg)
        raise
    except MemoryError as exc:
        freeConfig(cfg)
        err = AllocationError(source=source)
        log.warning("%s", err)
        raise err from exc

    return cfg
