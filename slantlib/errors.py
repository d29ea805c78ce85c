"""
Parse errors for slant configuration files.

Every error names the source it came from and the grammar rule (context) that
was being parsed, so a single line is enough to locate the offending construct.
"""
from __future__ import annotations

from .utils import displayStr


class ConfigError(RuntimeError):
    def __init__(self, detail: str, *, source: str = "<config>", context: str = "config") -> None:
        self.detail = detail
        self.source = source
        self.context = context
        super().__init__(displayStr(f"{source}: {context}: {detail}"))


class UnexpectedEofError(ConfigError):
    def __init__(self, *, source: str = "<config>", context: str = "config") -> None:
        super().__init__("unexpected eof", source=source, context=context)


class UnexpectedTokenError(ConfigError):
    def __init__(self, expected: str, found: str, *, source: str = "<config>", context: str = "config") -> None:
        self.expected = expected
        self.found = found
        super().__init__(f'expected "{expected}", have "{found}"', source=source, context=context)


class UnknownTokenError(ConfigError):
    def __init__(self, found: str, *, source: str = "<config>", context: str = "config") -> None:
        self.found = found
        super().__init__(f'unknown token: "{found}"', source=source, context=context)


class InvalidNumberError(ConfigError):
    def __init__(self, field: str, raw: str, reason: str, *, source: str = "<config>", context: str = "config") -> None:
        self.field = field
        self.raw = raw
        self.reason = reason
        super().__init__(f'bad {field}: "{raw}" is {reason}', source=source, context=context)


class EmptyServerListError(ConfigError):
    def __init__(self, *, source: str = "<config>", context: str = "servers") -> None:
        super().__init__("no servers in statement", source=source, context=context)


class DuplicateLayoutError(ConfigError):
    def __init__(self, *, source: str = "<config>", context: str = "layout") -> None:
        super().__init__("layout already specified", source=source, context=context)


class AllocationError(ConfigError):
    def __init__(self, *, source: str = "<config>", context: str = "config") -> None:
        super().__init__("out of memory", source=source, context=context)


class ConfigIoError(ConfigError):
    def __init__(self, reason: str, *, source: str = "<config>") -> None:
        self.reason = reason
        super().__init__(reason, source=source, context="read")
