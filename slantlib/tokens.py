from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Iterator

from .errors import UnexpectedEofError, UnexpectedTokenError

# only these four separate tokens; braces and semicolons are ordinary text
_reSeparators = re.compile(r"[ \t\r\n]+")


def tokenize(data: str | bytes) -> list[str]:
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="surrogateescape")
    return [tok for tok in _reSeparators.split(data) if tok]


class TokenCursor:
    """
    Position into a token list.

    Grammar rules only ever look at the current token: equals()/equalsAdvance()
    are for optional branches, expect()/expectAdvance() for mandatory tokens.
    Failures raise, and nothing resynchronizes afterwards.
    """

    def __init__(self, tokens: list[str], *, source: str = "<config>") -> None:
        self.tokens = list(tokens)
        self.source = source
        self.pos = 0
        self.ruleStack: list[str] = ["config"]

    @property
    def context(self) -> str:
        return self.ruleStack[-1]

    @contextmanager
    def rule(self, name: str) -> Iterator[None]:
        self.ruleStack.append(name)
        try:
            yield
        finally:
            self.ruleStack.pop()

    def atEnd(self) -> bool:
        return self.pos >= len(self.tokens)

    def current(self) -> str:
        if self.atEnd():
            raise UnexpectedEofError(source=self.source, context=self.context)
        return self.tokens[self.pos]

    def expect(self, literal: str) -> bool:
        tok = self.current()
        if tok != literal:
            raise UnexpectedTokenError(literal, tok, source=self.source, context=self.context)
        return True

    def expectAdvance(self, literal: str) -> bool:
        self.expect(literal)
        self.pos += 1
        return True

    def equals(self, literal: str) -> bool:
        return self.current() == literal

    def equalsAdvance(self, literal: str) -> bool:
        if self.equals(literal):
            self.pos += 1
            return True
        return False

    def advance(self) -> bool:
        self.pos += 1
        self.current()
        return True

    def take(self) -> str:
        tok = self.current()
        self.pos += 1
        return tok
