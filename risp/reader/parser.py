"""
  risp Reader, Lexer and Parser

Reading happens in two steps:

  1. `TokenStream` turns the token stream into a structural parse tree of
     `ParseNode`s. Brackets stay in the tree as `lparen`/`rparen` leaves.
  2. `read_val` rewrites the tree into values, dropping the brackets:

    - program  -> Risp(forms)
    - list     -> List(children)
    - number   -> Num, or Float with a fractional part or outside 64 bits
    - time     -> Time      (HH:MM:SS)
    - date     -> Date      (YYYY-MM-DD)
    - datetime -> DateTime  (YYYY-MM-DDTHH:MM:SS)
    - symbol   -> Sym       (operators and identifiers)

Any malformed input raises a single ParseError; there is no recovery.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from dataclasses import dataclass, field
from typing import Iterator, Optional

from risp.config import get_max_depth
from risp.types.errors import ParseError
from risp.types.val import (
    INT64_MAX,
    INT64_MIN,
    Date,
    DateTime,
    Float,
    List,
    Num,
    Risp,
    Sym,
    Time,
    Val,
)

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<atom>[^\s();]+)"  # anything else up to a delimiter
    r")"
)

NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")
TIME_RE = re.compile(r"\d{2}:\d{2}:\d{2}")
DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
DATETIME_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}")
IDENT_RE = re.compile(r"[A-Za-z][A-Za-z0-9_]*")

OPERATORS = frozenset(
    ["+", "-", "*", "/", "%", "<", ">", "<=", ">=", "==", "!="]
)

# Literal shapes and the strict parsers that validate them
TEMPORAL_FORMATS = {
    "time": (TIME_RE, "%H:%M:%S"),
    "date": (DATE_RE, "%Y-%m-%d"),
    "datetime": (DATETIME_RE, "%Y-%m-%dT%H:%M:%S"),
}


@dataclass
class Token:
    kind: str
    text: str
    pos: int


@dataclass
class ParseNode:
    """A node of the structural parse tree."""

    rule: str
    text: str
    pos: int
    children: list[ParseNode] = field(default_factory=list)


def render_error(source: str, pos: int, message: str) -> str:
    """Render `message` with the line and a caret pointing at `pos`."""
    line_no = source.count("\n", 0, pos) + 1
    line_start = source.rfind("\n", 0, pos) + 1
    line_end = source.find("\n", pos)
    if line_end == -1:
        line_end = len(source)
    col = pos - line_start + 1
    gutter = " " * len(str(line_no))
    return (
        f"{line_no}:{col}: {message}\n"
        f"{gutter} |\n"
        f"{line_no} | {source[line_start:line_end]}\n"
        f"{gutter} | {' ' * (col - 1)}^"
    )


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens, skipping whitespace and comments."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m or m.lastgroup is None:
            # only trailing whitespace is left
            break
        pos = m.end()
        if m.lastgroup == "comment":
            continue
        yield Token(m.lastgroup, m.group(m.lastgroup), m.start(m.lastgroup))


def classify(token: Token, source: str) -> str:
    """Return the grammar rule an atom token belongs to."""
    text = token.text
    if NUMBER_RE.fullmatch(text):
        return "number"
    for rule, (pattern, _) in TEMPORAL_FORMATS.items():
        if pattern.fullmatch(text):
            return rule
    if text in OPERATORS or IDENT_RE.fullmatch(text):
        return "symbol"
    if text[0].isdigit() or (text[0] == "-" and text[1:2].isdigit()):
        raise ParseError(
            render_error(source, token.pos, f"invalid token {text!r}: identifiers cannot start with a digit")
        )
    raise ParseError(render_error(source, token.pos, f"unexpected token {text!r}"))


class TokenStream:
    def __init__(self, source: str, max_depth: Optional[int] = None):
        self.source = source
        self.tokens = lex(source)
        self.buffer: list[Token] = []
        self.max_depth = get_max_depth() if max_depth is None else max_depth

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def error(self, pos: int, message: str) -> ParseError:
        return ParseError(render_error(self.source, pos, message))

    def parse_form(self, depth: int = 0) -> ParseNode:
        tok = self.advance()
        if tok is None:
            raise self.error(len(self.source), "unexpected end of input")

        if tok.kind == "atom":
            return ParseNode(classify(tok, self.source), tok.text, tok.pos)

        if tok.kind == "rparen":
            raise self.error(tok.pos, "unmatched ')'")

        # List
        if depth >= self.max_depth:
            raise self.error(tok.pos, f"nesting deeper than {self.max_depth} levels")
        node = ParseNode("list", "", tok.pos, [ParseNode("lparen", "(", tok.pos)])
        while True:
            nxt = self.peek()
            if nxt is None:
                raise self.error(tok.pos, "unclosed '('")
            if nxt.kind == "rparen":
                self.advance()
                node.children.append(ParseNode("rparen", ")", nxt.pos))
                break
            node.children.append(self.parse_form(depth + 1))
        node.text = self.source[tok.pos:node.children[-1].pos + 1]
        return node

    def parse_program(self) -> ParseNode:
        program = ParseNode("risp", self.source, 0)
        while self.peek() is not None:
            program.children.append(self.parse_form())
        program.children.append(ParseNode("EOI", "", len(self.source)))
        return program


def _read_number(node: ParseNode) -> Val:
    text = node.text
    # longer digit runs cannot fit in 64 bits
    if "." not in text and len(text.lstrip("-").lstrip("0")) <= 19:
        n = int(text)
        if INT64_MIN <= n <= INT64_MAX:
            return Num(n)
    return Float(float(text))


def _read_temporal(node: ParseNode, source: str) -> Val:
    _, fmt = TEMPORAL_FORMATS[node.rule]
    try:
        parsed = dt.datetime.strptime(node.text, fmt)
    except ValueError as e:
        raise ParseError(render_error(source, node.pos, f"invalid {node.rule} {node.text!r}: {e}")) from None
    if node.rule == "time":
        return Time(parsed.time())
    if node.rule == "date":
        return Date(parsed.date())
    return DateTime(parsed)


def read_val(node: ParseNode, source: str = "") -> Val:
    """Rewrite a parse tree into a value tree."""
    match node.rule:
        case "risp":
            return Risp(tuple(read_val(c, source) for c in node.children if c.rule != "EOI"))
        case "list":
            return List(
                tuple(read_val(c, source) for c in node.children if c.rule not in ("lparen", "rparen"))
            )
        case "number":
            return _read_number(node)
        case "time" | "date" | "datetime":
            return _read_temporal(node, source)
        case "symbol":
            return Sym(node.text)
    raise ParseError(render_error(source, node.pos, f"unexpected {node.rule}"))


def parse_tree(source: str) -> ParseNode:
    """Parse `source` into its structural parse tree."""
    return TokenStream(source).parse_program()


def parse(source: str) -> Risp:
    """Parse `source` into a top-level Risp value."""
    value = read_val(parse_tree(source), source)
    logger.debug("parse: %r -> %s", source, value.forms)
    return value
