from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .diagnostics import error_at
from .lexer import TokenKind


class NodeKind(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    NUM = 'num'


class ASTNode:
    pass


@dataclass(frozen=True)
class BinOp(ASTNode):
    kind: NodeKind
    left: 'Node'
    right: 'Node'


@dataclass(frozen=True)
class Num(ASTNode):
    value: int
    kind: NodeKind = field(default=NodeKind.NUM, init=False)


Node = Union[BinOp, Num]

ADDITIVE = {'+': NodeKind.ADD, '-': NodeKind.SUB}
MULTIPLICATIVE = {'*': NodeKind.MUL, '/': NodeKind.DIV}


class Parser:
    def __init__(self, tokens, source=None):
        self.tokens = tokens
        self.source = source
        self.pos = 0

    def current_token(self):
        return self.tokens[self.pos]

    def advance(self):
        # the EOF sentinel is never stepped over
        if self.current_token().kind is not TokenKind.EOF:
            self.pos += 1

    def error(self, message):
        error_at(self.source, self.current_token().pos, message)

    def consume(self, op):
        token = self.current_token()
        if token.kind is not TokenKind.OPERATOR or token.symbol != op:
            return False
        self.advance()
        return True

    def expect(self, op):
        if not self.consume(op):
            self.error(f"'{op}' expected")

    def expect_number(self):
        token = self.current_token()
        if token.kind is not TokenKind.NUMBER:
            self.error('a number expected')
        self.advance()
        return token.value

    def at_eof(self):
        return self.current_token().kind is TokenKind.EOF

    def parse(self):
        node = self.expr()
        if not self.at_eof():
            self.error('end of input expected')
        return node

    # expr = mul ("+" mul | "-" mul)*
    def expr(self):
        node = self.mul()
        while True:
            kind = self._match(ADDITIVE)
            if kind is None:
                return node
            node = BinOp(kind, node, self.mul())

    # mul = primary ("*" primary | "/" primary)*
    def mul(self):
        node = self.primary()
        while True:
            kind = self._match(MULTIPLICATIVE)
            if kind is None:
                return node
            node = BinOp(kind, node, self.primary())

    # primary = "(" expr ")" | num
    def primary(self):
        if self.consume('('):
            node = self.expr()
            self.expect(')')
            return node
        return Num(self.expect_number())

    def _match(self, table):
        for op, kind in table.items():
            if self.consume(op):
                return kind
        return None


def parse(tokens, source=None):
    return Parser(tokens, source).parse()
