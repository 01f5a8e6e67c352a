import re
from enum import Enum
from typing import NamedTuple, Optional

from .diagnostics import error_at


class TokenKind(Enum):
    OPERATOR = "OPERATOR"
    NUMBER = "NUMBER"
    EOF = "EOF"


class Token(NamedTuple):
    kind: TokenKind
    pos: int
    value: Optional[int] = None
    symbol: Optional[str] = None


TOKEN_SPEC = [
    ('NUMBER',   r'[0-9]+'),
    ('OPERATOR', r'[-+*/()]'),
    ('SKIP',     r'[ \t\n\r\f\v]+'),
    ('MISMATCH', r'.'),
]

TOKEN_REGEX = re.compile('|'.join('(?P<%s>%s)' % pair for pair in TOKEN_SPEC), re.DOTALL)


INT64_MAX = 2**63 - 1


def to_int(code, pos, digits):
    # literals must fit a signed 64-bit register
    try:
        value = int(digits)
    except ValueError:
        value = None
    if value is None or value > INT64_MAX:
        error_at(code, pos, 'number too large')
    return value


def gen_tokens(code):
    for mo in TOKEN_REGEX.finditer(code):
        kind = mo.lastgroup
        value = mo.group()
        if kind == 'NUMBER':
            yield Token(TokenKind.NUMBER, mo.start(), value=to_int(code, mo.start(), value))
        elif kind == 'OPERATOR':
            yield Token(TokenKind.OPERATOR, mo.start(), symbol=value)
        elif kind == 'SKIP':
            continue
        elif kind == 'MISMATCH':
            error_at(code, mo.start(), 'invalid token')


def tokenize(code):
    tokens = list(gen_tokens(code))
    tokens.append(Token(TokenKind.EOF, len(code)))
    return tokens
