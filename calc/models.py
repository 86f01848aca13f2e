# -*- coding: utf-8 -*-
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

class TokenKind(Enum):
    NUMBER = "num"
    MULTIPLY = "*"
    DIVIDE = "/"
    ADD = "+"
    SUBTRACT = "-"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    END_OF_INPUT = "eol"  # sentinel

# operadores por nível de precedência
ADDITIVE = (TokenKind.ADD, TokenKind.SUBTRACT)
MULTIPLICATIVE = (TokenKind.MULTIPLY, TokenKind.DIVIDE)

@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Optional[float] = None  # só para NUMBER
    position: int = 0

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return f"{self.value!r}"
        if self.kind is TokenKind.END_OF_INPUT:
            return "<fim>"
        return self.kind.value

# -----------------------------
# AST (conjunto fechado de nós)
# -----------------------------

@dataclass(frozen=True)
class Literal:
    value: float

@dataclass(frozen=True)
class UnaryOp:
    op: TokenKind  # ADD | SUBTRACT
    operand: "Node"

@dataclass(frozen=True)
class BinaryOp:
    op: TokenKind  # ADD | SUBTRACT | MULTIPLY | DIVIDE
    left: "Node"
    right: "Node"

Node = Union[Literal, UnaryOp, BinaryOp]
