# -*- coding: utf-8 -*-
"""
Parser descendente recursivo (tokens -> AST).

    expr   := term ( (+|-) term )*
    term   := factor ( (*|/) factor )*
    factor := NUMBER | (+|-) factor | '(' expr ')'

A precedência sai da ordem das chamadas (expr -> term -> factor); operadores
binários associam à esquerda.
No modo permissivo (padrão) a entrada malformada é "consertada" em silêncio
(fator ausente vira 0, parêntese de fechamento não é conferido, sobra de tokens
é ignorada). No modo estrito cada um desses casos levanta ExpressionSyntaxError.
"""
from __future__ import annotations
from typing import Callable, List, Sequence, Tuple
import logging

from .errors import ExpressionSyntaxError
from .models import (
    ADDITIVE, MULTIPLICATIVE, BinaryOp, Literal, Node, Token, TokenKind, UnaryOp,
)

logger = logging.getLogger(__name__)


class Parser:
    def __init__(self, tokens: Sequence[Token], strict: bool = False):
        self.tokens: List[Token] = list(tokens)
        if not self.tokens or self.tokens[-1].kind is not TokenKind.END_OF_INPUT:
            end = self.tokens[-1].position + 1 if self.tokens else 0
            self.tokens.append(Token(TokenKind.END_OF_INPUT, position=end))
        self.strict = strict
        self.pos = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        # no sentinela o cursor fica parado
        if self.current.kind is not TokenKind.END_OF_INPUT:
            self.pos += 1
        return self.current

    def at_end(self) -> bool:
        return self.current.kind is TokenKind.END_OF_INPUT

    # -----------------------------
    # regras da gramática
    # -----------------------------

    def parse(self) -> Node:
        node = self.expr()
        if not self.at_end():
            if self.strict:
                raise ExpressionSyntaxError(f"Token inesperado '{self.current}' após a expressão", self.current)
            logger.warning("Tokens ignorados a partir de '%s' (posição %d)", self.current, self.current.position)
        return node

    def factor(self) -> Node:
        tok = self.current
        if tok.kind is TokenKind.NUMBER:
            self.advance()
            return Literal(tok.value)
        if tok.kind in ADDITIVE:
            self.advance()
            return UnaryOp(tok.kind, self.factor())
        if tok.kind is TokenKind.LEFT_PAREN:
            self.advance()
            node = self.expr()
            closing = self.current
            if closing.kind is not TokenKind.RIGHT_PAREN:
                if self.strict:
                    raise ExpressionSyntaxError(f"')' esperado, encontrado '{closing}'", closing)
                logger.warning("')' esperado na posição %d, consumindo '%s'", closing.position, closing)
            self.advance()
            return node
        if self.strict:
            raise ExpressionSyntaxError(f"Fator esperado, encontrado '{tok}'", tok)
        logger.warning("Fator ausente na posição %d ('%s') -> 0", tok.position, tok)
        return Literal(0.0)

    def _binary(self, operand: Callable[[], Node], ops: Tuple[TokenKind, ...]) -> Node:
        node = operand()
        while self.current.kind in ops:
            op = self.current.kind
            self.advance()
            node = BinaryOp(op, node, operand())
        return node

    def term(self) -> Node:
        return self._binary(self.factor, MULTIPLICATIVE)

    def expr(self) -> Node:
        return self._binary(self.term, ADDITIVE)


def parse(tokens: Sequence[Token], strict: bool = False) -> Node:
    return Parser(tokens, strict=strict).parse()
