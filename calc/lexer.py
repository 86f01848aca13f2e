# -*- coding: utf-8 -*-
"""
Lexer: texto -> lista de tokens.
Política permissiva: qualquer caractere desconhecido (inclusive espaço) é ignorado.
A lista sempre termina com exatamente um END_OF_INPUT.
"""
from __future__ import annotations
from typing import Dict, List
import logging
import math

from .errors import NumericConversionError
from .models import Token, TokenKind

logger = logging.getLogger(__name__)

_SYMBOLS: Dict[str, TokenKind] = {
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "+": TokenKind.ADD,
    "-": TokenKind.SUBTRACT,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}

def _is_number_char(ch: str) -> bool:
    return ch == "." or "0" <= ch <= "9"

def _to_float(text: str, position: int) -> float:
    try:
        value = float(text)
    except ValueError as e:
        raise NumericConversionError(text, position) from e
    if not math.isfinite(value):
        # ex.: literal com centenas de dígitos estoura para inf
        raise NumericConversionError(text, position)
    return value

def tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    pos, n = 0, len(text)
    while pos < n:
        ch = text[pos]
        if _is_number_char(ch):
            start = pos
            while pos + 1 < n and _is_number_char(text[pos + 1]):
                pos += 1
            literal = text[start:pos + 1]
            tokens.append(Token(TokenKind.NUMBER, _to_float(literal, start), start))
        elif ch in _SYMBOLS:
            tokens.append(Token(_SYMBOLS[ch], position=pos))
        elif not ch.isspace():
            logger.debug("Caractere ignorado %r na posição %d", ch, pos)
        pos += 1
    tokens.append(Token(TokenKind.END_OF_INPUT, position=n))
    return tokens
