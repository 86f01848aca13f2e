# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Optional

from .models import Token


class CalcError(Exception):
    """Erros de leitura/avaliação de expressões."""
    pass


class NumericConversionError(CalcError):
    """Literal numérico que não vira um float finito (ex.: '1.2.3', '.')."""

    def __init__(self, text: str, position: int):
        super().__init__(f"Número inválido '{text}' na posição {position}")
        self.text = text
        self.position = position


class ExpressionSyntaxError(CalcError):
    """Estrutura inválida detectada no modo estrito."""

    def __init__(self, message: str, token: Optional[Token] = None):
        position = token.position if token is not None else None
        if position is not None:
            message = f"{message} (posição {position})"
        super().__init__(message)
        self.token = token
        self.position = position
