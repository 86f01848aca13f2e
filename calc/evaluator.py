# -*- coding: utf-8 -*-
"""
Avaliação da AST (pós-ordem) e ponto de entrada evaluate(texto).
Divisão segue IEEE-754: x/0 -> ±inf, 0/0 -> nan (nunca ZeroDivisionError).
"""
from __future__ import annotations
from typing import Callable, Dict
import logging
import math
import operator

from .errors import ExpressionSyntaxError
from .lexer import tokenize
from .models import BinaryOp, Literal, Node, TokenKind, UnaryOp
from .parser import parse
from .utils import mathx

logger = logging.getLogger(__name__)

def _divide(left: float, right: float) -> float:
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        # sinal do resultado: sign(left) xor sign(right), inclusive para -0.0
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right

_BIN_OPS: Dict[TokenKind, Callable[[float, float], float]] = {
    TokenKind.ADD: operator.add,
    TokenKind.SUBTRACT: operator.sub,
    TokenKind.MULTIPLY: operator.mul,
    TokenKind.DIVIDE: _divide,
}

_UNARY_OPS: Dict[TokenKind, Callable[[float], float]] = {
    TokenKind.ADD: operator.pos,
    TokenKind.SUBTRACT: operator.neg,
}

def resolve(node: Node) -> float:
    if isinstance(node, Literal):
        return float(node.value)

    if isinstance(node, UnaryOp):
        func = _UNARY_OPS.get(node.op)
        if func is None:
            logger.warning("Operador unário inesperado: %s -> 0", node.op)
            return 0.0
        return func(resolve(node.operand))

    if isinstance(node, BinaryOp):
        func = _BIN_OPS.get(node.op)
        if func is None:
            logger.warning("Operador binário inesperado: %s -> 0", node.op)
            return 0.0
        return func(resolve(node.left), resolve(node.right))

    raise TypeError(f"Nó não suportado: {type(node).__name__}")

def evaluate(expression: str, strict: bool = False) -> float:
    """
    Calcula o valor de uma expressão aritmética (+ - * / e parênteses).
    Levanta NumericConversionError para literais inválidos e, com strict=True,
    ExpressionSyntaxError para estrutura inválida.
    Aninhamento além do limite de recursão também vira ExpressionSyntaxError.
    """
    tokens = tokenize(expression)
    try:
        tree = parse(tokens, strict=strict)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%d tokens, árvore: %s", len(tokens), mathx.format_tree(tree))
        return resolve(tree)
    except RecursionError as e:
        raise ExpressionSyntaxError("Expressão aninhada demais") from e
