# Helpers de formatação de números e árvores de expressão.

import math
from decimal import Decimal

from ..models import BinaryOp, Literal, UnaryOp

def format_number(x: float) -> str:
    """Como o programa de referência imprime: 5.0 -> '5', 1e16 por extenso, inf, -inf, NaN."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    # menor representação exata, sem notação científica
    text = format(Decimal(repr(x)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text

def format_tree(node) -> str:
    if isinstance(node, Literal):
        return format_number(node.value)
    if isinstance(node, UnaryOp):
        return f"({node.op.value}{format_tree(node.operand)})"
    if isinstance(node, BinaryOp):
        return f"({format_tree(node.left)} {node.op.value} {format_tree(node.right)})"
    raise TypeError(f"Nó não suportado: {type(node).__name__}")
