# -*- coding: utf-8 -*-
"""
Ponto de entrada: avalia a expressão configurada (padrão: a expressão de
referência) e imprime "<expressão>=<resultado>".
"""
import logging
import sys

from calc.errors import CalcError
from calc.evaluator import evaluate
from calc.preferences import is_strict, load_prefs
from calc.utils.mathx import format_number

logger = logging.getLogger(__name__)

def main() -> int:
    prefs = load_prefs()
    level = logging.getLevelName(prefs["log_level"].strip().upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    expr = prefs["expression"]
    try:
        result = evaluate(expr, strict=is_strict(prefs))
    except CalcError as e:
        logger.error("Falha ao avaliar %r: %s", expr, e)
        return 1
    print(f"{expr}={format_number(result)}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
