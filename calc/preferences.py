# -*- coding: utf-8 -*-
"""
Carregar/salvar preferências do avaliador.
Procura o INI no diretório atual (calc.ini, .calc.ini) e, se não encontrar,
usa o arquivo na HOME (~/.calc.ini). O caminho efetivo pode ser obtido por
get_ini_path().
"""
from __future__ import annotations
import configparser
import logging
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

REFERENCE_EXPRESSION = "((2.33 / (2.9+3.5)*4) - -6)"

DEFAULTS = {
    "expression": REFERENCE_EXPRESSION,
    "strict": "false",
    "log_level": "WARNING",
}

_TRUE = {"1", "true", "yes", "on"}

_INI_PATH: Optional[Path] = None

def get_ini_path() -> Path:
    """Retorna o caminho do INI que será usado (detecta uma vez e memoriza)."""
    global _INI_PATH
    if _INI_PATH is not None:
        return _INI_PATH

    # 1) procurar no diretório atual
    cwd = Path.cwd()
    for c in (cwd / "calc.ini", cwd / ".calc.ini"):
        if c.exists():
            _INI_PATH = c
            return _INI_PATH

    # 2) se não existir, usar HOME
    _INI_PATH = Path.home() / ".calc.ini"
    return _INI_PATH

def reset_ini_path() -> None:
    """Esquece o caminho memorizado (nova detecção na próxima chamada)."""
    global _INI_PATH
    _INI_PATH = None

def load_prefs() -> Dict[str, str]:
    """Carrega preferências do INI detectado ou usa DEFAULTS."""
    path = get_ini_path()
    if not path.exists():
        return DEFAULTS.copy()
    # sem interpolação: "%" é um caractere comum numa expressão
    cfg = configparser.ConfigParser(interpolation=None)
    try:
        cfg.read(path, encoding="utf-8")
        section = cfg["main"]
        return {key: section.get(key, default) for key, default in DEFAULTS.items()}
    except (configparser.Error, KeyError, OSError, UnicodeDecodeError) as e:
        logger.warning("Preferências ilegíveis em %s (%s); usando padrões", path, e)
        return DEFAULTS.copy()

def save_prefs(values: Dict[str, str]) -> Path:
    """Salva preferências no INI detectado (cria se necessário)."""
    cfg = configparser.ConfigParser(interpolation=None)
    cfg["main"] = {key: str(values.get(key, default)) for key, default in DEFAULTS.items()}
    path = get_ini_path()
    with open(path, "w", encoding="utf-8") as f:
        cfg.write(f)
    return path

def is_strict(prefs: Dict[str, str]) -> bool:
    return str(prefs.get("strict", DEFAULTS["strict"])).strip().lower() in _TRUE
