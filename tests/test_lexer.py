import logging
import pytest
from calc.errors import NumericConversionError
from calc.lexer import tokenize
from calc.models import Token, TokenKind

def kinds(text):
    return [t.kind for t in tokenize(text)]

def test_symbols_and_sentinel():
    assert kinds("*/+-()") == [
        TokenKind.MULTIPLY, TokenKind.DIVIDE, TokenKind.ADD, TokenKind.SUBTRACT,
        TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN, TokenKind.END_OF_INPUT,
    ]

def test_empty_input_has_only_sentinel():
    assert tokenize("") == [Token(TokenKind.END_OF_INPUT, position=0)]

def test_numbers_are_greedy_and_positioned():
    toks = tokenize("12.5+.25 3.")
    assert [t.kind for t in toks] == [
        TokenKind.NUMBER, TokenKind.ADD, TokenKind.NUMBER, TokenKind.NUMBER, TokenKind.END_OF_INPUT,
    ]
    assert [t.value for t in toks if t.kind is TokenKind.NUMBER] == [12.5, 0.25, 3.0]
    assert [t.position for t in toks] == [0, 4, 5, 9, 11]

def test_unknown_characters_are_skipped():
    assert kinds("a1 ? 2\tb") == [TokenKind.NUMBER, TokenKind.NUMBER, TokenKind.END_OF_INPUT]
    assert kinds("x y z") == [TokenKind.END_OF_INPUT]

@pytest.mark.parametrize("text", ["1.2.3", ".", "2+..", "9" * 400])
def test_bad_numbers_raise(text):
    with pytest.raises(NumericConversionError):
        tokenize(text)

def test_bad_number_reports_text_and_position():
    with pytest.raises(NumericConversionError) as info:
        tokenize("4 + 1.2.3")
    assert info.value.text == "1.2.3"
    assert info.value.position == 4

def test_skipped_characters_log_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="calc.lexer")
    tokenize("a1 + 2")
    msgs = [r.getMessage() for r in caplog.records
            if r.name == "calc.lexer" and r.levelno == logging.DEBUG]
    assert msgs == ["Caractere ignorado 'a' na posição 0"]

def test_whitespace_is_not_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="calc.lexer")
    tokenize(" 1 +\t2\n")
    assert [r for r in caplog.records if r.name == "calc.lexer"] == []
