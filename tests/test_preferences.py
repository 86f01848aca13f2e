import pytest
from calc import preferences

@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    preferences.reset_ini_path()
    yield
    preferences.reset_ini_path()

def test_defaults_without_file(tmp_path):
    assert preferences.get_ini_path() == tmp_path / "home" / ".calc.ini"
    assert preferences.load_prefs() == preferences.DEFAULTS
    assert not preferences.is_strict(preferences.load_prefs())

def test_local_ini_wins(tmp_path):
    (tmp_path / "calc.ini").write_text("[main]\nexpression = 1+1\nstrict = yes\n", encoding="utf-8")
    prefs = preferences.load_prefs()
    assert prefs["expression"] == "1+1"
    assert preferences.is_strict(prefs)
    assert prefs["log_level"] == "WARNING"

def test_save_and_reload(tmp_path):
    path = preferences.save_prefs({"expression": "2*3", "strict": "true"})
    assert path == tmp_path / "home" / ".calc.ini"
    prefs = preferences.load_prefs()
    assert prefs["expression"] == "2*3"
    assert preferences.is_strict(prefs)

def test_broken_ini_falls_back(tmp_path):
    (tmp_path / "calc.ini").write_text("sem seção\n", encoding="utf-8")
    assert preferences.load_prefs() == preferences.DEFAULTS

def test_percent_in_expression_is_literal(tmp_path):
    (tmp_path / "calc.ini").write_text("[main]\nexpression = 50%+1\n", encoding="utf-8")
    assert preferences.load_prefs()["expression"] == "50%+1"
    preferences.reset_ini_path()
    (tmp_path / "calc.ini").unlink()
    preferences.save_prefs({"expression": "5%2"})
    assert preferences.load_prefs()["expression"] == "5%2"
