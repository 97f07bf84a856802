import fasim
from fasim.automata import dfa, nfa


def test_exports():
    assert fasim.NFA is nfa.NFA
    assert fasim.DFA is dfa.DFA
    assert fasim.EPSILON == "ε"


def test_versionstring():
    assert fasim.versionstring() == "1.0.0"
    assert fasim.versionstring(build=False) == "1.0"
    assert fasim.__version__ == (1, 0, 0)


def test_logging_disabled_by_default(capsys):
    d = fasim.DFA()
    assert not d.set_start("missing")
    captured = capsys.readouterr()
    assert "missing" not in captured.err
