import io

import pytest
from fasim.automata import DFA, InvalidSymbolError


def swap_dfa():
    dfa = DFA()
    dfa.add_sigma("0")
    dfa.add_sigma("1")
    dfa.add_state("q0")
    dfa.add_state("q1")
    dfa.set_start("q0")
    dfa.set_final("q0")
    dfa.add_transition("q0", "q0", "0")
    dfa.add_transition("q0", "q1", "1")
    return dfa


def parity_dfa():
    dfa = DFA()
    dfa.add_sigma("0")
    dfa.add_sigma("1")
    assert dfa.add_state("a")
    assert dfa.add_state("b")
    assert dfa.set_start("a")
    assert dfa.set_final("b")

    assert not dfa.add_state("a")
    assert not dfa.set_start("c")
    assert not dfa.set_final("c")

    assert dfa.add_transition("a", "a", "0")
    assert dfa.add_transition("a", "b", "1")
    assert dfa.add_transition("b", "a", "0")
    assert dfa.add_transition("b", "b", "1")

    assert not dfa.add_transition("c", "b", "1")
    assert not dfa.add_transition("a", "c", "1")
    assert not dfa.add_transition("a", "b", "2")
    return dfa


def test_accepts():
    dfa = parity_dfa()
    assert dfa.accepts("1")
    assert dfa.accepts("0101")
    assert dfa.accepts("01010101010101010101010101010101010101010101")
    assert not dfa.accepts("")
    assert not dfa.accepts("10")
    assert not dfa.accepts("2")


def test_empty_dfa():
    dfa = DFA()
    assert not dfa.accepts("")
    assert not dfa.accepts("0")


def test_no_start_rejects_everything():
    dfa = DFA("0")
    dfa.add_state("a")
    dfa.set_final("a")
    assert not dfa.accepts("")
    assert not dfa.accepts("0")


def test_accepts_only_empty_string():
    dfa = DFA()
    dfa.add_state("a")
    dfa.set_start("a")
    dfa.set_final("a")
    assert dfa.accepts("")
    assert not dfa.accepts("0")
    assert not dfa.accepts("1")


def test_missing_transition_traps():
    dfa = DFA("01")
    dfa.add_state("a")
    dfa.add_state("b")
    dfa.set_start("a")
    dfa.set_final("a")
    dfa.set_final("b")
    dfa.add_transition("a", "b", "0")
    assert dfa.accepts("0")
    assert not dfa.accepts("1")
    assert not dfa.accepts("00")


def test_no_final_states():
    dfa = DFA("0")
    dfa.add_state("a")
    dfa.set_start("a")
    dfa.add_transition("a", "a", "0")
    assert not dfa.accepts("")
    assert not dfa.accepts("000")


def test_single_start_state():
    dfa = DFA("0")
    assert dfa.add_state("a")
    assert dfa.add_state("b")
    assert dfa.set_start("a")
    assert dfa.set_start("b")
    assert dfa.is_start("b")
    assert not dfa.is_start("a")
    assert dfa.start() is dfa.get_state("b")


def test_transitions_need_registered_states():
    dfa = DFA("0")
    assert not dfa.add_transition("x", "y", "0")
    assert dfa.add_state("a")
    assert not dfa.add_transition("a", "y", "0")
    assert not dfa.add_transition("x", "a", "0")
    assert dfa.next_state("a", "0") is None


def test_add_sigma_after_failed_transition():
    dfa = DFA()
    dfa.add_state("a")
    dfa.add_state("b")
    assert not dfa.add_transition("a", "b", "0")
    dfa.add_sigma("0")
    assert dfa.add_transition("a", "b", "0")


def test_determinism():
    dfa = DFA("ab")
    for name in ("q0", "q1", "q2"):
        assert dfa.add_state(name)
    assert dfa.add_transition("q0", "q1", "a")
    assert dfa.add_transition("q0", "q1", "b")
    # Same edge again is fine, a different destination is not
    assert dfa.add_transition("q0", "q1", "a")
    assert not dfa.add_transition("q0", "q0", "a")
    assert not dfa.add_transition("q0", "q2", "a")
    assert dfa.next_state("q0", "a") is dfa.get_state("q1")
    assert len(dfa.table.entries) == 2


def test_conflicting_transition_is_logged(log_messages):
    dfa = DFA("0")
    dfa.add_state("a")
    dfa.add_state("b")
    dfa.add_transition("a", "b", "0")
    assert not dfa.add_transition("a", "a", "0")
    assert log_messages


def test_get_sigma_order():
    dfa = DFA()
    for c in "ba1a":
        dfa.add_sigma(c)
    assert dfa.get_sigma() == ("b", "a", "1")


def test_add_sigma_rejects_strings():
    dfa = DFA()
    with pytest.raises(InvalidSymbolError):
        dfa.add_sigma("01")
    assert dfa.get_sigma() == ()


def test_get_state():
    dfa = parity_dfa()
    assert dfa.get_state("a").name == "a"
    assert dfa.get_state("z") is None
    assert len(dfa) == 2
    assert [s.name for s in dfa.states()] == ["a", "b"]


def test_swap():
    dfa = swap_dfa()
    swapped = dfa.swap("0", "1")
    assert swapped is not None
    assert swapped.next_state("q0", "0") is swapped.get_state("q1")
    assert swapped.next_state("q0", "1") is swapped.get_state("q0")
    assert swapped.is_start("q0")
    assert swapped.is_final("q0")
    assert not swapped.is_final("q1")

    for s in ("", "0", "1", "01", "10", "0011", "000"):
        flipped = s.translate(str.maketrans("01", "10"))
        assert dfa.accepts(s) == swapped.accepts(flipped)


def test_swap_leaves_original_alone():
    dfa = swap_dfa()
    dfa.swap("0", "1")
    assert dfa.next_state("q0", "0") is dfa.get_state("q0")
    assert dfa.next_state("q0", "1") is dfa.get_state("q1")


def test_swap_is_independent():
    dfa = swap_dfa()
    swapped = dfa.swap("0", "1")
    assert swapped.sigma is not dfa.sigma
    assert swapped.get_state("q0") is not dfa.get_state("q0")
    assert swapped.get_state("q1") is not dfa.get_state("q1")
    assert swapped.start() is swapped.get_state("q0")

    swapped.set_final("q1")
    swapped.set_start("q1")
    swapped.add_sigma("2")
    assert not dfa.is_final("q1")
    assert dfa.is_start("q0")
    assert dfa.get_sigma() == ("0", "1")


def test_swap_unknown_symbols():
    assert parity_dfa().swap("x", "y") is None


def test_swap_onto_missing_symbol():
    dfa = swap_dfa()
    # "0" has transitions but "x" is not in the alphabet
    assert dfa.swap("0", "x") is None

    dfa = DFA("01")
    dfa.add_state("q0")
    dfa.set_start("q0")
    dfa.add_transition("q0", "q0", "1")
    swapped = dfa.swap("0", "x")
    assert swapped is not None
    assert swapped.next_state("q0", "1") is swapped.get_state("q0")


def test_swap_other_symbols_unchanged():
    dfa = DFA("abc")
    dfa.add_state("p")
    dfa.add_state("q")
    dfa.set_start("p")
    dfa.set_final("q")
    dfa.add_transition("p", "q", "a")
    dfa.add_transition("q", "p", "c")
    swapped = dfa.swap("a", "b")
    assert swapped.next_state("p", "b") is swapped.get_state("q")
    assert swapped.next_state("p", "a") is None
    assert swapped.next_state("q", "c") is swapped.get_state("p")
    assert swapped.accepts("bcb")
    assert not swapped.accepts("aca")


def test_copy():
    dfa = parity_dfa()
    other = dfa.copy()
    assert other.get_state("a") is not dfa.get_state("a")
    assert other.start() is other.get_state("a")
    for s in ("", "1", "10", "0101"):
        assert other.accepts(s) == dfa.accepts(s)
    other.add_state("c")
    other.set_final("a")
    assert len(dfa) == 2
    assert not dfa.is_final("a")


def test_dump():
    dfa = swap_dfa()
    out = io.StringIO()
    dfa.dump(out)
    assert out.getvalue() == (
        "Q = { q0 q1 }\n"
        "Sigma = { 0 1 }\n"
        "delta = \n"
        "\t0\t1\t\n"
        "q0\tq0\tq1\n"
        "q1\tERR\tERR\n"
        "\n"
        "q0 = q0\n"
        "F = { q0 }\n"
    )
    assert str(dfa) == out.getvalue()


def test_str_without_start():
    dfa = DFA()
    dfa.add_state("a")
    assert str(dfa) == "Q = { a }\nSigma = { }\ndelta = \n\t\na\n\nF = { }\n"


def test_swap_same_symbol_is_a_copy():
    dfa = parity_dfa()
    same = dfa.swap("0", "0")
    copied = dfa.copy()
    for name in ("a", "b"):
        for symbol in "01":
            assert same.next_state(name, symbol) == copied.next_state(name, symbol)
            assert same.next_state(name, symbol) is not dfa.next_state(name, symbol)
