# Copyright 2007 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.


from loguru import logger

from fasim.automata.base import FiniteAutomaton
from fasim.automata.transitions import DeterministicTable


class DFA(FiniteAutomaton):
    """
    Deterministic finite automaton.

    Each ``(state, symbol)`` pair leads to at most one state. A missing
    transition behaves like an edge into a non-accepting trap state, so the
    table does not need to be total.

    Example:
        >>> dfa = DFA("01")
        >>> dfa.add_state("q0")
        >>> dfa.add_state("q1")
        >>> dfa.set_start("q0")
        >>> dfa.set_final("q1")
        >>> dfa.add_transition("q0", "q1", "1")
        >>> dfa.accepts("1"), dfa.accepts("0")
        (True, False)
    """

    def __init__(self, sigma=(), states=()):
        super().__init__(sigma, states)
        self.table = DeterministicTable()

    def _cell(self, name, symbol):
        dest = self.table.get(name, symbol)
        return "ERR" if dest is None else dest

    def add_transition(self, from_state, to_state, symbol):
        """
        Adds the edge ``from_state --symbol--> to_state``.

        Adding an edge that already exists succeeds. Adding a second,
        different destination for the same state and symbol fails and keeps
        the existing edge.

        Args:
            from_state (str): The name of the source state.
            to_state (str): The name of the destination state.
            symbol (str): The edge label.

        Returns:
            bool: False if the symbol is not in the alphabet, either state is
            unknown, or the edge conflicts with an existing one.
        """
        if symbol not in self.sigma:
            logger.debug("Rejected transition on {!r}: not in the alphabet", symbol)
            return False
        for name in (from_state, to_state):
            if name not in self.registry:
                logger.debug("Rejected transition: unknown state {!r}", name)
                return False
        return self.table.add(from_state, symbol, to_state)

    def next_state(self, state, symbol):
        """
        Returns the state reached from ``state`` on ``symbol``, or None if
        there is no such transition.

        Args:
            state (State or str): The current state or its name.
            symbol (str): The input symbol.
        """
        state = self._resolve(state)
        if state is None:
            return None
        return self.registry.get(self.table.get(state.name, symbol))

    def accepts(self, string):
        """
        Returns True if reading the string from the start state ends in a
        final state.

        Reading stops as soon as a character has no transition, and the
        string is rejected. Without a start state every string, including
        the empty one, is rejected.
        """
        state = self.registry.initial
        if state is None:
            return False

        for symbol in string:
            dest = self.table.get(state.name, symbol)
            if dest is None:
                return False
            state = self.registry.get(dest)
        return state.final

    def copy(self):
        """
        Returns a structurally independent copy of this DFA: new state
        objects with the same flags, a new alphabet and the same transitions.
        """
        return self._relabelled({})

    def swap(self, symbol1, symbol2):
        """
        Returns a copy of this DFA in which every transition on ``symbol1``
        is relabelled ``symbol2`` and vice versa. Transitions on other
        symbols are copied unchanged.

        The copy shares no states, flags or alphabet with this DFA.

        Args:
            symbol1 (str): The first symbol.
            symbol2 (str): The second symbol.

        Returns:
            DFA: The swapped copy, or None if neither symbol is in the
            alphabet, or if a relabelled transition cannot be added to the
            copy (for example because the other symbol is not in the
            alphabet).
        """
        if symbol1 not in self.sigma and symbol2 not in self.sigma:
            logger.debug(
                "Cannot swap {!r} and {!r}: not in the alphabet", symbol1, symbol2
            )
            return None

        return self._relabelled({symbol1: symbol2, symbol2: symbol1})

    def _relabelled(self, relabel):
        # Copies states, flags and alphabet, mapping edge labels through
        # relabel; None if a relabelled edge does not fit the copy
        dfa = DFA(self.sigma, self.registry)
        for (src, symbol), dest in self.table.items():
            if not dfa.add_transition(src, dest, relabel.get(symbol, symbol)):
                return None
        return dfa
