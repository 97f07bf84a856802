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


import sys

from fasim.automata.states import Alphabet, StateRegistry


class FiniteAutomaton:
    """
    The part of a finite automaton that does not depend on whether its
    transitions are single- or multi-valued: a registry of named states, an
    input alphabet (Sigma), and name-based construction and query methods.

    Subclasses own a transition table and implement ``add_transition`` and
    ``accepts``. Failed construction calls return False and leave the
    automaton unchanged; lookups of unknown names return None.

    Attributes:
        registry (StateRegistry): The states of the automaton.
        sigma (Alphabet): The input alphabet.
        table: The transition table, supplied by the subclass.
    """

    def __init__(self, sigma=(), states=()):
        """
        Initializes the automaton.

        Args:
            sigma (iterable, optional): Symbols to add to the alphabet.
            states (iterable, optional): States to copy into the registry. The
                states are copied, flags included, so the new automaton never
                shares state objects with whoever supplied them.
        """
        self.sigma = Alphabet(sigma)
        self.registry = StateRegistry(states)

    def __len__(self):
        """
        Returns the number of states in the automaton.
        """
        return len(self.registry)

    def __str__(self):
        lines = []
        self._format(lines)
        return "\n".join(lines) + "\n"

    def dump(self, stream=sys.stdout):
        """
        Prints a transition-table listing of the automaton to the specified
        stream: the states, the alphabet, one row of destinations per state,
        the start state and the final states.

        Args:
            stream (file, optional): Where to write. Defaults to sys.stdout.

        Example:
            >>> dfa.dump()
            Q = { q0 q1 }
            Sigma = { 0 1 }
            delta =
                    0       1
            q0      q0      q1
            q1      ERR     ERR
            <BLANKLINE>
            q0 = q0
            F = { q0 }
        """
        stream.write(str(self))

    def _format(self, lines):
        columns = self._columns()
        lines.append("Q = { " + "".join(f"{s.name} " for s in self.registry) + "}")
        lines.append("Sigma = { " + "".join(f"{c} " for c in self.sigma) + "}")
        lines.append("delta = ")
        lines.append("\t" + "".join(f"{c}\t" for c in columns))
        for state in self.registry:
            cells = [self._cell(state.name, c) for c in columns]
            lines.append(state.name + "".join(f"\t{cell}" for cell in cells))
        lines.append("")
        initial = self.registry.initial
        if initial is not None:
            lines.append(f"q0 = {initial.name}")
        lines.append(
            "F = { " + "".join(f"{s.name} " for s in self.registry if s.final) + "}"
        )

    def _columns(self):
        return tuple(self.sigma)

    def _cell(self, name, symbol):
        raise NotImplementedError

    def add_state(self, name):
        """
        Adds a new state with the given name.

        Returns:
            bool: True if the state was added, False if a state with the same
            name already exists.
        """
        return self.registry.add(name)

    def set_start(self, name):
        """
        Makes an existing state the start state, clearing the flag on the
        previous start state.

        Returns:
            bool: False if no state has this name.
        """
        return self.registry.set_start(name)

    def set_final(self, name):
        """
        Marks an existing state as accepting.

        Returns:
            bool: False if no state has this name.
        """
        return self.registry.set_final(name)

    def add_sigma(self, symbol):
        """
        Adds a symbol to the alphabet. Adding a symbol twice has no effect.

        Raises:
            InvalidSymbolError: If the symbol is not a single character.
        """
        self.sigma.add(symbol)

    def get_sigma(self):
        """
        Returns the alphabet as a tuple, in the order symbols were added.
        """
        return tuple(self.sigma)

    def get_state(self, name):
        """
        Returns the :class:`~fasim.automata.states.State` with the given
        name, or None.
        """
        return self.registry.get(name)

    def states(self):
        """
        Returns a list of all states, in the order they were added.
        """
        return list(self.registry)

    def start(self):
        """
        Returns the start state, or None if no start state has been set.
        """
        return self.registry.initial

    def is_final(self, name):
        state = self.registry.get(name)
        return state is not None and state.final

    def is_start(self, name):
        state = self.registry.get(name)
        return state is not None and state.initial

    def _resolve(self, state):
        # Accepts a State or a name and returns this automaton's own State
        if state is None:
            return None
        return self.registry.get(getattr(state, "name", state))
