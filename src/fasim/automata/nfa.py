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


from collections import deque

from cached_property import cached_property
from loguru import logger

from fasim.automata.base import FiniteAutomaton
from fasim.automata.closure import epsilon_closure, expand
from fasim.automata.states import check_symbol
from fasim.automata.transitions import NondeterministicTable

EPSILON = "ε"


class Configuration:
    """
    One point of the acceptance search: the input string, how much of it
    has been consumed, and the name of the current state.

    The unconsumed suffix and the next input character are computed on
    first access and cached.

    Attributes:
        text (str): The complete input string.
        pos (int): The number of characters consumed so far.
        state (str): The name of the current state.
    """

    def __init__(self, text, pos, state):
        self.text = text
        self.pos = pos
        self.state = state

    def __repr__(self):
        return f"<Configuration {self.remaining!r} @ {self.state}>"

    def key(self):
        return self.pos, self.state

    def at_end(self):
        return self.pos >= len(self.text)

    def advance(self, state):
        """
        Returns the configuration reached by consuming the next character
        and moving to ``state``.
        """
        return Configuration(self.text, self.pos + 1, state)

    def move(self, state):
        """
        Returns the configuration at the same input position in ``state``.
        """
        return Configuration(self.text, self.pos, state)

    @cached_property
    def remaining(self):
        return self.text[self.pos :]

    @cached_property
    def symbol(self):
        if self.at_end():
            return None
        return self.text[self.pos]


class NFA(FiniteAutomaton):
    """
    Non-deterministic finite automaton with epsilon transitions.

    Each ``(state, symbol)`` pair maps to a set of destination states. The
    epsilon symbol is a permanent member of the alphabet and labels edges
    that are taken without consuming input. It is never matched against a
    character of the input string, even when the input contains it.

    Example:
        >>> nfa = NFA()
        >>> nfa.add_sigma("a")
        >>> for name in ("s1", "s2", "s3"):
        ...     nfa.add_state(name)
        >>> nfa.set_start("s1")
        >>> nfa.set_final("s3")
        >>> nfa.add_transition("s1", {"s2"}, "a")
        >>> nfa.add_transition("s2", {"s2", "s3"}, "a")
        >>> nfa.accepts("aa"), nfa.accepts("a")
        (True, False)
    """

    def __init__(self, sigma=(), states=(), epsilon=EPSILON):
        """
        Initializes the NFA.

        Args:
            sigma (iterable, optional): Input symbols to start with.
            states (iterable, optional): States to copy into the automaton.
            epsilon (str, optional): The symbol that labels epsilon edges.
                Defaults to :data:`EPSILON`.

        Raises:
            InvalidSymbolError: If ``epsilon`` is not a single character.
        """
        self.epsilon = check_symbol(epsilon)
        super().__init__((epsilon,) + tuple(sigma), states)
        self.table = NondeterministicTable()

    def _cell(self, name, symbol):
        dests = self.table.get(name, symbol)
        return "{" + ",".join(s.name for s in self.registry if s.name in dests) + "}"

    def add_transition(self, from_state, to_states, symbol):
        """
        Adds edges from one state to each of a set of states.

        Either every edge is added or, if any name or the symbol is invalid,
        none is.

        Args:
            from_state (str): The name of the source state.
            to_states (iterable or str): The names of the destination
                states. Must not be empty. A single string is one name.
            symbol (str): The edge label; may be the epsilon symbol.

        Returns:
            bool: False if the symbol is not in the alphabet, a state is
            unknown, or ``to_states`` is empty.
        """
        if symbol not in self.sigma:
            logger.debug("Rejected transition on {!r}: not in the alphabet", symbol)
            return False
        if from_state not in self.registry:
            logger.debug("Rejected transition from unknown state {!r}", from_state)
            return False
        if isinstance(to_states, str):
            to_states = [to_states]
        to_states = list(to_states)
        for name in to_states:
            if name not in self.registry:
                logger.debug("Rejected transition to unknown state {!r}", name)
                return False
        return self.table.add(from_state, symbol, to_states)

    def get_to_state(self, state, symbol):
        """
        Returns the set of states reached from ``state`` on ``symbol``.

        Args:
            state (State or str): The source state or its name.
            symbol (str): The edge label.

        Returns:
            set: The destination states, or None if there is no such edge.
        """
        state = self._resolve(state)
        if state is None:
            return None
        dests = self.table.get(state.name, symbol)
        if not dests:
            return None
        return {self.registry.get(name) for name in dests}

    def e_closure(self, state):
        """
        Computes the epsilon closure of a state: every state reachable from
        it by zero or more epsilon edges, the state itself included.

        Args:
            state (State or str): The state or its name.

        Returns:
            set: The states in the closure, or None if the state is not part
            of this automaton.
        """
        state = self._resolve(state)
        if state is None:
            return None
        names = epsilon_closure(self.table, state.name, self.epsilon)
        return {self.registry.get(name) for name in names}

    def _step(self, name, symbol):
        # Direct destinations, never following epsilon edges for input
        if symbol == self.epsilon:
            return frozenset()
        return self.table.get(name, symbol)

    def accepts(self, string):
        """
        Returns True if the automaton accepts the given string.

        Runs a breadth-first search over configurations (remaining input,
        current state) starting at the start state. Each configuration is
        expanded first along epsilon edges, then along the edge for the next
        input character. Each (position, state) pair is visited at most
        once, so the search terminates even when epsilon edges form cycles.

        Args:
            string (str): The input string.

        Returns:
            bool: False if no start state is set or no path accepts.
        """
        initial = self.registry.initial
        if initial is None:
            return False

        seed = Configuration(string, 0, initial.name)
        queue = deque([seed])
        seen = {seed.key()}

        def push(config):
            key = config.key()
            if key not in seen:
                seen.add(key)
                queue.append(config)

        while queue:
            config = queue.popleft()
            logger.trace("Expanding {!r}", config)
            if self._expand_epsilon(config, push) or self._expand_symbol(config, push):
                return True
        return False

    def _expand_epsilon(self, config, push):
        at_end = config.at_end()
        for name in epsilon_closure(self.table, config.state, self.epsilon):
            if at_end and self.registry.get(name).final:
                return True
            if name != config.state:
                push(config.move(name))
        return False

    def _expand_symbol(self, config, push):
        if config.at_end():
            return False
        dests = self._step(config.state, config.symbol)
        last = config.pos + 1 == len(config.text)
        if last and any(self.registry.get(name).final for name in dests):
            return True
        for name in dests:
            # At the end of the input these still get their epsilon expansion
            push(config.advance(name))
        return False

    def max_copies(self, string):
        """
        Returns the largest number of states the automaton occupies at once
        while reading the string from left to right.

        The active set starts as the epsilon closure of the start state. For
        each character, the next active set is the epsilon closure of all
        direct destinations of the current active set.

        Args:
            string (str): The input string.

        Returns:
            int: The maximum size of the active set, or 0 if no start state
            is set.
        """
        initial = self.registry.initial
        if initial is None:
            return 0

        active = epsilon_closure(self.table, initial.name, self.epsilon)
        most = len(active)
        for symbol in string:
            direct = set()
            for name in active:
                direct |= self._step(name, symbol)
            active = expand(self.table, direct, self.epsilon)
            most = max(most, len(active))
            logger.trace("After {!r}: {} active states", symbol, len(active))
        return most

    def is_dfa(self):
        """
        Returns True if every transition entry is labelled with a real symbol
        and has exactly one destination.

        This only looks at the recorded entries, so a non-deterministic entry
        on an unreachable state still counts.
        """
        for (_, symbol), dests in self.table.items():
            if symbol == self.epsilon or len(dests) != 1:
                return False
        return True
