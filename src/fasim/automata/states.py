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


"""
States, the state registry and the input alphabet shared by every kind of
automaton in :mod:`fasim.automata`.
"""

from loguru import logger


class InvalidSymbolError(ValueError):
    """Raised when something other than a single character is used as an
    alphabet symbol.
    """


def check_symbol(symbol):
    """
    Makes sure the given object can be used as an alphabet symbol.

    Args:
        symbol (str): The candidate symbol.

    Returns:
        str: The symbol, unchanged.

    Raises:
        InvalidSymbolError: If the symbol is not a one-character string.
    """
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise InvalidSymbolError(
            f"Alphabet symbols must be single characters, not {symbol!r}"
        )
    return symbol


class State:
    """
    Represents a named state of a finite automaton.

    States compare and hash by name, so two states with the same name from
    different automata are equal even though they are separate objects with
    their own flags.

    Attributes:
        name (str): The unique name of the state.
        initial (bool): Whether this is the start state of its automaton.
        final (bool): Whether this is an accepting state.

    Example:
        >>> s = State("q0")
        >>> s.final = True
        >>> s
        <State q0 final>
    """

    __slots__ = ("name", "initial", "final")

    def __init__(self, name, initial=False, final=False):
        self.name = name
        self.initial = initial
        self.final = final

    def __repr__(self):
        flags = "".join(
            (" initial" if self.initial else "", " final" if self.final else "")
        )
        return f"<State {self.name}{flags}>"

    def __eq__(self, other):
        if isinstance(other, State):
            return self.name == other.name
        return NotImplemented

    def __hash__(self):
        return hash(self.name)

    def copy(self):
        """
        Returns a new state with the same name and flags as this one.

        Changing the flags of the copy does not affect this state.
        """
        return State(self.name, self.initial, self.final)


class StateRegistry:
    """
    Holds the states of one automaton, keyed by name, in insertion order.

    The registry also enforces that at most one state is flagged as initial:
    :meth:`set_start` clears the flag on the previous start state.
    """

    def __init__(self, states=()):
        """
        Initializes the registry.

        Args:
            states (iterable, optional): States to copy into the registry.
                Each state is copied with :meth:`State.copy`, so the new
                registry never shares state objects with its source.
        """
        self._states = {}
        self.initial = None
        for state in states:
            state = state.copy()
            self._states[state.name] = state
            if state.initial:
                self.initial = state

    def __len__(self):
        return len(self._states)

    def __iter__(self):
        return iter(self._states.values())

    def __contains__(self, name):
        return name in self._states

    def get(self, name):
        """
        Returns the state with the given name, or None if there is no such
        state.
        """
        return self._states.get(name)

    def add(self, name):
        """
        Registers a new state with both flags cleared.

        Args:
            name (str): The name of the new state.

        Returns:
            bool: True if the state was added, False if a state with this name
            already exists.
        """
        if name in self._states:
            logger.debug("Rejected state {!r}: already registered", name)
            return False
        self._states[name] = State(name)
        return True

    def set_start(self, name):
        """
        Makes the named state the initial state, clearing the flag on the
        previous initial state, if any.

        Returns:
            bool: False if there is no state with this name.
        """
        state = self._states.get(name)
        if state is None:
            logger.debug("Cannot set start: unknown state {!r}", name)
            return False
        if self.initial is not None:
            self.initial.initial = False
        state.initial = True
        self.initial = state
        return True

    def set_final(self, name):
        """
        Flags the named state as final.

        Returns:
            bool: False if there is no state with this name.
        """
        state = self._states.get(name)
        if state is None:
            logger.debug("Cannot set final: unknown state {!r}", name)
            return False
        state.final = True
        return True


class Alphabet:
    """
    An insertion-ordered set of single-character input symbols.

    Example:
        >>> sigma = Alphabet("10")
        >>> sigma.add("0")
        >>> tuple(sigma)
        ('1', '0')
    """

    def __init__(self, symbols=()):
        self._symbols = {}
        for symbol in symbols:
            self.add(symbol)

    def __len__(self):
        return len(self._symbols)

    def __iter__(self):
        return iter(self._symbols)

    def __contains__(self, symbol):
        return symbol in self._symbols

    def __repr__(self):
        return f"{type(self).__name__}({''.join(self._symbols)!r})"

    def add(self, symbol):
        """
        Adds a symbol to the alphabet. Adding a symbol that is already present
        does nothing.

        Raises:
            InvalidSymbolError: If the symbol is not a one-character string.
        """
        self._symbols[check_symbol(symbol)] = None
