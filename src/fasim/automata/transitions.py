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
Transition tables mapping ``(source state, symbol)`` keys to destinations.

Both tables store state names rather than :class:`~fasim.automata.states.State`
objects. The automata resolve names through their own registry, so copying
an automaton never aliases the states of the original.
"""

from collections import namedtuple

from loguru import logger


class Transition(namedtuple("Transition", ["source", "symbol"])):
    """
    The key of a transition table entry: the name of the source state and
    the symbol on the edge. Two keys are equal when both parts are equal.
    """

    __slots__ = ()

    def __repr__(self):
        return f"<{self.source} --{self.symbol}-->"


class DeterministicTable:
    """
    Transition table with at most one destination per key.

    Attributes:
        entries (dict): Maps :class:`Transition` keys to destination names.
    """

    def __init__(self):
        self.entries = {}

    def add(self, source, symbol, dest):
        """
        Records the edge ``source --symbol--> dest``.

        Inserting the same edge twice is allowed. Inserting a different
        destination for a key that already has one is refused and the
        existing entry is left alone.

        Args:
            source (str): The name of the source state.
            symbol (str): The edge label.
            dest (str): The name of the destination state.

        Returns:
            bool: True if the table now holds exactly this edge for the key.
        """
        key = Transition(source, symbol)
        existing = self.entries.setdefault(key, dest)
        if existing != dest:
            logger.debug(
                "Rejected {!r} -> {!r}: already leads to {!r}", key, dest, existing
            )
            return False
        return True

    def get(self, source, symbol):
        """Returns the destination name for the key, or None."""
        return self.entries.get(Transition(source, symbol))

    def items(self):
        return self.entries.items()


class NondeterministicTable:
    """
    Transition table mapping each key to a non-empty set of destinations.

    Attributes:
        entries (dict): Maps :class:`Transition` keys to sets of destination
            names.
    """

    def __init__(self):
        self.entries = {}

    def add(self, source, symbol, dests):
        """
        Adds the names in ``dests`` to the destinations of the key, creating
        the entry if necessary.

        Args:
            source (str): The name of the source state.
            symbol (str): The edge label.
            dests (iterable): Names of the destination states.

        Returns:
            bool: False if ``dests`` is empty; an entry is never created
            without at least one destination.
        """
        dests = set(dests)
        if not dests:
            logger.debug("Rejected {!r}: no destinations", Transition(source, symbol))
            return False
        self.entries.setdefault(Transition(source, symbol), set()).update(dests)
        return True

    def get(self, source, symbol):
        """
        Returns the destination names for the key as a frozenset, empty if
        the key has no entry.
        """
        return frozenset(self.entries.get(Transition(source, symbol), ()))

    def items(self):
        return self.entries.items()

