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
Epsilon closure over a :class:`~fasim.automata.transitions.NondeterministicTable`.
"""


def epsilon_closure(table, state, epsilon):
    """
    Returns the names of all states reachable from ``state`` by following
    zero or more epsilon edges. The result always contains ``state``.

    The traversal uses an explicit stack and a seen set, so epsilon cycles
    (including self-loops) terminate.

    Args:
        table (NondeterministicTable): The transitions to follow.
        state (str): The name of the state to start from.
        epsilon (str): The symbol labelling epsilon edges.

    Returns:
        set: The names of the states in the closure.

    Example:
        >>> table = NondeterministicTable()
        >>> table.add("a", "ε", ["b"])
        >>> table.add("b", "ε", ["a", "c"])
        >>> sorted(epsilon_closure(table, "a", "ε"))
        ['a', 'b', 'c']
    """
    closure = set()
    stack = [state]
    while stack:
        current = stack.pop()
        if current in closure:
            continue
        closure.add(current)
        stack.extend(table.get(current, epsilon) - closure)
    return closure


def expand(table, states, epsilon):
    """
    Returns the union of the epsilon closures of all the given state names.
    """
    expanded = set()
    for state in states:
        if state not in expanded:
            expanded |= epsilon_closure(table, state, epsilon)
    return expanded
