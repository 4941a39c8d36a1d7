"""Check that brackets, braces and parentheses are balanced."""

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


def is_pair(opening: str, closing: str) -> bool:
    """Return whether ``opening`` and ``closing`` form a matching bracket pair."""
    return _PAIRS.get(closing) == opening


def brackets_are_balanced(text: str) -> bool:
    """Return whether every bracket in ``text`` is closed in the right order.

    Characters other than ``()[]{}`` are ignored.
    """
    stack = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or not is_pair(stack.pop(), char):
                return False
    return not stack