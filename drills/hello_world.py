"""The customary greeting."""


def hello() -> str:
    """Return the greeting."""
    return "Hello, World!"