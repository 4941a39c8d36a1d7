"""A lackadaisical teenager's replies."""


def reply(message: str) -> str:
    """Return Bob's answer to ``message``."""
    stripped = message.strip()
    letters = [c for c in message if c.isalpha()]
    is_question = stripped.endswith("?")
    yelling = bool(letters) and all(c.isupper() for c in letters)

    if is_question and yelling:
        return "Calm down, I know what I'm doing!"
    if is_question:
        return "Sure."
    if yelling:
        return "Whoa, chill out!"
    if not stripped:
        return "Fine. Be that way!"
    return "Whatever."