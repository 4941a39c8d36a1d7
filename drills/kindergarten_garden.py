"""Which plants each kindergarten student looks after."""

_PLANTS = {
    "V": "violets",
    "R": "radishes",
    "C": "clover",
    "G": "grass",
}


def plants(diagram: str, student: str) -> list[str]:
    """Return the plants of ``student`` in the two-row ``diagram``.

    Students are assigned cups in alphabetical order of their initials,
    two per row. Raises ValueError on an unknown plant letter.
    """
    start = (ord(student[0]) - ord("A")) * 2
    result = []
    for row in diagram.splitlines():
        for code in row[start:start + 2]:
            try:
                result.append(_PLANTS[code])
            except KeyError:
                raise ValueError("Unknown plant") from None
    return result