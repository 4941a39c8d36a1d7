import pytest

from drills.matching_brackets import brackets_are_balanced, is_pair


@pytest.mark.parametrize(
    "text",
    [
        "[]",
        "",
        "{ }",
        "{[]}",
        "{}[]",
        "([{}({}[])])",
        "(((185 + 223.85) * 15) - 543)/2",
        "\\left(\\begin{array}{cc} \\frac{1}{3} & x\\\\ \\mathrm{e}^{x} &... x^2 "
        "\\end{array}\\right)",
    ],
)
def test_balanced(text):
    assert brackets_are_balanced(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "[[",
        "}{",
        "{]",
        "{[])",
        "{[)][]}",
        "([{])",
        "[({]})",
        "{}[",
        "[]]",
        ")()",
        "{)()",
    ],
)
def test_unbalanced(text):
    assert brackets_are_balanced(text) is False


@pytest.mark.parametrize("opening, closing", [("(", ")"), ("[", "]"), ("{", "}")])
def test_is_pair_matches(opening, closing):
    assert is_pair(opening, closing) is True


@pytest.mark.parametrize("opening, closing", [("(", "]"), ("[", "}"), ("{", ")"), (")", "(")])
def test_is_pair_rejects_mismatch(opening, closing):
    assert is_pair(opening, closing) is False