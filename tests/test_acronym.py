import pytest

from drills.acronym import abbreviate


@pytest.mark.parametrize(
    ("phrase", "expected"),
    [
        ("Portable Network Graphics", "PNG"),
        ("Ruby on Rails", "ROR"),
        ("First In, First Out", "FIFO"),
        ("GNU Image Manipulation Program", "GIMP"),
        ("Complementary metal-oxide semiconductor", "CMOS"),
        (
            "Rolling On The Floor Laughing So Hard That My Dogs Came Over And Licked Me",
            "ROTFLSHTMDCOALM",
        ),
        ("Something - I made up from thin air", "SIMUFTA"),
        ("Halley's Comet", "HC"),
        ("The Road _Not_ Taken", "TRNT"),
        ("HyperText Markup Language", "HTML"),
    ],
)
def test_abbreviate(phrase, expected):
    assert abbreviate(phrase) == expected


def test_empty_phrase():
    assert abbreviate("") == ""


def test_leading_digit_is_not_taken():
    assert abbreviate("3 blind mice") == "BM"