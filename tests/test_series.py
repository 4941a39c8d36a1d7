import pytest

from drills.series import series


@pytest.mark.parametrize(
    ("digits", "length", "expected"),
    [
        ("1", 1, ["1"]),
        ("12", 1, ["1", "2"]),
        ("35", 2, ["35"]),
        ("9142", 2, ["91", "14", "42"]),
        ("777777", 3, ["777", "777", "777", "777"]),
        (
            "918493904243",
            5,
            ["91849", "18493", "84939", "49390", "93904", "39042", "90424", "04243"],
        ),
        ("12345", 6, []),
        ("12345", 42, []),
        ("", 1, []),
    ],
)
def test_series(digits, length, expected):
    assert series(digits, length) == expected


def test_zero_length_is_an_error():
    with pytest.raises(ValueError):
        series("123", 0)