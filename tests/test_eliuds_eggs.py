import pytest

from drills.eliuds_eggs import egg_count


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, 0), (16, 1), (89, 4), (2_000_000_000, 13)],
)
def test_egg_count(value, expected):
    assert egg_count(value) == expected


def test_negative_is_an_error():
    with pytest.raises(ValueError):
        egg_count(-1)