import pytest
from pydantic import ValidationError

from dg_keyring.range import SizeRange


@pytest.mark.parametrize(
    ("size_range", "description"),
    [
        (SizeRange(start=50), "at least 50"),
        (SizeRange(end=150), "at most 150"),
        (SizeRange(start=50, end=150), "between 50 and 150"),
    ],
)
def test_describe(size_range: SizeRange, description: str) -> None:
    assert size_range.describe() == description


def test_is_within_inclusive() -> None:
    size_range = SizeRange(start=50, end=150)
    assert size_range.is_within(50)
    assert size_range.is_within(150)
    assert not size_range.is_within(49)
    assert not size_range.is_within(151)


def test_is_within_exclusive() -> None:
    size_range = SizeRange(start=50, end=150)
    assert not size_range.is_within(50, inclusive=False)
    assert not size_range.is_within(150, inclusive=False)
    assert size_range.is_within(100, inclusive=False)


def test_open_ended_ranges() -> None:
    assert SizeRange(start=10).is_within(10**6)
    assert SizeRange(end=10).is_within(0)


def test_requires_a_bound() -> None:
    with pytest.raises(ValidationError):
        SizeRange()


def test_rejects_inverted_bounds() -> None:
    with pytest.raises(ValidationError):
        SizeRange(start=10, end=5)


def test_is_frozen() -> None:
    size_range = SizeRange(start=1)
    with pytest.raises(ValidationError):
        size_range.start = 2
