"""Tests for decimal degrees extraction."""
import pytest

from geo_coordinates.decimal_degrees import extract_dd, find_numbers, to_degrees, trailing_cardinals


class TestFindNumbers:
    """Test number scanning in DD text."""

    def test_comma_joined_pair(self):
        assert find_numbers("49.202442, 16.615052") == [49.202442, 16.615052]

    def test_negative_numbers(self):
        assert find_numbers("-33.8688, -70.5") == [-33.8688, -70.5]

    def test_trailing_cardinal_sets_sign(self):
        assert find_numbers("40.7128 N, 74.0060 W") == [40.7128, -74.006]

    def test_cardinal_overrides_written_sign(self):
        assert find_numbers("-16.0W") == [-16.0]
        assert find_numbers("-49.0N") == [49.0]

    def test_no_numbers(self):
        assert find_numbers("no digits here") == []

    def test_overflowing_number_is_skipped(self):
        assert find_numbers("9" * 400 + ", 16.5") == [16.5]


class TestExtractDD:
    """Test pairing of decimal degree values."""

    @pytest.mark.parametrize("text", [
        "49.202442, 16.615052",
        "49.202442,16.615052",
        "  49.202442 ,\t16.615052 ",
    ])
    def test_whitespace_is_ignored(self, text):
        assert extract_dd(text) == [49.202442, 16.615052]

    def test_extra_values_are_dropped(self):
        assert extract_dd("1, 2, 3") == [1.0, 2.0]

    def test_missing_longitude_is_zero(self):
        assert extract_dd("49.5") == [49.5, 0.0]

    @pytest.mark.parametrize("value", ["", None, "abc", []])
    def test_nothing_found_is_zero(self, value):
        assert extract_dd(value) == [0.0, 0.0]

    def test_list(self):
        assert extract_dd([49.2, 16.6, 3]) == [49.2, 16.6]

    def test_list_with_strings(self):
        assert extract_dd(["49.2", "x"]) == [49.2, 0.0]

    def test_short_tuple(self):
        assert extract_dd((1,)) == [1.0, 0.0]


class TestToDegrees:
    """Test lenient coercion of a single value."""

    def test_number(self):
        assert to_degrees(16) == 16.0

    def test_string_takes_first_number(self):
        assert to_degrees("12 apples, 3 pears") == 12.0

    @pytest.mark.parametrize("value", [None, float("nan"), float("inf"), object(), "none"])
    def test_unusable_values_are_zero(self, value):
        assert to_degrees(value) == 0.0

    def test_integer_beyond_float_range_is_zero(self):
        assert to_degrees(10**400) == 0.0
        assert extract_dd([10**400, 1]) == [0.0, 1.0]


class TestTrailingCardinals:
    """Test reading the letters written after each number."""

    def test_one_letter_per_number(self):
        assert trailing_cardinals("40.7 N, 74.0W") == ["n", "w"]

    def test_number_without_letter(self):
        assert trailing_cardinals("16.6") == [""]

    def test_letter_run(self):
        assert trailing_cardinals("16.6 NE") == ["ne"]
