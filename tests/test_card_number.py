"""Tests for card number parsing and range expansion."""

from cardledger.parsers.card_number import (
    expand_card_range,
    is_card_range,
    normalize_card_number,
    split_card_number,
)


class TestSplitCardNumber:
    def test_language_code(self) -> None:
        assert split_card_number("LOB-EN001") == ("LOB", 1)

    def test_plain_number(self) -> None:
        assert split_card_number("LOB-001") == ("LOB", 1)

    def test_single_letter_sub_prefix(self) -> None:
        assert split_card_number("SDY-E005") == ("SDY", 5)

    def test_no_hyphen(self) -> None:
        assert split_card_number("LOB123") == ("LOB", 123)

    def test_digits_in_prefix(self) -> None:
        """Only the last digit run is the collection number."""
        assert split_card_number("5DS1-EN042") == ("5DS1", 42)

    def test_trailing_letters_after_number(self) -> None:
        assert split_card_number("MP19-EN001a") == ("MP19", 1)

    def test_no_digits_yields_zero(self) -> None:
        """A value without digits is valid: number 0 means unknown."""
        assert split_card_number("PROMO") == ("PROMO", 0)

    def test_empty_string(self) -> None:
        assert split_card_number("") == ("", 0)


class TestNormalizeCardNumber:
    def test_drops_language_code(self) -> None:
        assert normalize_card_number("LOB-EN001") == "LOB-001"

    def test_pads_to_three_digits(self) -> None:
        assert normalize_card_number("LOB-7") == "LOB-007"

    def test_keeps_wider_numbers(self) -> None:
        assert normalize_card_number("RA01-EN1001") == "RA01-1001"


class TestExpandCardRange:
    def test_plain_range(self) -> None:
        numbers = expand_card_range("LOB-001-010")

        assert len(numbers) == 10
        assert numbers[0] == "LOB-001"
        assert numbers[-1] == "LOB-010"
        assert numbers == [f"LOB-{n:03d}" for n in range(1, 11)]

    def test_range_with_sub_prefix(self) -> None:
        assert expand_card_range("LOB-EN001-EN003") == ["LOB-EN001", "LOB-EN002", "LOB-EN003"]

    def test_end_sub_prefix_is_ignored(self) -> None:
        """Only the start endpoint's sub-prefix is used."""
        assert expand_card_range("LOB-EN001-DE002") == ["LOB-EN001", "LOB-EN002"]

    def test_single_element_range(self) -> None:
        assert expand_card_range("LOB-005-005") == ["LOB-005"]

    def test_unpadded_endpoints_are_padded(self) -> None:
        assert expand_card_range("LOB-8-10") == ["LOB-008", "LOB-009", "LOB-010"]

    def test_reversed_range_is_empty(self) -> None:
        assert expand_card_range("LOB-010-001") == []

    def test_single_card_is_literal(self) -> None:
        assert expand_card_range("LOB-EN001") == ["LOB-EN001"]

    def test_literal_is_stripped(self) -> None:
        assert expand_card_range(" LOB-001 ") == ["LOB-001"]

    def test_range_with_whitespace(self) -> None:
        assert expand_card_range(" LOB-001-002 ") == ["LOB-001", "LOB-002"]

    def test_four_segments_is_literal(self) -> None:
        assert expand_card_range("A-B-001-002") == ["A-B-001-002"]

    def test_non_numeric_end_is_literal(self) -> None:
        assert expand_card_range("LOB-001-END") == ["LOB-001-END"]


class TestIsCardRange:
    def test_range(self) -> None:
        assert is_card_range("LOB-001-010")
        assert is_card_range("LOB-EN001-EN010")

    def test_not_range(self) -> None:
        assert not is_card_range("LOB-001")
        assert not is_card_range("LOB")
        assert not is_card_range("")
