"""Tests for label text formatting."""

import pytest

from app.labels.formatting import (
    format_employee_barcode,
    format_employee_name,
    is_valid_barcode_text,
    slugify_filename,
)


class TestFormatEmployeeName:
    """Tests for surname-first name formatting."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Cole, Avery", "Cole, Avery"),
            ("Avery Cole", "Cole, Avery"),
            ("Cole", "Cole"),
            ("  Avery   Cole  ", "Cole, Avery"),
            ("Mary Ann van Dyke", "Dyke, Mary Ann van"),
            ("Cole ,   Avery  J.", "Cole, Avery J."),
            ("Cole,", "Cole"),
            ("", ""),
            ("   ", ""),
        ],
    )
    def test_examples(self, raw, expected):
        """Formatting follows the surname-first rule."""
        assert format_employee_name(raw) == expected

    def test_tabs_and_newlines_collapse(self):
        """Any whitespace run counts as one separator."""
        assert format_employee_name("Avery\t\nCole") == "Cole, Avery"

    def test_already_formatted_is_stable(self):
        """A canonical comma name passes through unchanged."""
        once = format_employee_name("Riley Quinn")
        assert format_employee_name(once) == once

    def test_only_first_comma_splits(self):
        """Later commas stay in the remainder."""
        assert format_employee_name("Cole, Avery, Jr.") == "Cole, Avery, Jr."


class TestFormatEmployeeBarcode:
    """Tests for the barcode value seam."""

    def test_trims_only(self):
        assert format_employee_barcode("  000123 ") == "000123"

    def test_keeps_leading_zeros(self):
        assert format_employee_barcode("0007") == "0007"


class TestBarcodeTextValidator:
    """Tests for digit-only validation."""

    @pytest.mark.parametrize("text", ["000123", "0", "9876543210"])
    def test_valid(self, text):
        assert is_valid_barcode_text(text)

    @pytest.mark.parametrize("text", ["", "12a", " 123", "12 3", "123\n", "-1", "１２３"])
    def test_invalid(self, text):
        assert not is_valid_barcode_text(text)


class TestSlugifyFilename:
    """Tests for download filename slugs."""

    def test_name(self):
        assert slugify_filename("Cole, Avery") == "cole-avery"

    def test_empty_falls_back(self):
        assert slugify_filename("!!!") == "employee-label"
