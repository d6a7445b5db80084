"""Tests for the fixed 2x4 label sheet layout."""

import pytest
from pydantic import ValidationError

from app.labels.schemas import EmployeeRef, LabelRequest, SheetGeometry
from app.labels.sheet import DEFAULT_GEOMETRY, barcode_url, clamp_label_count, layout_sheet


def _refs(n: int) -> list[EmployeeRef]:
    return [EmployeeRef(display_name=f"Person {i}", barcode_value=f"{i:06d}") for i in range(n)]


class TestLayoutSheet:
    """Tests for slot assignment."""

    @pytest.mark.parametrize("n", range(1, 9))
    def test_always_eight_slots_first_n_occupied(self, n):
        """The first n slots hold the request in order; the rest are blank."""
        refs = _refs(n)
        sheet = layout_sheet(LabelRequest(entries=refs))

        assert len(sheet.slots) == 8
        assert sheet.occupied_count == n
        for index, slot in enumerate(sheet.slots):
            assert slot.index == index
            if index < n:
                assert slot.occupied
                assert slot.label.barcode_value == refs[index].barcode_value
            else:
                assert not slot.occupied
                assert slot.label is None

    def test_duplicates_are_kept(self):
        """The same employee may fill several slots."""
        ref = EmployeeRef(display_name="Avery Cole", barcode_value="000123")
        sheet = layout_sheet(LabelRequest(entries=[ref, ref, ref]))
        names = [slot.label.name for slot in sheet.slots[:3]]
        assert names == ["Cole, Avery"] * 3

    def test_label_content_is_formatted(self):
        """Occupied slots carry the formatted name, value and image URL."""
        ref = EmployeeRef(display_name="  Riley   Quinn ", barcode_value=" 000125 ")
        label = layout_sheet(LabelRequest(entries=[ref])).slots[0].label

        assert label.name == "Quinn, Riley"
        assert label.barcode_value == "000125"
        assert label.barcode_url == "/api/barcode?text=000125"

    def test_row_major_positions(self):
        """Slots run left to right, then top to bottom."""
        sheet = layout_sheet(LabelRequest(entries=_refs(1)))
        positions = [(slot.row, slot.column) for slot in sheet.slots]
        assert positions == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1), (3, 0), (3, 1)]


class TestLabelRequest:
    """Tests for request length bounds."""

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            LabelRequest(entries=[])

    def test_nine_rejected(self):
        with pytest.raises(ValidationError):
            LabelRequest(entries=_refs(9))


class TestSheetGeometry:
    """Tests for the physical Letter layout."""

    def test_default_margins_center_grid(self):
        assert DEFAULT_GEOMETRY.slot_count == 8
        assert DEFAULT_GEOMETRY.margin_left == pytest.approx(1.0)
        assert DEFAULT_GEOMETRY.margin_top == pytest.approx(1.125)

    def test_slot_origins(self):
        assert DEFAULT_GEOMETRY.slot_origin(0) == (1.0, 1.125)
        assert DEFAULT_GEOMETRY.slot_origin(1) == (4.5, 1.125)
        assert DEFAULT_GEOMETRY.slot_origin(7) == (4.5, 7.875)

    def test_slot_out_of_range(self):
        with pytest.raises(IndexError):
            DEFAULT_GEOMETRY.slot_origin(8)

    def test_grid_must_fit_page(self):
        with pytest.raises(ValidationError):
            SheetGeometry(columns=3)

    def test_request_larger_than_geometry(self):
        small = SheetGeometry(columns=1, rows=2)
        with pytest.raises(ValueError):
            layout_sheet(LabelRequest(entries=_refs(3)), small)


class TestClampLabelCount:
    """Tests for copy count parsing."""

    @pytest.mark.parametrize(
        "raw, expected",
        [(None, 1), ("3", 3), ("0", 1), ("-4", 1), ("12", 8), ("abc", 1), ("", 1), (8, 8)],
    )
    def test_clamp(self, raw, expected):
        assert clamp_label_count(raw) == expected


def test_barcode_url_encodes_value():
    assert barcode_url("12 3") == "/api/barcode?text=12+3"
