"""Pydantic schemas for label sheets."""

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

SLOTS_PER_SHEET = 8


class EmployeeRef(BaseModel):
    """One employee as it should appear on a label."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    barcode_value: str


class LabelRequest(BaseModel):
    """Ordered employees for one print action. Duplicates are allowed."""

    entries: list[EmployeeRef] = Field(..., min_length=1, max_length=SLOTS_PER_SHEET)


class SheetGeometry(BaseModel):
    """Physical layout of the label stock, in inches."""

    model_config = ConfigDict(frozen=True)

    page_width: float = 8.5
    page_height: float = 11.0
    label_width: float = 3.0
    label_height: float = 2.0
    columns: int = Field(2, ge=1)
    rows: int = Field(4, ge=1)
    column_gap: float = Field(0.5, ge=0)
    row_gap: float = Field(0.25, ge=0)

    @model_validator(mode="after")
    def _grid_fits_page(self) -> "SheetGeometry":
        if self.margin_left < 0 or self.margin_top < 0:
            raise ValueError("label grid does not fit on the page")
        return self

    @property
    def slot_count(self) -> int:
        return self.columns * self.rows

    @computed_field
    @property
    def margin_left(self) -> float:
        grid = self.columns * self.label_width + (self.columns - 1) * self.column_gap
        return (self.page_width - grid) / 2

    @computed_field
    @property
    def margin_top(self) -> float:
        grid = self.rows * self.label_height + (self.rows - 1) * self.row_gap
        return (self.page_height - grid) / 2

    def slot_position(self, index: int) -> tuple[int, int]:
        """Return ``(row, column)`` of a slot in row-major order."""
        if not 0 <= index < self.slot_count:
            raise IndexError(f"slot {index} outside sheet of {self.slot_count}")
        return divmod(index, self.columns)

    def slot_origin(self, index: int) -> tuple[float, float]:
        """Return the top-left corner of a slot, measured from the page corner."""
        row, column = self.slot_position(index)
        x = self.margin_left + column * (self.label_width + self.column_gap)
        y = self.margin_top + row * (self.label_height + self.row_gap)
        return round(x, 4), round(y, 4)


class LabelContent(BaseModel):
    """What gets printed inside an occupied slot."""

    name: str
    barcode_value: str
    barcode_url: str


class SheetSlot(BaseModel):
    """A fixed position on the sheet; ``label`` is None for blank slots."""

    index: int
    row: int
    column: int
    x: float
    y: float
    label: LabelContent | None = None

    @computed_field
    @property
    def occupied(self) -> bool:
        return self.label is not None


class LabelSheet(BaseModel):
    """A full printable page."""

    geometry: SheetGeometry
    slots: list[SheetSlot]

    @computed_field
    @property
    def occupied_count(self) -> int:
        return sum(1 for slot in self.slots if slot.occupied)
