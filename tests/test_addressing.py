import pytest

from report_engine.components.addressing import (
    CellRange,
    column_range,
    decode_cell,
    decode_range,
    encode_cell,
    encode_col,
    encode_range,
)
from report_engine.exceptions import InvalidRangeFormat


class TestCellAddresses:
    def test_encode_cell(self):
        assert encode_cell(0, 0) == "A1"
        assert encode_cell(1, 0) == "A2"
        assert encode_cell(9, 27) == "AB10"

    def test_encode_col_multi_letter(self):
        assert encode_col(25) == "Z"
        assert encode_col(26) == "AA"
        assert encode_col(701) == "ZZ"
        assert encode_col(702) == "AAA"

    def test_decode_cell(self):
        assert decode_cell("A2") == (1, 0)
        assert decode_cell("ab10") == (9, 27)
        assert decode_cell("$C$3") == (2, 2)

    @pytest.mark.parametrize("row,col", [(0, 0), (4, 3), (99, 26), (1048575, 16383)])
    def test_encode_decode_are_inverse(self, row, col):
        assert decode_cell(encode_cell(row, col)) == (row, col)

    def test_negative_indices_rejected(self):
        with pytest.raises(ValueError):
            encode_cell(-1, 0)
        with pytest.raises(ValueError):
            encode_col(-1)


class TestRanges:
    def test_single_cell_range(self):
        assert decode_range("B2") == CellRange(1, 1, 1, 1)

    def test_rectangular_range(self):
        assert decode_range("B2:D10") == CellRange(1, 1, 9, 3)

    def test_reversed_corners_are_normalised(self):
        assert decode_range("D10:B2") == CellRange(1, 1, 9, 3)

    def test_encode_range(self):
        assert encode_range(CellRange(1, 1, 9, 1)) == "B2:B10"
        assert encode_range(CellRange(0, 0, 0, 0)) == "A1"

    def test_column_range(self):
        assert column_range(2, 1, 5) == "C2:C6"

    @pytest.mark.parametrize("bad", ["", "A", "1A", "A0", "A1:B2:C3", "A1:", "ABCD1", None, "A-1"])
    def test_malformed_ranges(self, bad):
        with pytest.raises(InvalidRangeFormat):
            decode_range(bad)
