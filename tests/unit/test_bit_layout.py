"""Tests for sf_codec.layout."""

from src.sf_codec.layout import BitLayout


class TestFromBits:
    def test_default_layout(self) -> None:
        layout = BitLayout.from_bits(10, 12)
        assert layout.machine_left == 12
        assert layout.timestamp_left == 22
        assert layout.max_machine_id == 1023
        assert layout.max_sequence == 4095

    def test_zero_widths_give_zero_masks(self) -> None:
        layout = BitLayout.from_bits(0, 0)
        assert layout.machine_left == 0
        assert layout.timestamp_left == 0
        assert layout.max_machine_id == 0
        assert layout.max_sequence == 0

    def test_sequence_only(self) -> None:
        layout = BitLayout.from_bits(0, 22)
        assert layout.machine_left == 22
        assert layout.timestamp_left == 22
        assert layout.max_sequence == (1 << 22) - 1


class TestCompose:
    def test_fields_land_in_their_slots(self) -> None:
        layout = BitLayout.from_bits(10, 12)
        assert layout.compose(1, 0, 0) == 1 << 22
        assert layout.compose(0, 1, 0) == 1 << 12
        assert layout.compose(0, 0, 1) == 1

    def test_max_fields_do_not_overlap(self) -> None:
        layout = BitLayout.from_bits(10, 12)
        value = layout.compose(0, layout.max_machine_id, layout.max_sequence)
        assert value == (1 << 22) - 1

    def test_max_timestamp_fits_63_bits(self) -> None:
        layout = BitLayout.from_bits(10, 12)
        value = layout.compose((1 << 41) - 1, layout.max_machine_id, layout.max_sequence)
        assert value == (1 << 63) - 1
