"""Tests for the SAC header field registry."""

import pytest

from sacch.config import SAC_HEADER_FLOATS, SAC_HEADER_NUMBERS
from sacch.errors import UnknownFieldError
from sacch.fields import (FLOAT_FIELDS, INT_FIELDS, TEXT_SLOTS, classify,
                          fold, global_index, lookup, text_width, enumerated_value)

ALL_NAMES = [n for n in FLOAT_FIELDS + INT_FIELDS + TEXT_SLOTS if n is not None]


class TestRegistry:
    """Every header word has exactly one name."""

    def test_field_counts(self):
        assert len(FLOAT_FIELDS) == 70
        assert len(INT_FIELDS) == 40
        assert len(TEXT_SLOTS) == 24
        assert len(ALL_NAMES) == 70 + 40 + 23

    def test_names_unique(self):
        names = ALL_NAMES
        assert len(set(names)) == len(names)

    def test_global_indices_unique(self):
        indices = [global_index(n) for n in ALL_NAMES]
        assert len(set(indices)) == len(indices)

    def test_every_name_classifies(self):
        for name in ALL_NAMES:
            ref = classify(name)
            assert ref is not None
            assert ref.name == name

    def test_unknown_name(self):
        assert classify("zzzz") is None
        with pytest.raises(UnknownFieldError):
            lookup("zzzz")

    def test_unknown_name_is_key_error(self):
        with pytest.raises(KeyError):
            lookup("kevnm2")


class TestClassify:
    """Names map to a class and an offset inside it."""

    def test_float_field(self):
        ref = classify("stla")
        assert ref.kind == "float"
        assert ref.index == 31

    def test_int_field(self):
        ref = classify("nzyear")
        assert ref.kind == "int"
        assert ref.index == 0
        assert ref.global_index == SAC_HEADER_FLOATS

    def test_text_field(self):
        ref = classify("kstnm")
        assert ref.kind == "text"
        assert ref.index == 0
        assert ref.global_index == SAC_HEADER_NUMBERS

    def test_slot_after_kevnm(self):
        # kevnm takes slots 1 and 2
        assert classify("kevnm").index == 1
        assert classify("khole").index == 3
        assert global_index("kinst") == SAC_HEADER_NUMBERS + 23

    def test_time_fields(self):
        assert [classify(n).index for n in ("b", "e", "o", "a")] == [5, 6, 7, 8]
        assert classify("t0").index == 10
        assert classify("t9").index == 19
        assert classify("f").index == 20

    def test_case_insensitive(self):
        assert classify("STLA") == classify("stla")
        assert classify("KeVnM") == classify("kevnm")

    def test_non_ascii_fold(self):
        assert fold("ÅB") == "Åb"
        assert classify("\u212aSTNM") is None  # Kelvin sign is not K

    def test_text_width(self):
        assert text_width("kevnm") == 16
        assert text_width("KEVNM") == 16
        assert text_width("kstnm") == 8
        assert classify("kevnm").width == 16


class TestEnumeratedValues:

    def test_lookup(self):
        assert enumerated_value("IB") == 9
        assert enumerated_value("itime") == 1
        assert enumerated_value("IQUAKE") == 40

    def test_unknown(self):
        assert enumerated_value("NOPE") is None
