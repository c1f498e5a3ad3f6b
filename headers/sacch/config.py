from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

SAC_FLOAT_UNDEF = -12345.0
SAC_INT_UNDEF = -12345
SAC_CHAR8_UNDEF = "-12345".ljust(8)
SAC_CHAR16_UNDEF = "-12345".ljust(16)

# header geometry: 70 floats, 40 ints, 24 slots of 8 chars
SAC_HEADER_FLOATS = 70
SAC_HEADER_INTS = 40
SAC_HEADER_NUMBERS = SAC_HEADER_FLOATS + SAC_HEADER_INTS
SAC_HEADER_STRINGS = 24
SAC_HEADER_STRING_LENGTH = 8
SAC_HEADER_SIZE = 4 * SAC_HEADER_NUMBERS + SAC_HEADER_STRINGS * SAC_HEADER_STRING_LENGTH
SAC_HEADER_VERSION = 6

# stored floats may have lost precision, so undefined is tested loosely
UNDEF_TOLERANCE = 0.1

# largest allt shift in seconds, about 317 years
MAX_SHIFT = 1.0e10

REFERENCE_FIELDS = ("nzyear", "nzjday", "nzhour", "nzmin", "nzsec", "nzmsec")

@dataclass
class ShiftKeys:
    boundary: Tuple[str, ...] = ("b", "e")
    optional: Tuple[str, ...] = ("a", "f", "o",
                                 "t0", "t1", "t2", "t3", "t4",
                                 "t5", "t6", "t7", "t8", "t9")

    @property
    def time_fields(self) -> Tuple[str, ...]:
        return self.boundary + self.optional

@dataclass
class EditOptions:
    undef_token: str = "undef"
    datetime_sep: str = "T"
    shift_keys: ShiftKeys = field(default_factory=ShiftKeys)
