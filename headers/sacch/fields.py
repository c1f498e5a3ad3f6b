"""
SAC header field registry.

Every header word has one name. Names are numbered globally: the 70
floats first, then the 40 integers, then the 24 eight-character text
slots. ``kevnm`` is the only 16 character field and takes two slots.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from obspy.io.sac.header import ENUM_VALS

from .config import (SAC_HEADER_FLOATS, SAC_HEADER_INTS, SAC_HEADER_NUMBERS,
                     SAC_HEADER_STRINGS, SAC_HEADER_STRING_LENGTH)
from .errors import UnknownFieldError

FLOAT_FIELDS: Tuple[str, ...] = (
    "delta", "depmin", "depmax", "scale", "odelta",
    "b", "e", "o", "a", "fmt",
    "t0", "t1", "t2", "t3", "t4", "t5", "t6", "t7", "t8", "t9",
    "f",
    "resp0", "resp1", "resp2", "resp3", "resp4",
    "resp5", "resp6", "resp7", "resp8", "resp9",
    "stla", "stlo", "stel", "stdp",
    "evla", "evlo", "evel", "evdp", "mag",
    "user0", "user1", "user2", "user3", "user4",
    "user5", "user6", "user7", "user8", "user9",
    "dist", "az", "baz", "gcarc", "sb", "sdelta",
    "depmen", "cmpaz", "cmpinc",
    "xminimum", "xmaximum", "yminimum", "ymaximum",
    "unused6", "unused7", "unused8", "unused9",
    "unused10", "unused11", "unused12",
)

INT_FIELDS: Tuple[str, ...] = (
    "nzyear", "nzjday", "nzhour", "nzmin", "nzsec", "nzmsec",
    "nvhdr", "norid", "nevid", "npts", "nsnpts", "nwfid",
    "nxsize", "nysize", "unused15",
    "iftype", "idep", "iztype", "unused16", "iinst",
    "istreg", "ievreg", "ievtyp", "iqual", "isynth",
    "imagtyp", "imagsrc",
    "unused19", "unused20", "unused21", "unused22",
    "unused23", "unused24", "unused25", "unused26",
    "leven", "lpspol", "lovrok", "lcalda", "unused27",
)

# one entry per 8 char slot, None marks the second half of kevnm
TEXT_SLOTS: Tuple[Optional[str], ...] = (
    "kstnm", "kevnm", None, "khole", "ko", "ka",
    "kt0", "kt1", "kt2", "kt3", "kt4", "kt5", "kt6", "kt7", "kt8", "kt9",
    "kf", "kuser0", "kuser1", "kuser2",
    "kcmpnm", "knetwk", "kdatrd", "kinst",
)

WIDE_TEXT_FIELDS = ("kevnm",)

LOGICAL_FIELDS = ("leven", "lpspol", "lovrok", "lcalda")

ENUMERATED_FIELDS = ("iftype", "idep", "iztype", "iinst", "istreg",
                     "ievreg", "ievtyp", "iqual", "isynth",
                     "imagtyp", "imagsrc")

@dataclass(frozen=True)
class FieldRef:
    kind: str   # "float", "int" or "text"
    index: int  # offset within its class
    name: str

    @property
    def global_index(self) -> int:
        if self.kind == "float":
            return self.index
        if self.kind == "int":
            return SAC_HEADER_FLOATS + self.index
        return SAC_HEADER_NUMBERS + self.index

    @property
    def width(self) -> int:
        if self.kind != "text":
            return 4
        return text_width(self.name)

def _build_registry() -> Dict[str, FieldRef]:
    reg: Dict[str, FieldRef] = {}
    blocks = (("float", FLOAT_FIELDS), ("int", INT_FIELDS), ("text", TEXT_SLOTS))
    for kind, names in blocks:
        for i, name in enumerate(names):
            if name is None:
                continue
            if name in reg:
                raise RuntimeError("duplicate SAC header name %r" % name)
            reg[name] = FieldRef(kind, i, name)
    return reg

_REGISTRY = _build_registry()

for _names, _count in ((FLOAT_FIELDS, SAC_HEADER_FLOATS), (INT_FIELDS, SAC_HEADER_INTS),
                       (TEXT_SLOTS, SAC_HEADER_STRINGS)):
    if len(_names) != _count:
        raise RuntimeError("SAC header block has %d names, expected %d" % (len(_names), _count))

def fold(name: str) -> str:
    """ASCII-only case fold; other characters are kept as they are."""
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in name)

def classify(name: str) -> Optional[FieldRef]:
    return _REGISTRY.get(fold(name.strip()))

def lookup(name: str) -> FieldRef:
    ref = classify(name)
    if ref is None:
        raise UnknownFieldError(name)
    return ref

def global_index(name: str) -> int:
    return lookup(name).global_index

def text_width(name: str) -> int:
    if fold(name) in WIDE_TEXT_FIELDS:
        return 2 * SAC_HEADER_STRING_LENGTH
    return SAC_HEADER_STRING_LENGTH

def enumerated_value(name: str) -> Optional[int]:
    return ENUM_VALS.get(fold(name.strip()))
