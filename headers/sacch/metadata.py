"""
SAC header blocks and their storage.

The three typed header blocks are the float, int and string arrays of
``obspy.io.sac.arrayio``; reading and writing go through the same
module, header only, so the data section of a file is never touched
and the file keeps its byte order.
"""
from __future__ import annotations
import logging
import sys
from dataclasses import dataclass
from typing import Union

import numpy as np
from obspy.io.sac import arrayio
from obspy.io.sac.util import SacError

from .config import (SAC_FLOAT_UNDEF, SAC_INT_UNDEF, SAC_CHAR8_UNDEF, SAC_CHAR16_UNDEF,
                     SAC_HEADER_FLOATS, SAC_HEADER_INTS, SAC_HEADER_STRINGS,
                     SAC_HEADER_STRING_LENGTH, SAC_HEADER_VERSION)
from .errors import FieldValueError, FileReadError, FileWriteError
from .fields import TEXT_SLOTS, lookup, text_width

LOGGER = logging.getLogger(__name__)

NVHDR_INDEX = 6
BYTEORDER_PREFIX = {"little": "<", "big": ">"}

Value = Union[float, int, str]

def _byteorder_of(arr: np.ndarray) -> str:
    bo = arr.dtype.byteorder
    if bo in ("=", "|"):
        return sys.byteorder
    return "little" if bo == "<" else "big"

@dataclass
class SacHeader:
    floats: np.ndarray   # (70,) float32
    ints: np.ndarray     # (40,) int32
    text: np.ndarray     # (24,) |S8
    byteorder: str = "little"

    @classmethod
    def blank(cls, byteorder: str = "little") -> "SacHeader":
        prefix = BYTEORDER_PREFIX[byteorder]
        hd = cls(np.full(SAC_HEADER_FLOATS, SAC_FLOAT_UNDEF, dtype=prefix + "f4"),
                 np.full(SAC_HEADER_INTS, SAC_INT_UNDEF, dtype=prefix + "i4"),
                 np.zeros(SAC_HEADER_STRINGS, dtype="|S%d" % SAC_HEADER_STRING_LENGTH),
                 byteorder)
        for slot, name in enumerate(TEXT_SLOTS):
            if name is not None:
                undef = SAC_CHAR16_UNDEF if text_width(name) == 16 else SAC_CHAR8_UNDEF
                hd.set_text(slot, undef, text_width(name))
        hd.ints[NVHDR_INDEX] = SAC_HEADER_VERSION
        return hd

    # ---------- indexed access ----------
    def get_float(self, index: int) -> float:
        return float(self.floats[index])

    def set_float(self, index: int, value: float):
        self.floats[index] = np.float32(value)

    def get_int(self, index: int) -> int:
        return int(self.ints[index])

    def set_int(self, index: int, value: int):
        info = np.iinfo(np.int32)
        if not info.min <= value <= info.max:
            raise FieldValueError("Integer %d does not fit in a SAC header field" % value)
        self.ints[index] = value

    def _slots(self, slot: int, width: int) -> int:
        n = width // SAC_HEADER_STRING_LENGTH
        if slot < 0 or slot + n > SAC_HEADER_STRINGS:
            raise IndexError("text slot %d out of range" % slot)
        return n

    def get_text(self, slot: int, width: int = SAC_HEADER_STRING_LENGTH) -> str:
        n = self._slots(slot, width)
        # |S8 items drop trailing NULs, pad them back before joining slots
        raw = b"".join(bytes(v).ljust(SAC_HEADER_STRING_LENGTH, b"\x00")
                       for v in self.text[slot:slot + n])
        return raw.split(b"\x00", 1)[0].decode("ascii", "replace").rstrip()

    def set_text(self, slot: int, value: str, width: int = SAC_HEADER_STRING_LENGTH):
        n = self._slots(slot, width)
        try:
            raw = value.encode("ascii")
        except UnicodeEncodeError:
            raise FieldValueError("Non-ASCII text %r" % value)
        if len(raw) > width:
            raise FieldValueError("%r is longer than %d characters" % (value, width))
        raw = raw.ljust(width)
        for i in range(n):
            k = i * SAC_HEADER_STRING_LENGTH
            self.text[slot + i] = raw[k:k + SAC_HEADER_STRING_LENGTH]

    # ---------- access by name ----------
    def get(self, name: str) -> Value:
        ref = lookup(name)
        if ref.kind == "float":
            return self.get_float(ref.index)
        if ref.kind == "int":
            return self.get_int(ref.index)
        return self.get_text(ref.index, ref.width)

    def set(self, name: str, value: Value):
        ref = lookup(name)
        if ref.kind == "float":
            self.set_float(ref.index, float(value))
        elif ref.kind == "int":
            self.set_int(ref.index, int(value))
        else:
            self.set_text(ref.index, str(value), ref.width)

def read_header(path: str) -> SacHeader:
    try:
        hf, hi, hs, _ = arrayio.read_sac(path, headonly=True)
    except (SacError, OSError, ValueError) as e:
        raise FileReadError("{0}: {1}".format(path, e))
    return SacHeader(hf.copy(), hi.copy(), hs.copy(), _byteorder_of(hf))

def write_header(path: str, header: SacHeader):
    try:
        arrayio.write_sac(path, header.floats, header.ints, header.text,
                          None, byteorder=header.byteorder)
    except (SacError, OSError) as e:
        raise FileWriteError("Can't write {0}: {1}".format(path, e))
    LOGGER.debug("Wrote header of %s", path)
