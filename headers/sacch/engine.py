from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .config import (SAC_FLOAT_UNDEF, SAC_INT_UNDEF, SAC_CHAR8_UNDEF, SAC_CHAR16_UNDEF,
                     REFERENCE_FIELDS, UNDEF_TOLERANCE, MAX_SHIFT, EditOptions, ShiftKeys)
from .datetimes import (DateTime, datetime_add, looks_like_datetime,
                        parse_datetime, reference_of)
from .errors import FieldValueError, FileReadError
from .fields import (ENUMERATED_FIELDS, LOGICAL_FIELDS, enumerated_value, fold, lookup)
from .metadata import SacHeader, read_header, write_header

LOGGER = logging.getLogger(__name__)

# ---------- pending edits ----------
@dataclass(frozen=True)
class FloatEdit:
    index: int
    value: float
    is_datetime: bool = False  # value is an epoch, store it relative to the reference
    name: str = ""

@dataclass(frozen=True)
class IntEdit:
    index: int
    value: int
    name: str = ""

@dataclass(frozen=True)
class TextEdit:
    slot: int
    width: int
    value: str
    name: str = ""

@dataclass
class EditPlan:
    floats: List[FloatEdit] = field(default_factory=list)
    ints: List[IntEdit] = field(default_factory=list)
    texts: List[TextEdit] = field(default_factory=list)
    reference: Optional[DateTime] = None  # time=
    shift: Optional[float] = None         # allt=
    options: EditOptions = field(default_factory=EditOptions)

    @property
    def empty(self) -> bool:
        return (not (self.floats or self.ints or self.texts)
                and self.reference is None and self.shift is None)

# ---------- value parsing ----------
def _is_undef(value: str, options: EditOptions) -> bool:
    return fold(value.strip()) == options.undef_token

def _to_float(key: str, value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise FieldValueError("Invalid number for %s: %r" % (key, value))

def _to_int(key: str, name: str, value: str) -> int:
    if name in ENUMERATED_FIELDS:
        code = enumerated_value(value)
        if code is not None:
            return code
    if name in LOGICAL_FIELDS and fold(value.strip()) in ("true", "false"):
        return int(fold(value.strip()) == "true")
    try:
        v = int(value)
    except ValueError:
        raise FieldValueError("Invalid integer for %s: %r" % (key, value))
    info = np.iinfo(np.int32)
    if not info.min <= v <= info.max:
        raise FieldValueError("Integer for %s out of range: %d" % (key, v))
    return v

def _to_text(key: str, value: str, width: int) -> str:
    try:
        n = len(value.encode("ascii"))
    except UnicodeEncodeError:
        raise FieldValueError("Non-ASCII text for %s: %r" % (key, value))
    if n > width:
        raise FieldValueError("Text for %s is longer than %d characters: %r" % (key, width, value))
    return value

def parse_assignment(plan: EditPlan, key: str, value: str) -> EditPlan:
    """Classify one key=value pair and append it to ``plan``."""
    opts = plan.options
    k = fold(key.strip())
    undef = _is_undef(value, opts)

    if k == "time":
        plan.reference = DateTime.undefined() if undef else parse_datetime(value)
        return plan
    if k == "allt":
        shift = _to_float(key, value)
        if not math.isfinite(shift) or abs(shift) > MAX_SHIFT:
            raise FieldValueError("allt must be a finite number of seconds within %g: %r"
                                  % (MAX_SHIFT, value))
        plan.shift = shift
        return plan

    ref = lookup(key)
    if ref.kind == "float":
        if undef:
            plan.floats.append(FloatEdit(ref.index, SAC_FLOAT_UNDEF, name=ref.name))
        elif ref.name in opts.shift_keys.time_fields and looks_like_datetime(value, opts.datetime_sep):
            dt = parse_datetime(value)
            plan.floats.append(FloatEdit(ref.index, dt.epoch, True, ref.name))
        else:
            plan.floats.append(FloatEdit(ref.index, _to_float(key, value), name=ref.name))
    elif ref.kind == "int":
        v = SAC_INT_UNDEF if undef else _to_int(key, ref.name, value)
        plan.ints.append(IntEdit(ref.index, v, ref.name))
    else:
        if undef:
            v = SAC_CHAR16_UNDEF if ref.width == 16 else SAC_CHAR8_UNDEF
        else:
            v = _to_text(key, value, ref.width)
        plan.texts.append(TextEdit(ref.index, ref.width, v, ref.name))
    return plan

def build_plan(pairs: Iterable[Tuple[str, str]], options: Optional[EditOptions] = None) -> EditPlan:
    plan = EditPlan(options=options or EditOptions())
    for key, value in pairs:
        parse_assignment(plan, key, value)
    return plan

# ---------- applying edits ----------
def set_reference(header: SacHeader, dt: DateTime):
    for name, v in zip(REFERENCE_FIELDS, dt.reference_values()):
        header.set(name, v)

def is_defined(value: float) -> bool:
    return abs(value - SAC_FLOAT_UNDEF) > UNDEF_TOLERANCE

def shift_all_times(header: SacHeader, delta: float, reference: DateTime,
                    keys: Optional[ShiftKeys] = None):
    """
    Add ``delta`` to b, e and every defined time pick, and move the
    reference time by ``-delta``. The reference is only rewritten while
    the header still has a defined nzyear.
    """
    keys = keys or ShiftKeys()
    for name in keys.boundary:
        header.set(name, header.get(name) + delta)
    if not reference.is_undefined and header.get("nzyear") != SAC_INT_UNDEF:
        shifted = datetime_add(reference, -delta)
        set_reference(header, shifted)
        LOGGER.info("Reference time %s -> %s", reference.isoformat(), shifted.isoformat())
    for name in keys.optional:
        v = header.get(name)
        if is_defined(v):
            header.set(name, v + delta)

def apply_plan(header: SacHeader, plan: EditPlan) -> DateTime:
    """Apply every pending edit to ``header`` in memory; returns the reference time as read."""
    tref = reference_of(header)

    for ed in plan.floats:
        if not ed.is_datetime:
            header.set_float(ed.index, ed.value)
        elif tref.is_undefined:
            LOGGER.warning("No reference time, %s left unchanged", ed.name)
        else:
            header.set_float(ed.index, ed.value - tref.epoch)
    for ed in plan.ints:
        header.set_int(ed.index, ed.value)
    for ed in plan.texts:
        header.set_text(ed.slot, ed.value, ed.width)

    if plan.reference is not None:
        set_reference(header, plan.reference)
        LOGGER.info("Reference time set to %s", plan.reference.isoformat())
    if plan.shift is not None:
        shift_all_times(header, plan.shift, tref, plan.options.shift_keys)
    return tref

def process_files(paths: Iterable[str], plan: EditPlan) -> List[str]:
    """Edit each file in turn; unreadable files are skipped."""
    done: List[str] = []
    for p in paths:
        try:
            hd = read_header(p)
        except FileReadError as e:
            LOGGER.warning("Skipping %s", e)
            continue
        apply_plan(hd, plan)
        write_header(p, hd)
        LOGGER.info("Updated %s", p)
        done.append(p)
    return done
