"""Change the values of selected SAC header fields in place."""
__version__ = "0.2.0"

from .config import SAC_FLOAT_UNDEF, SAC_INT_UNDEF, SAC_CHAR8_UNDEF, SAC_CHAR16_UNDEF
from .datetimes import DateTime, parse_datetime, reference_of, datetime_add
from .engine import EditPlan, build_plan, apply_plan, process_files
from .errors import (SacchError, UnknownFieldError, DatetimeParseError,
                     FieldValueError, FileReadError, FileWriteError)
from .fields import classify, lookup
from .metadata import SacHeader, read_header, write_header
