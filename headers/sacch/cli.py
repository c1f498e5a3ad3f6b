# sacch: change the values of selected SAC header fields in place.
import argparse
import glob
import logging
import os
import sys

from . import __version__
from .engine import build_plan, process_files
from .errors import DatetimeParseError, FieldValueError, FileWriteError, UnknownFieldError

LOGGER = logging.getLogger(__name__)

USAGE_NOTES = """\
Notes:
   1. keys are sac head fields, like npts, evla
   2. values are integers, floats or strings
   3. key=undef to set key to undefined value
   4. DATETIME format: yyyy-mm-ddThh:mm:ss.mmm
   5. time offset variables (b, e, o, a, f, t0-t9) can use value
      in DATETIME format
   6. allt: add seconds to all defined header times,
      and subtract seconds from reference time

Examples:
   sacch stla=10.2 stlo=20.2 kstnm=COLA seis1 seis2
   sacch time=2010-02-03T10:20:35.200 seis1 seis2
   sacch t7=2010-02-03T10:20:30.000 seis1
   sacch t9=undef kt9=undef seis*
   sacch allt=10.23 seis*
"""

def _split_args(args):
    pairs, files = [], []
    for a in args:
        if "=" in a:
            key, value = a.split("=", 1)
            pairs.append((key, value))
        else:
            files.append(a)
    return pairs, files

def _gather_paths(names):
    # expand wildcards the shell left alone (e.g. on Windows)
    paths = []
    for name in names:
        if not os.path.exists(name) and any(c in name for c in "*?["):
            matched = sorted(glob.glob(name))
            if matched:
                paths.extend(matched)
                continue
        paths.append(name)
    return paths

def build_parser():
    ap = argparse.ArgumentParser(
        prog="sacch",
        description="Change the value of selected head fields of SAC files.",
        usage="%(prog)s key1=value1 key2=value2 ... sacfiles\n"
              "       %(prog)s time=DATETIME sacfiles\n"
              "       %(prog)s allt=value sacfiles",
        epilog=USAGE_NOTES,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("args", nargs="*", metavar="key=value|sacfile")
    verb = ap.add_mutually_exclusive_group()
    verb.add_argument("-v", "--verbose", action="store_true", help="Report every file written.")
    verb.add_argument("-q", "--quiet", action="store_true", help="Only report errors.")
    ap.add_argument("--version", action="version", version="%(prog)s " + __version__)
    return ap

def setup_logging(verbose=False, quiet=False):
    level = logging.INFO if verbose else (logging.ERROR if quiet else logging.WARNING)
    logging.basicConfig(level=level, format="%(name)s: %(levelname)s: %(message)s",
                        stream=sys.stderr)

def main(argv=None):
    ap = build_parser()
    args = ap.parse_intermixed_args(argv)
    setup_logging(args.verbose, args.quiet)

    pairs, files = _split_args(args.args)
    try:
        plan = build_plan(pairs)
    except (UnknownFieldError, DatetimeParseError, FieldValueError) as e:
        print(e, file=sys.stderr)
        return 1

    if plan.empty or not files:
        ap.print_help(sys.stderr)
        return 1

    try:
        done = process_files(_gather_paths(files), plan)
    except FileWriteError as e:
        print(e, file=sys.stderr)
        return 1
    LOGGER.info("%d file(s) updated", len(done))
    return 0

if __name__ == "__main__":
    sys.exit(main())
