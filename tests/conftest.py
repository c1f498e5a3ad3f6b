"""Pytest fixtures: small synthetic SAC files written through obspy."""

from pathlib import Path

import numpy as np
import pytest
from obspy.io.sac import arrayio

from sacch.metadata import SacHeader


def make_header(byteorder="little", **values):
    hd = SacHeader.blank(byteorder)
    for k, v in values.items():
        hd.set(k, v)
    return hd


def write_sac(path, header, data):
    prefix = "<" if header.byteorder == "little" else ">"
    arrayio.write_sac(str(path), header.floats, header.ints, header.text,
                      np.asarray(data, dtype=prefix + "f4"), byteorder=header.byteorder)
    return Path(path)


REFERENCE = dict(nzyear=2010, nzjday=34, nzhour=10, nzmin=20, nzsec=30, nzmsec=0)


@pytest.fixture
def trace_data():
    return np.sin(np.linspace(0.0, 6.0, 100)).astype(np.float32)


@pytest.fixture
def sac_header():
    """Header with reference time 2010-02-03T10:20:30.000 and a few picks."""
    return make_header(delta=0.01, b=0.0, e=0.99, npts=100, a=12.5, t1=20.0,
                       iftype=1, leven=1, kstnm="ABC", **REFERENCE)


@pytest.fixture
def sac_file(tmp_path, sac_header, trace_data):
    return write_sac(tmp_path / "seis1.sac", sac_header, trace_data)


@pytest.fixture
def sac_file_big(tmp_path, trace_data):
    hd = make_header("big", delta=0.01, b=0.0, e=0.99, npts=100, **REFERENCE)
    return write_sac(tmp_path / "seis2.sac", hd, trace_data)
