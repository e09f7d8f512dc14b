# -*- coding: utf-8 -*-
"""
Parse ploidy region tables.

A ploidy table is plain text with one region per line::

    <chrom> <start> <end> <sex> <ploidy> [ignored...]

Fields are separated by whitespace. Coordinates are 1-based and inclusive.
Blank lines and lines starting with '#' are skipped.

"""
import logging
import re


import numpy as np


from ploidy.constants import COMMENT_CHAR, MAX_COORDINATE
from ploidy.util import open_text


logger = logging.getLogger(__name__)


__all__ = ['RegionParseError', 'PloidyFormatError', 'parse_region', 'parse_ploidy_line',
           'iter_ploidy_file', 'iter_ploidy_string', 'ploidy_to_recarray',
           'ploidy_to_dataframe']


_re_coordinate = re.compile(r'[0-9]+')
_re_int_prefix = re.compile(r'[+-]?[0-9]+')
_re_line_break = re.compile(r'[\r\n]+')


class RegionParseError(ValueError):
    """Raised when the chromosome or coordinate fields of a line are
    malformed. Loaders may reject or skip the line."""


class PloidyFormatError(ValueError):
    """Raised when the sex or ploidy fields of a line are missing or
    malformed. Always aborts loading."""


def parse_region(line):
    """Parse the chromosome, start and end fields of a line.

    Parameters
    ----------
    line : string
        Input line.

    Returns
    -------
    region : tuple or None
        (chrom, start, end), or None if the line is blank or a comment. A line
        holding only a chromosome name covers the whole chromosome. If the end
        field is missing or not an integer, the region is a single position.

    Raises
    ------
    RegionParseError
        If the start is not a non-negative integer, or the end is less than
        the start.

    """

    fields = line.split()
    if not fields or fields[0].startswith(COMMENT_CHAR):
        return None

    chrom = fields[0]
    if len(fields) == 1:
        return chrom, 0, MAX_COORDINATE

    if not _re_coordinate.fullmatch(fields[1]):
        raise RegionParseError('could not parse region: %s' % line.rstrip('\r\n'))
    start = int(fields[1])

    if len(fields) > 2 and _re_coordinate.fullmatch(fields[2]):
        end = int(fields[2])
    else:
        end = start
    if end < start:
        raise RegionParseError('region end is less than start: %s' % line.rstrip('\r\n'))

    return chrom, start, end


def parse_ploidy_line(line):
    """Parse one line of a ploidy table.

    Parameters
    ----------
    line : string
        Input line.

    Returns
    -------
    record : tuple or None
        (chrom, start, end, sex, ploidy), or None if the line is blank or a
        comment.

    Raises
    ------
    RegionParseError
        If the coordinate fields are malformed.
    PloidyFormatError
        If the sex or ploidy field is missing, or the ploidy is not a
        non-negative integer.

    Examples
    --------

    >>> from ploidy.io.regions import parse_ploidy_line
    >>> parse_ploidy_line('chrX\\t2699521\\t154931043\\tM\\t1\\n')
    ('chrX', 2699521, 154931043, 'M', 1)
    >>> parse_ploidy_line('# comment') is None
    True

    """

    region = parse_region(line)
    if region is None:
        return None
    chrom, start, end = region

    text = line.rstrip('\r\n')
    fields = line.split()
    if len(fields) < 4:
        raise PloidyFormatError('wrong number of fields, could not parse: %s' % text)
    sex = fields[3]
    if len(fields) < 5:
        raise PloidyFormatError('could not parse: %s' % text)

    # base-10 integer prefix, trailing characters ignored
    m = _re_int_prefix.match(fields[4])
    if m is None:
        raise PloidyFormatError('could not parse: %s' % text)
    ploidy = int(m.group())
    if ploidy < 0:
        raise PloidyFormatError('negative ploidy, could not parse: %s' % text)

    return chrom, start, end, sex, ploidy


def _iter_ploidy_lines(lines, skip_invalid, source):
    for line in lines:
        try:
            rec = parse_ploidy_line(line)
        except RegionParseError as e:
            if not skip_invalid:
                raise
            logger.warning('%s: skipping line; %s', source, e)
            continue
        if rec is not None:
            yield rec


def iter_ploidy_file(path, skip_invalid=False):
    """Iterate over records in a ploidy table file.

    Parameters
    ----------
    path : string
        Path to input file. May be gzip-compressed.
    skip_invalid : bool, optional
        If True, skip lines with malformed coordinates instead of raising.

    Returns
    -------
    Iterator of (chrom, start, end, sex, ploidy) tuples.

    """

    with open_text(path) as f:
        for rec in _iter_ploidy_lines(f, skip_invalid, path):
            yield rec


def iter_ploidy_string(text, skip_invalid=True):
    """Iterate over records in a ploidy table held in a string, e.g., a
    built-in preset.

    Parameters
    ----------
    text : string
        Ploidy table, one region per line. Leading whitespace on each line is
        ignored.
    skip_invalid : bool, optional
        If True, skip lines with malformed coordinates instead of raising.

    Returns
    -------
    Iterator of (chrom, start, end, sex, ploidy) tuples.

    """

    segments = (s.lstrip() for s in _re_line_break.split(text))
    lines = (s for s in segments if s)
    for rec in _iter_ploidy_lines(lines, skip_invalid, '<string>'):
        yield rec


def ploidy_to_recarray(path, skip_invalid=False):
    """Load a ploidy table file into a NumPy recarray.

    Parameters
    ----------
    path : string
        Path to input file.
    skip_invalid : bool, optional
        If True, skip lines with malformed coordinates instead of raising.

    Returns
    -------
    np.recarray

    """

    recs = list(iter_ploidy_file(path, skip_invalid=skip_invalid))

    if not recs:
        return None

    dtype = [('chrom', object),
             ('start', np.int64),
             ('end', np.int64),
             ('sex', object),
             ('ploidy', np.int32)]
    return np.rec.fromrecords(recs, dtype=dtype)


def ploidy_to_dataframe(path, skip_invalid=False, **kwargs):
    """Load a ploidy table file into a pandas DataFrame.

    Parameters
    ----------
    path : string
        Path to input file.
    skip_invalid : bool, optional
        If True, skip lines with malformed coordinates instead of raising.

    Returns
    -------
    pandas.DataFrame

    """

    import pandas

    recs = list(iter_ploidy_file(path, skip_invalid=skip_invalid))
    columns = ['chrom', 'start', 'end', 'sex', 'ploidy']
    return pandas.DataFrame.from_records(recs, columns=columns, **kwargs)
