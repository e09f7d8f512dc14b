# -*- coding: utf-8 -*-
import logging
from collections import namedtuple


# third-party imports
import numpy as np


# internal imports
from ploidy.constants import DEFAULT_PLOIDY
from ploidy.util import asarray_ndim, check_ndim, check_shape, check_integer_dtype
from ploidy.io.regions import iter_ploidy_file, iter_ploidy_string, RegionParseError
from ploidy.presets import PRESETS
from .index import RegionIndex
from .registry import SexRegistry


logger = logging.getLogger(__name__)
debug = logger.debug


__all__ = ['PloidyTable', 'PloidyQuery']


PloidyQuery = namedtuple('PloidyQuery', 'found sex2ploidy min max')


class PloidyTable(object):
    """Table of genomic regions annotated with a ploidy per sex category.

    Parameters
    ----------
    records : iterable of tuples, optional
        (chrom, start, end, sex, ploidy) records, e.g., as produced by
        :func:`ploidy.io.iter_ploidy_file`. Coordinates are 1-based and
        inclusive.
    default : int, optional
        Ploidy at positions not covered by any region.

    Notes
    -----
    Sex categories are registered in order of first appearance in `records`.
    A region may appear several times with different sex categories, and
    regions may overlap.

    The table is not thread-safe: queries may run concurrently only if
    :meth:`add_sex` is not called at the same time.

    Examples
    --------

    >>> from ploidy import PloidyTable
    >>> table = PloidyTable.from_string('''
    ...     chrX 1 155270560 M 1
    ...     chrX 1 155270560 F 2
    ... ''', default=2)
    >>> table
    <PloidyTable n_records=2 n_sexes=2 default=2>
    >>> table.query('chrX', 5000)
    PloidyQuery(found=True, sex2ploidy=array([1, 2]), min=1, max=1)
    >>> table.query('chr1', 5000)
    PloidyQuery(found=False, sex2ploidy=array([2, 2]), min=2, max=2)

    """

    def __init__(self, records=(), default=DEFAULT_PLOIDY):
        self._default = int(default)
        self._min = self._default
        self._max = self._default
        self._registry = SexRegistry()

        chrom = []
        start = []
        end = []
        sex = []
        ploidy = []
        for c, s, e, x, p in records:
            p = int(p)
            sex.append(self._registry.lookup_or_create(x))
            # observed bounds include records equal to the default
            if p < self._min:
                self._min = p
            if p > self._max:
                self._max = p
            chrom.append(c)
            start.append(s)
            end.append(e)
            ploidy.append(p)

        self._regions = RegionIndex(np.array(chrom, dtype=object),
                                    np.array(start, dtype=np.int64),
                                    np.array(end, dtype=np.int64))
        self._sex = np.array(sex, dtype=np.intp)
        self._ploidy = np.array(ploidy, dtype=np.int64)

        debug('ploidy table: %s records, %s sex categories, ploidy range %s-%s',
              len(self._ploidy), len(self._registry), self.min_ploidy(),
              self.max_ploidy())

    @classmethod
    def from_file(cls, path, default=DEFAULT_PLOIDY):
        """Build a ploidy table from a file.

        Parameters
        ----------
        path : string or path-like
            Path to a ploidy table file. May be gzip-compressed.
        default : int, optional
            Ploidy at positions not covered by any region.

        Returns
        -------
        table : PloidyTable or None
            None if the file could not be read or contains a line with
            malformed coordinates.

        Raises
        ------
        PloidyFormatError
            If a line has a missing or malformed sex or ploidy field.

        """
        try:
            records = list(iter_ploidy_file(path))
        except (OSError, UnicodeDecodeError, RegionParseError) as e:
            logger.warning('could not load ploidy table %r: %s', path, e)
            return None
        return cls(records, default=default)

    @classmethod
    def from_string(cls, text, default=DEFAULT_PLOIDY):
        """Build a ploidy table from a string holding one region per line.
        Lines with malformed coordinates are skipped."""
        return cls(iter_ploidy_string(text), default=default)

    @classmethod
    def from_preset(cls, name, default=DEFAULT_PLOIDY):
        """Build a ploidy table from one of the built-in presets, see
        :data:`ploidy.presets.PRESETS`."""
        return cls.from_string(PRESETS[name], default=default)

    def __repr__(self):
        if self.closed:
            return '<PloidyTable closed>'
        return '<PloidyTable n_records=%s n_sexes=%s default=%s>' % \
            (len(self), self.sex_count(), self._default)

    def __len__(self):
        self._check_open()
        return len(self._ploidy)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    @property
    def closed(self):
        return self._regions is None

    def close(self):
        """Release the region index and sex registry."""
        self._regions = None
        self._registry = None
        self._sex = None
        self._ploidy = None

    def _check_open(self):
        if self.closed:
            raise ValueError('ploidy table is closed')

    @property
    def default(self):
        """Ploidy at positions not covered by any region."""
        return self._default

    @property
    def regions(self):
        """The underlying :class:`RegionIndex`."""
        self._check_open()
        return self._regions

    @property
    def registry(self):
        """The underlying :class:`SexRegistry`."""
        self._check_open()
        return self._registry

    @property
    def sexes(self):
        """Registered sex category names, in identifier order."""
        self._check_open()
        return self._registry.names

    @property
    def n_records(self):
        return len(self)

    @property
    def n_sexes(self):
        return self.sex_count()

    def sex_count(self):
        """Number of registered sex categories."""
        self._check_open()
        return self._registry.count()

    def id_to_sex(self, sex_id):
        """Sex category name for `sex_id`, or None if not registered."""
        self._check_open()
        return self._registry.id_to_name(sex_id)

    def sex_to_id(self, sex):
        """Identifier for sex category `sex`, or None if not registered."""
        self._check_open()
        return self._registry.lookup(sex)

    def add_sex(self, sex):
        """Register a sex category without adding regions, returning its
        identifier. Registering an existing name returns its identifier
        unchanged."""
        self._check_open()
        return self._registry.lookup_or_create(sex)

    def min_ploidy(self):
        """Smallest ploidy in the table, including the default."""
        return min(self._default, self._min)

    def max_ploidy(self):
        """Largest ploidy in the table, including the default."""
        return max(self._default, self._max)

    def overlaps(self, chrom, pos):
        """True if any region overlaps position `pos` on `chrom`."""
        self._check_open()
        return len(self._regions.locate_point(chrom, pos)) > 0

    def query(self, chrom, pos, out=None):
        """Resolve the ploidy at a single position.

        Parameters
        ----------
        chrom : object
            Chromosome or contig.
        pos : int
            Position, 1-based, in the same coordinate system as the file.
            Note this is one more than the 0-based position used by VCF
            readers that report POS - 1, e.g., htslib.
        out : ndarray, int, shape (n_sexes,), optional
            Array to fill with the ploidy of each sex category.

        Returns
        -------
        result : PloidyQuery
            Named tuple with fields `found` (True if any region overlaps),
            `sex2ploidy` (ploidy per sex category, indexed by identifier),
            `min` and `max` (bounds of the non-default ploidies at this
            position, or the default if there are none).

        Notes
        -----
        Regions whose ploidy equals the default do not change the result. If
        several overlapping regions give a ploidy for the same sex category,
        the last one in index order wins.

        """

        self._check_open()
        dflt = self._default
        n_sexes = self._registry.count()

        if out is None:
            sex2ploidy = np.full(n_sexes, dflt, dtype=int)
        else:
            if not isinstance(out, np.ndarray):
                raise TypeError('out must be a numpy array, found %r' % type(out))
            check_ndim(out, 1)
            check_shape(out, (n_sexes,))
            check_integer_dtype(out)
            out.fill(dflt)
            sex2ploidy = out

        loc = self._regions.locate_point(chrom, pos)
        if len(loc) == 0:
            return PloidyQuery(False, sex2ploidy, dflt, dflt)

        ploidy = self._ploidy[loc]
        sex = self._sex[loc]
        non_default = ploidy != dflt
        if not np.any(non_default):
            return PloidyQuery(True, sex2ploidy, dflt, dflt)

        # sequential assignment so the last region wins for repeated sexes
        for x, p in zip(sex[non_default], ploidy[non_default]):
            sex2ploidy[x] = p
        return PloidyQuery(True, sex2ploidy, int(ploidy[non_default].min()),
                           int(ploidy[non_default].max()))

    def query_positions(self, chrom, positions):
        """Resolve the ploidy at many positions on one chromosome.

        Parameters
        ----------
        chrom : object
            Chromosome or contig.
        positions : array_like, int, shape (n_positions,)
            Positions, 1-based.

        Returns
        -------
        result : PloidyQuery
            Named tuple of arrays: `found` with shape (n_positions,),
            `sex2ploidy` with shape (n_positions, n_sexes), `min` and `max`
            with shape (n_positions,). Each row matches :meth:`query`.

        """

        self._check_open()
        positions = asarray_ndim(positions, 1)
        if positions.size > 0:
            check_integer_dtype(positions)
        n_positions = positions.shape[0]
        n_sexes = self._registry.count()

        found = np.zeros(n_positions, dtype=bool)
        sex2ploidy = np.empty((n_positions, n_sexes), dtype=int)
        pmin = np.empty(n_positions, dtype=int)
        pmax = np.empty(n_positions, dtype=int)
        for i, pos in enumerate(positions):
            r = self.query(chrom, pos, out=sex2ploidy[i])
            found[i] = r.found
            pmin[i] = r.min
            pmax[i] = r.max

        return PloidyQuery(found, sex2ploidy, pmin, pmax)

    def ploidy_of(self, chrom, pos, sex):
        """Ploidy at a single position for one sex category, given by name
        or identifier."""
        self._check_open()
        if isinstance(sex, str):
            sex_id = self._registry.lookup(sex)
        else:
            sex_id = int(sex)
            if self._registry.id_to_name(sex_id) is None:
                sex_id = None
        if sex_id is None:
            raise KeyError(sex)
        return int(self.query(chrom, pos).sex2ploidy[sex_id])

    def to_records(self):
        """Parsed records as a NumPy recarray with fields chrom, start, end,
        sex and ploidy, in input order."""
        self._check_open()
        names = np.array(self._registry.names, dtype=object)
        return np.rec.fromarrays(
            [self._regions.chrom, self._regions.start, self._regions.end,
             names[self._sex], self._ploidy],
            names=['chrom', 'start', 'end', 'sex', 'ploidy']
        )

    def to_dataframe(self, **kwargs):
        """Parsed records as a pandas DataFrame."""
        import pandas
        return pandas.DataFrame.from_records(self.to_records(), **kwargs)
