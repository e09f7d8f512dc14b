# -*- coding: utf-8 -*-
from collections import OrderedDict


# third-party imports
import numpy as np


# internal imports
from ploidy.util import asarray_ndim, check_dim0_aligned, check_integer_dtype
from ploidy.abc import DisplayAs1D


__all__ = ['RegionIndex']


class RegionIndex(DisplayAs1D):
    """Index of genomic regions from one or more chromosomes/contigs,
    supporting point overlap queries.

    Parameters
    ----------
    chrom : array_like
        Chromosome values.
    start : array_like, int
        Region start positions.
    end : array_like, int
        Region end positions, **inclusive**.
    copy : bool, optional
        If True, inputs will be copied into new arrays.

    Notes
    -----
    Regions may overlap arbitrarily and need not be sorted. Within each
    chromosome, overlapping regions are reported sorted by start ascending,
    then by end descending; regions with identical coordinates are reported
    in the order they were given.

    Examples
    --------

    >>> from ploidy import RegionIndex
    >>> chrom = ['chrX', 'chrX', 'chrY', 'chrX']
    >>> start = [2699521, 1, 1, 1]
    >>> end = [154931043, 60000, 59373566, 60000]
    >>> idx = RegionIndex(chrom, start, end)
    >>> idx
    <RegionIndex shape=(4,)>
    chrX:2699521-154931043 chrX:1-60000 chrY:1-59373566 chrX:1-60000
    >>> idx.locate_point('chrX', 100)
    array([1, 3])
    >>> idx.locate_point('chrX', 60001)
    array([], dtype=int64)
    >>> idx.locate_point('chr1', 100)
    array([], dtype=int64)

    """

    def __init__(self, chrom, start, end, copy=False):
        chrom = asarray_ndim(chrom, 1, dtype=object)
        start = asarray_ndim(start, 1)
        end = asarray_ndim(end, 1)
        check_integer_dtype(start)
        check_integer_dtype(end)
        check_dim0_aligned(chrom, start, end)
        if copy:
            chrom, start, end = chrom.copy(), start.copy(), end.copy()
        if np.any(end < start):
            raise ValueError('region end must not be less than region start')
        self.chrom = chrom
        self.start = start
        self.end = end

        # group records by chromosome, preserving first appearance
        groups = OrderedDict()
        for i, c in enumerate(chrom):
            groups.setdefault(c, []).append(i)

        # sort each chromosome by start, then end descending; lexsort is stable
        self._chrom_index = OrderedDict()
        for c, loc in groups.items():
            loc = np.array(loc, dtype=np.intp)
            s = start[loc]
            e = end[loc]
            order = np.lexsort((-e, s))
            self._chrom_index[c] = (s[order], e[order], loc[order])

    @classmethod
    def from_records(cls, records):
        """Build an index from an iterable of (chrom, start, end) tuples."""
        records = list(records)
        if not records:
            return cls(np.zeros(0, dtype=object), np.zeros(0, dtype=np.int64),
                       np.zeros(0, dtype=np.int64))
        chrom, start, end = zip(*records)
        return cls(chrom, start, end)

    @property
    def caption(self):
        return '<RegionIndex shape=(%s,)>' % len(self)

    def str_items(self):
        return ['%s:%s-%s' % (c, s, e) for c, s, e in zip(self.chrom, self.start, self.end)]

    def __len__(self):
        return len(self.chrom)

    def __getitem__(self, item):
        if isinstance(item, (int, np.integer)):
            return self.chrom[item], self.start[item], self.end[item]
        return RegionIndex(self.chrom[item], self.start[item], self.end[item])

    @property
    def shape(self):
        return len(self),

    @property
    def chromosomes(self):
        """Chromosomes with at least one region, in order of first appearance."""
        return tuple(self._chrom_index.keys())

    def locate_point(self, chrom, pos):
        """Locate all regions overlapping a single position.

        Parameters
        ----------
        chrom : object
            Chromosome or contig.
        pos : int
            Position, in the same coordinate system as the regions.

        Returns
        -------
        loc : ndarray, int
            Indices of overlapping regions in index order. Empty if no region
            overlaps or the chromosome is not indexed.

        """

        try:
            starts, ends, indices = self._chrom_index[chrom]
        except KeyError:
            return np.zeros(0, dtype=np.intp)

        # regions starting at or before pos are candidates
        stop = np.searchsorted(starts, pos, side='right')
        hit = ends[:stop] >= pos
        return indices[:stop][hit]
