# -*- coding: utf-8 -*-
import unittest


import numpy as np
import pytest


from ploidy.test.tools import assert_array_equal as aeq
from ploidy import RegionIndex


class RegionIndexTests(unittest.TestCase):

    def setup_instance(self):
        chrom = ['chr1', 'chr1', 'chr2', 'chr1', 'chr1']
        start = [100, 50, 1, 100, 150]
        end = [200, 120, 1000, 300, 150]
        return RegionIndex(chrom, start, end)

    def test_constructor(self):

        # data has wrong dimensions
        with pytest.raises(TypeError):
            RegionIndex([['chr1']], [[1]], [[2]])

        # positions are not integers
        with pytest.raises(TypeError):
            RegionIndex(['chr1'], [1.5], [2.5])

        # arrays not aligned
        with pytest.raises(ValueError):
            RegionIndex(['chr1', 'chr1'], [1], [2])

        # end before start
        with pytest.raises(ValueError):
            RegionIndex(['chr1'], [10], [5])

        idx = self.setup_instance()
        assert 5 == len(idx)
        assert (5,) == idx.shape
        assert ('chr1', 'chr2') == idx.chromosomes
        aeq([100, 50, 1, 100, 150], idx.start)
        assert ('chr2', 1, 1000) == idx[2]

    def test_empty(self):
        idx = RegionIndex.from_records([])
        assert 0 == len(idx)
        assert () == idx.chromosomes
        assert 0 == len(idx.locate_point('chr1', 1))

    def test_from_records(self):
        idx = RegionIndex.from_records([('chrX', 1, 60000), ('chrY', 1, 100)])
        assert 2 == len(idx)
        aeq([0], idx.locate_point('chrX', 60000))
        aeq([1], idx.locate_point('chrY', 1))

    def test_locate_point(self):
        idx = self.setup_instance()

        # sorted by start, then end descending, ties in input order
        aeq([1, 3, 0], idx.locate_point('chr1', 110))
        aeq([3, 0, 4], idx.locate_point('chr1', 150))
        aeq([3, 0], idx.locate_point('chr1', 200))
        aeq([3], idx.locate_point('chr1', 201))
        aeq([2], idx.locate_point('chr2', 500))

        # inclusive at both ends
        aeq([1], idx.locate_point('chr1', 50))
        aeq([1, 3, 0], idx.locate_point('chr1', 120))
        aeq([3], idx.locate_point('chr1', 300))

        # no overlap
        assert 0 == len(idx.locate_point('chr1', 49))
        assert 0 == len(idx.locate_point('chr1', 301))
        assert 0 == len(idx.locate_point('chr3', 100))

    def test_locate_point_identical_coordinates(self):
        idx = RegionIndex(['chrX'] * 3, [1, 1, 1], [100, 100, 100])
        aeq([0, 1, 2], idx.locate_point('chrX', 50))

    def test_locate_point_numpy_position(self):
        idx = self.setup_instance()
        aeq([3, 0, 4], idx.locate_point('chr1', np.int64(150)))

    def test_slice(self):
        idx = self.setup_instance()
        sub = idx[1:3]
        assert isinstance(sub, RegionIndex)
        assert 2 == len(sub)
        assert ('chr1', 'chr2') == sub.chromosomes

    def test_display(self):
        idx = RegionIndex(['chr1', 'chr2'], [1, 5], [10, 50])
        assert '<RegionIndex shape=(2,)>\nchr1:1-10 chr2:5-50' == repr(idx)
