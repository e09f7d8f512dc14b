# -*- coding: utf-8 -*-
import os


# noinspection PyUnresolvedReferences
from numpy.testing import assert_array_equal  # noqa: F401


def fixture_path(fn):
    return os.path.join(os.path.dirname(__file__), 'data', fn)
