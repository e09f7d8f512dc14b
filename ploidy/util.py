# -*- coding: utf-8 -*-
import gzip
import os


import numpy as np


def asarray_ndim(a, *ndims, **kwargs):
    """Ensure numpy array.

    Parameters
    ----------
    a : array_like
    *ndims : int, optional
        Allowed values for number of dimensions.
    **kwargs
        Passed through to :func:`numpy.asarray`.

    Returns
    -------
    a : numpy.ndarray

    """
    allow_none = kwargs.pop('allow_none', False)
    if a is None and allow_none:
        return None
    a = np.asarray(a, **kwargs)
    if a.ndim not in ndims:
        if len(ndims) > 1:
            expect_str = 'one of %s' % str(ndims)
        else:
            # noinspection PyUnresolvedReferences
            expect_str = '%s' % ndims[0]
        raise TypeError('bad number of dimensions: expected %s; found %s' %
                        (expect_str, a.ndim))
    return a


def check_ndim(a, ndim):
    if a.ndim != ndim:
        raise TypeError('bad number of dimensions: expected %s; found %s' % (ndim, a.ndim))


def check_shape(a, shape):
    if a.shape != shape:
        raise ValueError('bad shape: expected %s; found %s' % (shape, a.shape))


def check_dtype_kind(a, *kinds):
    if a.dtype.kind not in kinds:
        raise TypeError('bad dtype kind: expected on of %s; found %s' % (kinds, a.dtype.kind))


def check_integer_dtype(a):
    check_dtype_kind(a, 'u', 'i')


def check_dim0_aligned(*arrays):
    a = arrays[0]
    for b in arrays[1:]:
        if b.shape[0] != a.shape[0]:
            raise ValueError(
                'arrays do not have matching length for dimension 0'
            )


def open_text(path):
    """Open a plain or gzip-compressed text file for reading.

    Parameters
    ----------
    path : string or path-like
        Path to input file. Files ending with '.gz' or '.bgz' are
        decompressed on the fly.

    Returns
    -------
    f : text file object

    """
    path = os.fspath(path)
    if path.endswith('.gz') or path.endswith('.bgz'):
        return gzip.open(path, mode='rt', encoding='utf-8')
    return open(path, mode='r', encoding='utf-8')
