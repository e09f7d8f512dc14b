# -*- coding: utf-8 -*-
from ploidy.abc import DisplayAs1D


__all__ = ['SexRegistry']


class SexRegistry(DisplayAs1D):
    """Bidirectional mapping between sex category names and dense integer
    identifiers.

    Identifiers are assigned in order of first appearance, starting from 0,
    and are never reused or reassigned.

    Parameters
    ----------
    names : iterable of strings, optional
        Names to register up front, in order.

    Examples
    --------

    >>> from ploidy import SexRegistry
    >>> reg = SexRegistry()
    >>> reg.lookup_or_create('M')
    0
    >>> reg.lookup_or_create('F')
    1
    >>> reg.lookup_or_create('M')
    0
    >>> reg.lookup('U') is None
    True
    >>> reg.id_to_name(1)
    'F'
    >>> reg
    <SexRegistry n=2>
    M F

    """

    def __init__(self, names=None):
        self._id2name = []
        self._name2id = dict()
        if names is not None:
            for name in names:
                self.lookup_or_create(name)

    @property
    def caption(self):
        return '<SexRegistry n=%s>' % len(self)

    def str_items(self):
        return [str(n) for n in self._id2name]

    def __len__(self):
        return len(self._id2name)

    def __iter__(self):
        return iter(self._id2name)

    def __contains__(self, name):
        return name in self._name2id

    def __getitem__(self, item):
        if isinstance(item, slice):
            return SexRegistry(self._id2name[item])
        return self._id2name[item]

    @property
    def names(self):
        """Registered names, in identifier order."""
        return tuple(self._id2name)

    def count(self):
        """Number of registered categories."""
        return len(self._id2name)

    def lookup(self, name):
        """Return the identifier for `name`, or None if not registered."""
        return self._name2id.get(name)

    def lookup_or_create(self, name):
        """Return the identifier for `name`, registering it first if it has
        not been seen before."""
        sex_id = self._name2id.get(name)
        if sex_id is None:
            sex_id = len(self._id2name)
            self._id2name.append(name)
            self._name2id[name] = sex_id
        return sex_id

    def id_to_name(self, sex_id):
        """Return the name registered under `sex_id`, or None if out of
        range."""
        if sex_id < 0 or sex_id >= len(self._id2name):
            return None
        return self._id2name[sex_id]
