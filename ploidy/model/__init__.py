# -*- coding: utf-8 -*-
from . import registry
from . import index
from . import table
from .registry import SexRegistry
from .index import RegionIndex
from .table import PloidyTable, PloidyQuery


__all__ = ['SexRegistry', 'RegionIndex', 'PloidyTable', 'PloidyQuery']
