# -*- coding: utf-8 -*-
# flake8: noqa

from .model import *

from .io.regions import RegionParseError, PloidyFormatError, parse_region, \
    parse_ploidy_line, iter_ploidy_file, iter_ploidy_string, ploidy_to_recarray, \
    ploidy_to_dataframe

from .presets import PRESETS, PRESET_DESCRIPTIONS

from .constants import HAPLOID, DIPLOID, DEFAULT_PLOIDY

from .version import version as __version__
