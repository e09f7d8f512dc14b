# -*- coding: utf-8 -*-

# ploidy
HAPLOID = 1
DIPLOID = 2
DEFAULT_PLOIDY = DIPLOID

# coordinates
MAX_COORDINATE = 2**31 - 1

# input
COMMENT_CHAR = '#'
