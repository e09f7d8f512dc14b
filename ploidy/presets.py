# -*- coding: utf-8 -*-
"""Built-in ploidy tables for common reference assemblies. Each maps regions
of the sex chromosomes and the mitochondrial genome to a ploidy for males (M)
and females (F); all other positions take the default ploidy."""


__all__ = ['PRESETS', 'PRESET_DESCRIPTIONS']


GRCh37 = """
X 1 60000 M 1
X 2699521 154931043 M 1
Y 1 59373566 M 1
Y 1 59373566 F 0
MT 1 16569 M 1
MT 1 16569 F 1
chrX 1 60000 M 1
chrX 2699521 154931043 M 1
chrY 1 59373566 M 1
chrY 1 59373566 F 0
chrM 1 16571 M 1
chrM 1 16571 F 1
"""

GRCh38 = """
chrX 1 9999 M 1
chrX 2781480 155701381 M 1
chrY 1 57227415 M 1
chrY 1 57227415 F 0
chrM 1 16569 M 1
chrM 1 16569 F 1
"""

X = """
X 1 2147483647 M 1
"""

Y = """
Y 1 2147483647 M 1
Y 1 2147483647 F 0
"""


PRESETS = {
    'GRCh37': GRCh37,
    'GRCh38': GRCh38,
    'X': X,
    'Y': Y,
}

PRESET_DESCRIPTIONS = {
    'GRCh37': 'Human genome reference assembly GRCh37 / hg19',
    'GRCh38': 'Human genome reference assembly GRCh38 / hg38',
    'X': 'Treat the contig X as haploid for males',
    'Y': 'Treat the contig Y as haploid for males and absent for females',
}
