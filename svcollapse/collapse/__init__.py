"""
Sub-package Documentation
==========================

The collapse sub-package is responsible for merging a cluster of redundant structural variant calls
(the same event reported by different tools or samples) into a single representative call.

Algorithm Overview
--------------------

- Select the most precise records (drop depth-only records when any record has other evidence)
- Merge the types (DEL + DUP become CNV) and summarize the breakpoints of the precise records
- Compute the length from the merged interval (mean length for insertions, -1 for breakends)
- Merge the reference and alternate alleles, unifying symbolic subtypes
- Merge the genotypes of each sample (max copies of each allele in any single genotype, max ploidy)
- Merge the attributes, the identifiers and the supporting algorithms

"""
from .collapser import SVCollapser
from .main import collapse_clusters
