import functools
import itertools

import numpy as np

from ..allele import (
    REF_N,
    create_symbolic_allele,
    get_symbolic_allele_base_symbol,
    has_symbolic_subtype,
    is_alt_allele,
    sort_alleles,
)
from ..constants import (
    ALGORITHM,
    BREAKPOINT_STRATEGY,
    CLUSTER_MEMBER_IDS_KEY,
    COPY_NUMBER_TYPES,
    SVTYPE,
)
from ..error import IncompatibleTypeError, InvalidClusterError
from ..record import CallRecord, Genotype
from ..util import DEVNULL, LOG
from .constants import DEFAULTS


def round_half_up(value):
    """
    Example:
        >>> round_half_up(1005.5)
        1006
        >>> round_half_up(-0.5)
        0
    """
    return int(np.floor(value + 0.5))


def upper_median(values):
    """
    the median of a set of integers. For an even number of values the larger of the two middle values is used

    Example:
        >>> upper_median([1001, 1011])
        1011
    """
    values = np.sort(np.asarray(values))
    return int(values[len(values) // 2])


def unique(items):
    """
    remove duplicates while preserving the input order
    """
    result = []
    for item in items:
        if item not in result:
            result.append(item)
    return result


def reduce_types(first, second):
    """
    merge two structural variant types. Deletions, duplications and CNVs merge to CNV, any other
    type may only be merged with itself

    Raises:
        IncompatibleTypeError: the types cannot be represented by a single type

    Example:
        >>> reduce_types(SVTYPE.DEL, SVTYPE.DUP)
        'CNV'
    """
    if first == second:
        return first
    if first in COPY_NUMBER_TYPES and second in COPY_NUMBER_TYPES:
        return SVTYPE.CNV
    raise IncompatibleTypeError('cannot collapse incompatible structural variant types', first, second)


def collapse_attributes(attribute_maps):
    """
    merge attribute maps. The key set is the union of all input keys. Where the inputs which have a given
    key do not all agree on its value the value is set to None. Inputs missing a key are ignored for that key

    Example:
        >>> collapse_attributes([{'GQ': 30, 'KEY2': 'VALUE2'}, {'GQ': 30}])
        {'GQ': 30, 'KEY2': 'VALUE2'}
        >>> collapse_attributes([{'GQ': 30}, {'GQ': 45}])
        {'GQ': None}
    """
    values_by_key = {}
    for attributes in attribute_maps:
        for key, value in attributes.items():
            values_by_key.setdefault(key, []).append(value)
    result = {}
    for key, values in values_by_key.items():
        if all([value == values[0] for value in values[1:]]):
            result[key] = values[0]
        else:
            result[key] = None
    return result


class SVCollapser:
    """
    collapses a cluster of equivalent call records into a single representative call
    """

    def __init__(self, strategy=DEFAULTS.breakpoint_summary_strategy, verbose=False):
        """
        Args:
            strategy (BREAKPOINT_STRATEGY): how the start and end positions of the cluster are summarized
            verbose (bool): log each collapsed cluster
        """
        self.strategy = BREAKPOINT_STRATEGY.enforce(strategy)
        self.log = LOG if verbose else DEVNULL

    @staticmethod
    def _check_items(items):
        items = list(items)
        if not items:
            raise InvalidClusterError('cannot collapse an empty cluster')
        return items

    def collapse(self, items):
        """
        Args:
            items (List[CallRecord]): the records of the cluster, all judged to represent the same event

        Returns:
            CallRecord: the merged record
        """
        items = self._check_items(items)
        first = items[0]
        svtype = self.collapse_types(items)
        most_precise = self.get_most_precise_calls(items)
        start, end = self.collapse_interval(most_precise, svtype)
        length = self.collapse_length(most_precise, start, end, svtype)

        ref_allele = self.collapse_ref_alleles(items)
        alt_alleles = self.collapse_alt_alleles(items, svtype)
        alleles = ([ref_allele] if ref_allele is not None else []) + alt_alleles

        result = CallRecord(
            self.collapse_ids(items),
            first.chr1,
            start,
            first.chr2,
            end,
            svtype,
            length=length,
            algorithms=self.collapse_algorithms(items),
            alleles=alleles,
            genotypes=self.collapse_genotypes(items, ref_allele, alt_alleles),
            attributes=self.collapse_variant_attributes(items),
        )
        self.log('collapsed', len(items), 'records into', result)
        with self.log.indent() as log:
            log('precise records:', len(most_precise), 'alleles:', alleles)
        return result

    def get_most_precise_calls(self, items):
        """
        depth-only calls have less precise breakpoints than calls supported by any other evidence. Returns
        the calls with non-depth evidence or all calls if every call is depth-only
        """
        items = self._check_items(items)
        non_depth = [item for item in items if set(item.algorithms) != {ALGORITHM.DEPTH}]
        if non_depth:
            return non_depth
        return items

    def _summarize_positions(self, positions, is_start):
        if self.strategy == BREAKPOINT_STRATEGY.MEDIAN_START_MEDIAN_END:
            return upper_median(positions)
        elif self.strategy == BREAKPOINT_STRATEGY.MIN_START_MAX_END:
            return min(positions) if is_start else max(positions)
        elif self.strategy == BREAKPOINT_STRATEGY.MAX_START_MIN_END:
            return max(positions) if is_start else min(positions)
        elif self.strategy == BREAKPOINT_STRATEGY.MEAN_START_MEAN_END:
            return round_half_up(np.mean(positions))
        raise NotImplementedError('unsupported breakpoint summary strategy', self.strategy)

    def collapse_interval(self, items, svtype=None):
        """
        summarize the start and end of the cluster using the breakpoint summary strategy

        Note:
            insertions collapse to a single position, the midpoint of the summarized start and end

        Returns:
            Tuple[int, int]: the start and end positions
        """
        items = self._check_items(items)
        if svtype is None:
            svtype = self.collapse_types(items)
        start = self._summarize_positions([item.start for item in items], True)
        end = self._summarize_positions([item.end for item in items], False)
        if svtype == SVTYPE.INS:
            center = round_half_up((start + end) / 2)
            return center, center
        return start, end

    def collapse_types(self, items):
        items = self._check_items(items)
        return functools.reduce(reduce_types, [item.svtype for item in items])

    def collapse_length(self, items, start, end, svtype):
        """
        Returns:
            int: the length of the merged event. -1 for breakends and other interchromosomal events. The mean length
            for insertions. Otherwise the length of the merged interval
        """
        items = self._check_items(items)
        if svtype == SVTYPE.BND or items[0].interchromosomal:
            return -1
        elif svtype == SVTYPE.INS:
            lengths = [item.length for item in items if item.length is not None]
            if lengths:
                return round_half_up(np.mean(lengths))
        return end - start + 1

    def collapse_ref_alleles(self, items):
        """
        Returns:
            Allele: the common reference allele, N if the inputs disagree, or None if no input has a reference allele
        """
        alleles = unique(itertools.chain.from_iterable([item.ref_alleles for item in items]))
        alleles = [allele for allele in alleles if not allele.is_no_call]
        if not alleles:
            return None
        elif len(alleles) == 1:
            return alleles[0]
        return REF_N

    def collapse_alt_alleles(self, items, svtype):
        """
        collect the alternate alleles observed on the genotypes of all records. Symbolic alleles whose
        class matches the merged type are unified: one subtyped allele (ex. ``<INS:MEI>``) is kept as-is
        while conflicting subtypes collapse to the generic class symbol (ex. ``<INS>``). CNVs are described
        by the generic symbols of their classes

        Returns:
            List[Allele]: sorted alternate alleles
        """
        alleles = []
        for item in items:
            for genotype in item.genotypes.values():
                alleles.extend(genotype.alleles)
        alleles = unique([allele for allele in alleles if is_alt_allele(allele)])
        if len(alleles) <= 1:
            return alleles

        if svtype == SVTYPE.CNV:
            result = []
            for allele in alleles:
                base_symbol = get_symbolic_allele_base_symbol(allele)
                result.append(create_symbolic_allele(base_symbol) if base_symbol else allele)
            return sort_alleles(unique(result))

        result = [allele for allele in alleles if get_symbolic_allele_base_symbol(allele) != svtype]
        group = [allele for allele in alleles if get_symbolic_allele_base_symbol(allele) == svtype]
        if group:
            subtyped = [allele for allele in group if has_symbolic_subtype(allele)]
            if len(subtyped) == 1:
                result.append(subtyped[0])
            else:
                result.append(create_symbolic_allele(svtype))
        return sort_alleles(result)

    def collapse_ploidy(self, genotypes):
        return max([genotype.ploidy for genotype in genotypes], default=0)

    @staticmethod
    def _match_alt_allele(allele, alt_alleles):
        if not is_alt_allele(allele):
            return None
        elif allele in alt_alleles:
            return allele
        base_symbol = get_symbolic_allele_base_symbol(allele)
        if base_symbol is None:
            return None
        for alt_allele in alt_alleles:
            if get_symbolic_allele_base_symbol(alt_allele) == base_symbol:
                return alt_allele
        return None

    def collapse_sample_alleles(self, genotypes, ref_allele, alt_alleles):
        """
        merge the genotypes of a single sample. Each alternate allele is given the largest number of copies
        it has in any one of the input genotypes and the remaining slots (up to the largest input ploidy)
        are filled with the reference allele

        Args:
            genotypes (List[Genotype]): the genotypes of a single sample
            ref_allele (Allele): the reference allele of the merged record. N is used if it is None
            alt_alleles (List[Allele]): the alternate alleles of the merged record

        Returns:
            List[Allele]: the allele slots of the merged genotype
        """
        genotypes = list(genotypes)
        max_copies = {allele: 0 for allele in alt_alleles}
        for genotype in genotypes:
            copies = {}
            for allele in genotype.alleles:
                alt_allele = self._match_alt_allele(allele, alt_alleles)
                if alt_allele is not None:
                    copies[alt_allele] = copies.get(alt_allele, 0) + 1
            for alt_allele, count in copies.items():
                max_copies[alt_allele] = max(max_copies[alt_allele], count)

        alleles = []
        for alt_allele in alt_alleles:
            alleles.extend([alt_allele] * max_copies[alt_allele])
        ref_allele = ref_allele if ref_allele is not None else REF_N
        ref_slots = max(0, self.collapse_ploidy(genotypes) - len(alleles))
        return [ref_allele] * ref_slots + alleles

    def collapse_genotypes(self, items, ref_allele, alt_alleles):
        """
        merge the genotypes of every sample called in any of the records. A record which does not
        genotype a given sample contributes a single uncalled slot for that sample

        Returns:
            List[Genotype]: one genotype per sample, in order of first appearance
        """
        samples = unique(itertools.chain.from_iterable([item.samples for item in items]))
        result = []
        for sample in samples:
            genotypes = [item.genotypes.get(sample, Genotype(sample, [None])) for item in items]
            called = [item.genotypes[sample] for item in items if sample in item.genotypes]
            result.append(Genotype(
                sample,
                self.collapse_sample_alleles(genotypes, ref_allele, alt_alleles),
                self.collapse_genotype_attributes(called)
            ))
        return result

    def collapse_variant_attributes(self, items):
        """
        merge the variant attributes and record the identifiers of all merged records
        """
        items = self._check_items(items)
        result = collapse_attributes([item.attributes for item in items])
        result[CLUSTER_MEMBER_IDS_KEY] = [item.id for item in items]
        return result

    def collapse_genotype_attributes(self, genotypes):
        return collapse_attributes([genotype.attributes for genotype in genotypes])

    def collapse_ids(self, items):
        items = self._check_items(items)
        return min([item.id for item in items])

    def collapse_algorithms(self, items):
        items = self._check_items(items)
        return sorted(set(itertools.chain.from_iterable([item.algorithms for item in items])))
