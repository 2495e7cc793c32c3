from .allele import Allele, is_alt_allele
from .constants import SVTYPE


class Genotype:
    """
    the allele slots and attributes of a single sample in a single call record
    """

    def __init__(self, sample, alleles=None, attributes=None):
        """
        Args:
            sample (str): the sample name
            alleles (List[Allele]): one allele per ploidy slot. None is used for a slot which was not called
            attributes (dict): free-form genotype attributes (ex. GQ)

        Example:
            >>> Genotype('sample1', [Allele('N', reference=True), Allele('<DEL>')], {'GQ': 30})
        """
        self.sample = sample
        self.alleles = tuple(alleles) if alleles is not None else tuple()
        for allele in self.alleles:
            if allele is not None and not isinstance(allele, Allele):
                raise TypeError('genotype alleles must be Allele objects or None', allele)
        self.attributes = dict(attributes) if attributes else {}

    @property
    def ploidy(self):
        return len(self.alleles)

    def __eq__(self, other):
        for attr in ['sample', 'alleles', 'attributes']:
            if not hasattr(other, attr):
                return False
            elif getattr(self, attr) != getattr(other, attr):
                return False
        return True

    def __repr__(self):
        return 'Genotype({}: {})'.format(
            self.sample, '/'.join(['.' if a is None else str(a) for a in self.alleles]))

    def to_dict(self):
        return {
            'sample': self.sample,
            'alleles': [None if a is None else str(a) for a in self.alleles],
            'attributes': dict(self.attributes)
        }


class CallRecord:
    """
    a single structural variant call. Coordinates are 1-based and inclusive
    """

    def __init__(
        self, id, chr1, start, chr2, end, svtype,
        length=None, algorithms=None, alleles=None, genotypes=None, attributes=None
    ):
        """
        Args:
            id (str): the identifier of this call
            chr1 (str): the chromosome of the start position
            start (int): the start position
            chr2 (str): the chromosome of the end position. differs from chr1 for interchromosomal events
            end (int): the end position
            svtype (SVTYPE): the structural variant type
            length (int): the length of the event (required to collapse insertions). -1 for breakends
            algorithms (List[str]): names of the algorithms supporting this call
            alleles (List[Allele]): all alleles observed for this call across samples
            genotypes (List[Genotype]): the per-sample genotypes
            attributes (dict): free-form variant attributes

        Example:
            >>> CallRecord('var1', 'chr1', 1001, 'chr1', 1100, SVTYPE.DEL, length=100)
        """
        self.id = id
        self.chr1 = chr1
        self.chr2 = chr2 if chr2 is not None else chr1
        self.start = int(start)
        self.end = int(end)
        self.svtype = SVTYPE.enforce(svtype)
        self.length = None if length is None else int(length)
        self.algorithms = tuple(algorithms) if algorithms is not None else tuple()
        self.alleles = tuple(alleles) if alleles is not None else tuple()
        self.genotypes = {}
        for genotype in genotypes or []:
            if genotype.sample in self.genotypes:
                raise KeyError('duplicate genotype for sample', genotype.sample)
            self.genotypes[genotype.sample] = genotype
        self.attributes = dict(attributes) if attributes else {}

    @property
    def interchromosomal(self):
        """:class:`bool`: True if the start and end are on different chromosomes, False otherwise"""
        return self.chr1 != self.chr2

    @property
    def ref_alleles(self):
        return [a for a in self.alleles if a.reference]

    @property
    def alt_alleles(self):
        return [a for a in self.alleles if is_alt_allele(a)]

    @property
    def samples(self):
        return list(self.genotypes.keys())

    def __eq__(self, other):
        for attr in [
            'id', 'chr1', 'start', 'chr2', 'end', 'svtype', 'length',
            'algorithms', 'alleles', 'genotypes', 'attributes'
        ]:
            if not hasattr(other, attr):
                return False
            elif getattr(self, attr) != getattr(other, attr):
                return False
        return True

    def __repr__(self):
        return 'CallRecord({}: {}:{}-{}:{} {})'.format(
            self.id, self.chr1, self.start, self.chr2, self.end, self.svtype)

    def to_dict(self):
        return {
            'id': self.id,
            'chr1': self.chr1,
            'start': self.start,
            'chr2': self.chr2,
            'end': self.end,
            'svtype': self.svtype,
            'length': self.length,
            'algorithms': list(self.algorithms),
            'alleles': [str(a) for a in self.alleles],
            'genotypes': [g.to_dict() for g in self.genotypes.values()],
            'attributes': dict(self.attributes),
        }
