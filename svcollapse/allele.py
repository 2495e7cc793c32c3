"""
allele representation shared by call records and genotypes

alleles are compared and sorted in genomic order: reference alleles first, then by their base string
"""
import functools
import re


class Allele:
    """
    a single allele, either reference or alternate

    symbolic alleles are given as ``<TAG>`` or ``<TAG:SUBTYPE>`` (ex. ``<INS:MEI:LINE>``) or using breakend
    notation (ex. ``N[chr2:1000[``). The no-call allele is ``.`` and is never a reference allele
    """
    NO_CALL_STRING = '.'

    def __init__(self, bases, reference=False):
        """
        Args:
            bases (str): the base string or symbol for this allele
            reference (bool): True if this is the reference allele

        Example:
            >>> Allele('N', reference=True)
            Allele(N*)
            >>> Allele('<INS:MEI>')
            Allele(<INS:MEI>)
        """
        bases = str(bases)
        if not bases:
            raise ValueError('allele bases cannot be empty')
        self.bases = bases if Allele._symbolic_bases(bases) else bases.upper()
        self.reference = bool(reference)
        if self.reference and (self.is_no_call or self.is_symbolic):
            raise ValueError('reference alleles must be concrete bases', bases)

    @staticmethod
    def _symbolic_bases(bases):
        if bases.startswith('<') and bases.endswith('>'):
            return True
        return '[' in bases or ']' in bases

    @property
    def key(self):
        return (self.bases, self.reference)

    @property
    def is_symbolic(self):
        return Allele._symbolic_bases(self.bases)

    @property
    def is_no_call(self):
        return self.bases == Allele.NO_CALL_STRING

    @property
    def is_alt(self):
        """:class:`bool`: True for any called, non-reference allele"""
        return not self.reference and not self.is_no_call

    def __eq__(self, other):
        if not hasattr(other, 'key'):
            return False
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __lt__(self, other):
        return compare_alleles(self, other) < 0

    def __repr__(self):
        return 'Allele({}{})'.format(self.bases, '*' if self.reference else '')

    def __str__(self):
        return self.bases


REF_N = Allele('N', reference=True)
REF_A = Allele('A', reference=True)
REF_C = Allele('C', reference=True)
REF_G = Allele('G', reference=True)
REF_T = Allele('T', reference=True)
NO_CALL = Allele(Allele.NO_CALL_STRING)
SV_SIMPLE_DEL = Allele('<DEL>')
SV_SIMPLE_DUP = Allele('<DUP>')
SV_SIMPLE_INS = Allele('<INS>')
SV_SIMPLE_INV = Allele('<INV>')
SV_SIMPLE_CNV = Allele('<CNV>')


def is_alt_allele(allele):
    """
    Returns:
        bool: True if the input is a called, non-reference allele. Missing (None) slots are not alternate alleles
    """
    return allele is not None and allele.is_alt


def get_symbolic_allele_tokens(allele):
    """
    split a bracketed symbolic allele into its class tag and subtypes

    Example:
        >>> get_symbolic_allele_tokens(Allele('<INS:MEI:LINE>'))
        ['INS', 'MEI', 'LINE']
        >>> get_symbolic_allele_tokens(Allele('A'))
        []
    """
    match = re.match(r'^<([^>]+)>$', allele.bases)
    if not match:
        return []
    return match.group(1).split(':')


def get_symbolic_allele_base_symbol(allele):
    """
    Returns:
        str: the leading class tag of a symbolic allele (ex. DUP for ``<DUP:TANDEM>``) or None for alleles
        which are not bracketed symbols
    """
    tokens = get_symbolic_allele_tokens(allele)
    if not tokens:
        return None
    return tokens[0]


def has_symbolic_subtype(allele):
    return len(get_symbolic_allele_tokens(allele)) > 1


def create_symbolic_allele(base_symbol):
    """
    Example:
        >>> create_symbolic_allele('INS')
        Allele(<INS>)
    """
    return Allele('<{}>'.format(base_symbol))


def compare_alleles(first, second):
    """
    compare two alleles in genomic sort order

    Returns:
        int: -1, 0, or 1 as the first allele sorts before, with, or after the second
    """
    first_key = (not first.reference, first.bases)
    second_key = (not second.reference, second.bases)
    return (first_key > second_key) - (first_key < second_key)


def sort_alleles(alleles):
    return sorted(alleles, key=functools.cmp_to_key(compare_alleles))


def compare_allele_lists(first, second):
    """
    compare two lists of alleles element-wise up to the length of the shorter list. When the common
    prefix is identical the longer list sorts after the shorter one

    Example:
        >>> compare_allele_lists([SV_SIMPLE_DEL, SV_SIMPLE_DEL], [SV_SIMPLE_DEL])
        1
        >>> compare_allele_lists([SV_SIMPLE_DEL], [SV_SIMPLE_DEL, SV_SIMPLE_DUP])
        -1
    """
    for allele1, allele2 in zip(first, second):
        result = compare_alleles(allele1, allele2)
        if result != 0:
            return result
    return (len(first) > len(second)) - (len(first) < len(second))


class AlleleCollectionComparator:
    """
    comparator for lists of alleles, used to put collections of genotype alleles in a canonical order
    """

    def compare(self, first, second):
        return compare_allele_lists(first, second)

    def __call__(self, first, second):
        return self.compare(first, second)

    def sort_key(self):
        return functools.cmp_to_key(self.compare)
