from svcollapse.constants import SVTYPE
from svcollapse.record import CallRecord, Genotype


def build_hom_genotype_with_ploidy(allele, ploidy, sample='sample'):
    return Genotype(sample, [allele] * ploidy)


def new_call_record_with_alleles(genotype_alleles, variant_alleles, svtype):
    return CallRecord(
        'var1', 'chr1', 1000, 'chr1', 1999, svtype,
        length=1000,
        algorithms=['pesr'],
        alleles=variant_alleles,
        genotypes=[Genotype('sample', genotype_alleles)],
    )


def new_call_record_with_interval_and_type(start, end, svtype):
    return CallRecord(
        'var1', 'chr1', start, 'chr1', end, svtype,
        length=end - start + 1 if svtype != SVTYPE.BND else -1,
        algorithms=['pesr'],
    )


def new_call_record_with_length_and_type_and_chrom2(length, svtype, chrom2):
    return CallRecord('var1', 'chr1', 1000, chrom2, 1000 + max(length, 0) - 1, svtype, length=length)


def new_deletion_call_record_with_id_and_algorithms(id, algorithms):
    return CallRecord('{}'.format(id), 'chr1', 1000, 'chr1', 1999, SVTYPE.DEL, length=1000, algorithms=algorithms)


def new_deletion_call_record_with_id(id):
    return new_deletion_call_record_with_id_and_algorithms(id, ['pesr'])


def new_named_deletion_record_with_attributes(id, attributes):
    return CallRecord(
        id, 'chr1', 1000, 'chr1', 1999, SVTYPE.DEL, length=1000, algorithms=['pesr'], attributes=attributes
    )
