from concurrent.futures import ProcessPoolExecutor

from .collapser import SVCollapser
from .constants import DEFAULTS
from ..util import LOG


def collapse_clusters(
    clusters,
    strategy=DEFAULTS.breakpoint_summary_strategy,
    processes=DEFAULTS.processes,
    verbose=False
):
    """
    collapse each cluster of call records into a single merged call. Clusters are independent of one
    another and can be collapsed in separate worker processes

    Args:
        clusters (List[List[CallRecord]]): the clusters to collapse
        strategy (BREAKPOINT_STRATEGY): how the start and end positions of each cluster are summarized
        processes (int): the number of worker processes to use. Clusters are collapsed in the current process if 1
        verbose (bool): log each collapsed cluster

    Returns:
        List[CallRecord]: the merged calls, in the same order as the input clusters
    """
    clusters = [list(cluster) for cluster in clusters]
    collapser = SVCollapser(strategy, verbose=verbose)
    LOG('collapsing', len(clusters), 'clusters with the', strategy, 'breakpoint strategy', time_stamp=True)

    if processes > 1 and len(clusters) > 1:
        with LOG.indent() as log:
            log('using', processes, 'worker processes')
        with ProcessPoolExecutor(max_workers=processes) as executor:
            calls = list(executor.map(collapser.collapse, clusters))
    else:
        calls = [collapser.collapse(cluster) for cluster in clusters]

    LOG('collapsed', sum([len(c) for c in clusters]), 'records into', len(calls), 'calls', time_stamp=True)
    return calls
