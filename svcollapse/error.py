class InvalidClusterError(Exception):
    """
    raised when a cluster cannot be collapsed into a single call

    for example when an empty list of call records is given to a collapsing function
    """
    pass


class IncompatibleTypeError(InvalidClusterError):
    """
    raised when a cluster mixes structural variant types that cannot be represented
    by a single merged type (e.g. an insertion clustered with an inversion)
    """
    pass
