"""
module responsible for the controlled vocabularies and constants used throughout the svcollapse package
"""
import os


class Namespace:
    """
    Namespace to hold module constants

    Example:
        >>> nspace = Namespace(thing=1, otherthing=2)
        >>> nspace.thing
        1
        >>> nspace.otherthing
        2
    """

    def __init__(self, **kwargs):
        object.__setattr__(self, '_types', {})
        object.__setattr__(self, '_members', {})
        object.__setattr__(self, '_env_overwritable', set())
        object.__setattr__(self, '_env_prefix', 'SVCOLLAPSE')

        for attr, val in kwargs.items():
            self.add(attr, val)

    def get_env_name(self, attr):
        """
        Get the name of the corresponding environment variable

        Example:
            >>> nspace = Namespace(a=1)
            >>> nspace.get_env_name('a')
            'SVCOLLAPSE_A'
        """
        return '{}_{}'.format(self._env_prefix, attr).upper()

    def get_env_var(self, attr):
        """
        retrieve the environment variable definition of a given attribute, cast to the type of the attribute
        """
        env = os.environ[self.get_env_name(attr)].strip()
        return self._types.get(attr, str)(env)

    def is_env_overwritable(self, attr):
        """
        Returns:
            bool: True if the variable is overrided by specifying the environment variable equivalent
        """
        return attr in self._env_overwritable

    def __getattribute__(self, attr):
        try:
            return object.__getattribute__(self, attr)
        except AttributeError as err:
            variables = object.__getattribute__(self, '_members')
            if attr not in variables:
                raise err
            if self.is_env_overwritable(attr):
                try:
                    return self.get_env_var(attr)
                except KeyError:
                    pass
            return variables[attr]

    def __setattr__(self, attr, val):
        if attr.startswith('_'):
            raise ValueError('cannot set private', attr)
        object.__getattribute__(self, '_members')[attr] = val

    def keys(self):
        return [k for k in self._members]

    def values(self):
        return [getattr(self, k) for k in self._members]

    def enforce(self, value):
        """
        checks that the current namespace has a given value

        Returns:
            the input value

        Raises:
            KeyError: the value did not exist

        Example:
            >>> nspace = Namespace(thing=1, otherthing=2)
            >>> nspace.enforce(1)
            1
            >>> nspace.enforce(3)
            Traceback (most recent call last):
            ....
        """
        if value not in self.values():
            raise KeyError('value {0} is not a valid member of '.format(repr(value)), self.values())
        return value

    def add(self, attr, value, cast_type=None, env_overwritable=False):
        """
        Add an attribute to the name space

        Args:
            attr (str): name of the attribute being added
            value: the value of the attribute
            cast_type (callable): the function to use in casting the value from its environment variable
            env_overwritable (bool): True if this attribute will be overriden by its environment variable equivalent
        """
        if attr in self._members:
            raise AttributeError('Cannot respecify existing attribute', attr, self._members[attr])
        self._types[attr] = cast_type if cast_type else type(value)
        if env_overwritable:
            self._env_overwritable.add(attr)
        setattr(self, attr, value)

    def __call__(self, value):
        try:
            return self.enforce(value)
        except KeyError:
            raise TypeError('Invalid value {} for {}. Must be a valid member: {}'.format(
                repr(value), self.__class__.__name__, self.values()))


SVTYPE = Namespace(
    DEL='DEL',
    DUP='DUP',
    INS='INS',
    INV='INV',
    BND='BND',
    CNV='CNV'
)
"""
holds controlled vocabulary for acceptable structural variant classifications

- ``DEL``: deletion
- ``DUP``: duplication
- ``INS``: insertion
- ``INV``: inversion
- ``BND``: breakend of a non-simple rearrangement
- ``CNV``: copy number variant, a deletion or duplication where the direction is ambiguous
"""

COPY_NUMBER_TYPES = {SVTYPE.DEL, SVTYPE.DUP, SVTYPE.CNV}
""":class:`set` of :class:`str`: types which may be collapsed together into a CNV"""

BREAKPOINT_STRATEGY = Namespace(
    MEDIAN_START_MEDIAN_END='median_start_median_end',
    MIN_START_MAX_END='min_start_max_end',
    MAX_START_MIN_END='max_start_min_end',
    MEAN_START_MEAN_END='mean_start_mean_end'
)
"""
holds controlled vocabulary for the strategies used to summarize the breakpoints of a cluster

- ``MEDIAN_START_MEDIAN_END``: upper median of the starts and of the ends
- ``MIN_START_MAX_END``: widest envelope of the cluster
- ``MAX_START_MIN_END``: narrowest envelope of the cluster (start may exceed end)
- ``MEAN_START_MEAN_END``: mean of the starts and of the ends, rounded half up
"""

ALGORITHM = Namespace(DEPTH='depth')
""":class:`Namespace`: algorithm names with special meaning. ``DEPTH`` marks read-depth only evidence"""

CLUSTER_MEMBER_IDS_KEY = 'MEMBERS'
""":class:`str`: variant attribute holding the identifiers of all records merged into a call"""

GENOTYPE_QUALITY_KEY = 'GQ'
