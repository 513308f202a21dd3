import collections.abc


SEPARATOR = ';'


class Targets(collections.abc.Sequence):
    """
    The values a DNS record points to: addresses, hostnames or TXT payloads.

    The order of the values has no meaning for the record itself, so `same`
    and `is_less` compare the values as a set. Both work on sorted copies and
    never reorder either operand.
    """

    def __init__(self, *targets):
        self._targets = tuple(targets)

    @classmethod
    def coerce(cls, targets):
        if isinstance(targets, cls):
            return targets
        if isinstance(targets, str):
            return cls(targets)
        return cls(*targets)

    def __getitem__(self, index):
        return self._targets[index]

    def __len__(self):
        return len(self._targets)

    def __eq__(self, other):
        if not isinstance(other, Targets):
            return NotImplemented
        return self._targets == other._targets

    def __hash__(self):
        return hash(self._targets)

    def __str__(self):
        return SEPARATOR.join(self._targets)

    def __repr__(self):
        return 'Targets({})'.format(', '.join(repr(t) for t in self._targets))

    def same(self, other):
        """True when both hold the same values, in any order."""
        other = self.coerce(other)
        if len(self) != len(other):
            return False
        return sorted(self._targets) == sorted(other._targets)

    def sort_key(self):
        return (len(self), tuple(sorted(self._targets)))

    def is_less(self, other):
        """
        Shorter collections always come first, whatever their values. Equal
        length collections are compared value by value, both sorted.
        """
        # FIXME: nothing defines why length takes precedence over content,
        # keep it local to diff ranking.
        return self.sort_key() < self.coerce(other).sort_key()
