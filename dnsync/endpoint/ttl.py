class TTL(int):
    """Time to live of a DNS record, in seconds.

    A non-positive value means the TTL is not configured and the provider
    default applies.
    """

    def __repr__(self):
        return 'TTL({:d})'.format(self)

    def is_configured(self):
        return self > 0
