class Labels(dict):
    """Metadata attached to an endpoint, used for ownership tracking."""

    def __repr__(self):
        return 'Labels({})'.format(dict.__repr__(self))


def new_labels():
    return Labels()
