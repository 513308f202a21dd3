import hashlib

from hashids import Hashids

from dnsync.conf import get_setting
from .labels import new_labels
from .record_types import parse_record_type
from .targets import Targets
from .ttl import TTL


def _get_hashids():
    return Hashids(salt=get_setting('SECRET_KEY'),
                   min_length=get_setting('HASHIDS_MIN_LENGTH'),
                   alphabet=get_setting('HASHIDS_ALPHABET'))


def _encode(*args):
    _set_id = ':'.join([str(arg) for arg in args])
    _set_id = int(hashlib.sha256(_set_id.encode('utf-8')).hexdigest()[:16], base=16)
    return _get_hashids().encode(_set_id)


def strip_dot(name):
    """Drop a single trailing dot, turning an absolute name into a relative one."""
    if name.endswith('.'):
        return name[:-1]
    return name


class Endpoint:
    """A single DNS record kept in sync by the reconciler."""

    def __init__(self, name, targets, record_type, ttl=0, labels=None):
        self.name = strip_dot(name)
        self.targets = Targets.coerce(targets)
        self.record_type = parse_record_type(record_type)
        self.ttl = TTL(ttl)
        self.labels = new_labels() if labels is None else labels

    def __str__(self):
        return '{} {:d} IN {} {}'.format(
            self.name, self.ttl, str(self.record_type), self.targets)

    def __repr__(self):
        return "<{} {}:{} [{}]>".format(
            type(self).__name__, self.record_type, self.name, self.targets)

    @property
    def key(self):
        return (self.name, str(self.record_type))

    @property
    def id(self):
        return _encode(*self.key)


def new_endpoint(name, target, record_type):
    return new_endpoint_with_ttl(name, target, record_type, TTL(0))


def new_endpoint_with_ttl(name, target, record_type, ttl):
    return Endpoint(
        name=name,
        targets=Targets(strip_dot(target)),
        record_type=record_type,
        ttl=ttl,
    )
