import enum
import logging

import dns.rdatatype
from dns.exception import DNSException


logger = logging.getLogger(__name__)


class RecordType(str, enum.Enum):
    A = 'A'
    CNAME = 'CNAME'
    TXT = 'TXT'

    def __str__(self):
        return self.value


class OtherRecordType(str):
    """A record type outside the well-known set, kept verbatim."""

    def __repr__(self):
        return 'OtherRecordType({})'.format(str.__repr__(self))


RECORD_TYPE_A = RecordType.A
RECORD_TYPE_CNAME = RecordType.CNAME
RECORD_TYPE_TXT = RecordType.TXT

_WELL_KNOWN = {rtype.value: rtype for rtype in RecordType}


def is_registered_rdatatype(tag):
    try:
        dns.rdatatype.from_text(tag)
    except (DNSException, ValueError):
        return False
    return True


def parse_record_type(tag):
    """
    Map a record type tag to a `RecordType`, or to an `OtherRecordType` when
    it is not one of the well-known literals. Never rejects a tag.
    """
    if isinstance(tag, (RecordType, OtherRecordType)):
        return tag
    tag = str(tag)
    if tag in _WELL_KNOWN:
        return _WELL_KNOWN[tag]

    if tag.strip().upper() in _WELL_KNOWN:
        logger.warning("record type %r looks like a misspelled %s", tag, tag.strip().upper())
    elif not is_registered_rdatatype(tag):
        logger.warning("unknown record type %r", tag)
    return OtherRecordType(tag)
