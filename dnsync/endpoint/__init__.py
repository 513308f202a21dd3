from .labels import Labels, new_labels  # noqa: F401
from .record import Endpoint, new_endpoint, new_endpoint_with_ttl, strip_dot  # noqa: F401
from .record_types import (  # noqa: F401
    RECORD_TYPE_A, RECORD_TYPE_CNAME, RECORD_TYPE_TXT,
    OtherRecordType, RecordType, parse_record_type,
)
from .targets import Targets  # noqa: F401
from .ttl import TTL  # noqa: F401
