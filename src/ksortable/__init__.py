"""ksortable — K-Sortable Unique IDentifiers (KSUIDs).

20-byte identifiers made of a 4-byte timestamp and a 16-byte random
payload, rendered as 27-character base-62 strings whose lexicographic
order matches creation order.
"""

import logging

from ksortable.api import (
    create_ksuid,
    default_generator,
    is_ksuid,
    is_ksuid_string,
    ksuid_to_string,
    next_ksuid,
    payload_of_ksuid,
    previous_ksuid,
    string_to_ksuid,
    time_of_ksuid,
)
from ksortable.core.models import Ksuid
from ksortable.utils.constants import (
    EPOCH,
    MAX,
    MAX_STRING,
    MAX_TIME,
    MIN,
    MIN_STRING,
)
from ksortable.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "EPOCH",
    "MAX",
    "MAX_STRING",
    "MAX_TIME",
    "MIN",
    "MIN_STRING",
    "Ksuid",
    "__version__",
    "create_ksuid",
    "default_generator",
    "is_ksuid",
    "is_ksuid_string",
    "ksuid_to_string",
    "next_ksuid",
    "payload_of_ksuid",
    "previous_ksuid",
    "string_to_ksuid",
    "time_of_ksuid",
]
