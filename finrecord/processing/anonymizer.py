"""Field-level pseudonymization of personal data in a transaction record.

Each personal field is replaced by the first 10 hex characters of its
SHA-256 digest. The mapping is deterministic, so equal inputs stay equal
after anonymization (records can still be linked on these fields).

Ten hex characters is 40 bits: collisions become likely around a million
distinct values. The length is kept for compatibility with already
pseudonymized data.
"""

import copy
import hashlib
import logging
from typing import Any, Dict

from finrecord.errors import InvalidFieldError, MissingFieldError

logger = logging.getLogger(__name__)

PSEUDONYM_LENGTH = 10

# Dotted paths of the fields replaced by pseudonyms. billingAddress.country
# is deliberately not listed.
PSEUDONYMIZED_FIELDS = (
    "userDetails.firstName",
    "userDetails.lastName",
    "userDetails.email",
    "userDetails.phone",
    "userDetails.billingAddress.street",
    "userDetails.billingAddress.city",
    "userDetails.billingAddress.state",
    "userDetails.billingAddress.postalCode",
)


def pseudonym(value: str) -> str:
    """Return the deterministic pseudonym for a value."""
    digest = hashlib.sha256(value.encode("utf-8")).hexdigest()
    return digest[:PSEUDONYM_LENGTH]


def _parent_of(record: Dict[str, Any], path: str) -> Dict[str, Any]:
    """Walk to the object holding the last segment of ``path``."""
    *parents, _ = path.split(".")
    node: Any = record
    walked: list[str] = []
    for key in parents:
        walked.append(key)
        if not isinstance(node, dict) or node.get(key) is None:
            raise MissingFieldError(".".join(walked))
        node = node[key]
    if not isinstance(node, dict):
        raise InvalidFieldError(".".join(walked), "object")
    return node


def anonymize_record(record: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of the record with personal fields pseudonymized.

    The input is left untouched. Raises MissingFieldError when a field (or
    one of its parent objects) is absent or null, and InvalidFieldError when
    a field is present but not a string.
    """
    if not isinstance(record, dict):
        raise InvalidFieldError("$", "object")

    result = copy.deepcopy(record)
    for path in PSEUDONYMIZED_FIELDS:
        parent = _parent_of(result, path)
        key = path.rsplit(".", 1)[-1]
        value = parent.get(key)
        if value is None:
            raise MissingFieldError(path)
        if not isinstance(value, str):
            raise InvalidFieldError(path, "string")
        parent[key] = pseudonym(value)

    logger.info(f"Pseudonymized {len(PSEUDONYMIZED_FIELDS)} fields")
    return result
