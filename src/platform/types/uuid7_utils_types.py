"""
UUID7 helpers

uuid_utils generates RFC 9562 UUIDv7 values (time ordered, index friendly).
uuid_utils.UUID is not a subclass of uuid.UUID, so ids are converted to the
standard library type before they reach pydantic or SQLAlchemy.
"""

from uuid import UUID

import uuid_utils


def generate_uuid7() -> UUID:
    return UUID(str(uuid_utils.uuid7()))
