"""
Serializers for standard library types that JSON cannot represent.

Each serializer is strict about the values it claims so it can be combined with user
serializers without stealing their values. ``datetime`` is registered ahead of ``date``
since every datetime is also a date.
"""

from __future__ import annotations

import base64
import datetime as dt
import math
import uuid
from decimal import Decimal

from pluggable_json.registry import SerializerDescriptor


def _is_datetime(value: object) -> bool:
    return isinstance(value, dt.datetime)


def _is_date(value: object) -> bool:
    return isinstance(value, dt.date) and not isinstance(value, dt.datetime)


def _is_time(value: object) -> bool:
    return isinstance(value, dt.time)


def _is_timedelta(value: object) -> bool:
    return isinstance(value, dt.timedelta)


def _is_decimal(value: object) -> bool:
    return isinstance(value, Decimal)


def _is_uuid(value: object) -> bool:
    return isinstance(value, uuid.UUID)


def _is_bytes(value: object) -> bool:
    return isinstance(value, (bytes, bytearray))


def _is_non_finite_float(value: object) -> bool:
    return isinstance(value, float) and not math.isfinite(value)


def _is_complex(value: object) -> bool:
    return isinstance(value, complex)


def _serialize_timedelta(value: dt.timedelta) -> str:
    """Exact integer microseconds."""
    return str(value // dt.timedelta(microseconds=1))


def _deserialize_timedelta(payload: str) -> dt.timedelta:
    return dt.timedelta(microseconds=int(payload))


def _serialize_bytes(value: bytes | bytearray) -> str:
    return base64.b64encode(bytes(value)).decode("ascii")


def _deserialize_bytes(payload: str) -> bytes:
    return base64.b64decode(payload.encode("ascii"), validate=True)


datetime_serializer = SerializerDescriptor(
    type="datetime",
    is_serializable=_is_datetime,
    serialize=dt.datetime.isoformat,
    deserialize=dt.datetime.fromisoformat,
)

date_serializer = SerializerDescriptor(
    type="date",
    is_serializable=_is_date,
    serialize=dt.date.isoformat,
    deserialize=dt.date.fromisoformat,
)

time_serializer = SerializerDescriptor(
    type="time",
    is_serializable=_is_time,
    serialize=dt.time.isoformat,
    deserialize=dt.time.fromisoformat,
)

timedelta_serializer = SerializerDescriptor(
    type="timedelta",
    is_serializable=_is_timedelta,
    serialize=_serialize_timedelta,
    deserialize=_deserialize_timedelta,
)

decimal_serializer = SerializerDescriptor(
    type="decimal",
    is_serializable=_is_decimal,
    serialize=str,
    deserialize=Decimal,
)

uuid_serializer = SerializerDescriptor(
    type="uuid",
    is_serializable=_is_uuid,
    serialize=str,
    deserialize=uuid.UUID,
)

bytes_serializer = SerializerDescriptor(
    type="bytes",
    is_serializable=_is_bytes,
    serialize=_serialize_bytes,
    deserialize=_deserialize_bytes,
)

# NaN and the infinities; finite floats stay plain JSON numbers.
float_serializer = SerializerDescriptor(
    type="float",
    is_serializable=_is_non_finite_float,
    serialize=repr,
    deserialize=float,
)

complex_serializer = SerializerDescriptor(
    type="complex",
    is_serializable=_is_complex,
    serialize=repr,
    deserialize=complex,
)

BUILTIN_SERIALIZERS: tuple[SerializerDescriptor, ...] = (
    datetime_serializer,
    date_serializer,
    time_serializer,
    timedelta_serializer,
    decimal_serializer,
    uuid_serializer,
    bytes_serializer,
    float_serializer,
    complex_serializer,
)
