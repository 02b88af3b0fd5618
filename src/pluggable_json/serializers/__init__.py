"""Ready-made serializers for common standard library types."""

from pluggable_json.serializers.builtin import BUILTIN_SERIALIZERS
from pluggable_json.serializers.builtin import bytes_serializer
from pluggable_json.serializers.builtin import complex_serializer
from pluggable_json.serializers.builtin import date_serializer
from pluggable_json.serializers.builtin import datetime_serializer
from pluggable_json.serializers.builtin import decimal_serializer
from pluggable_json.serializers.builtin import float_serializer
from pluggable_json.serializers.builtin import time_serializer
from pluggable_json.serializers.builtin import timedelta_serializer
from pluggable_json.serializers.builtin import uuid_serializer

__all__ = [
    "BUILTIN_SERIALIZERS",
    "bytes_serializer",
    "complex_serializer",
    "date_serializer",
    "datetime_serializer",
    "decimal_serializer",
    "float_serializer",
    "time_serializer",
    "timedelta_serializer",
    "uuid_serializer",
]
