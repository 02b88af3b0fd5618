"""pluggable_json: JSON serialization extended with pluggable, tagged serializers."""

__version__ = "1.0.0"

from . import settings
from .core import PluggableJSON
from .escaping import ESCAPE_CHAR
from .exceptions import ConfigError
from .exceptions import DuplicateTypeError
from .exceptions import FormatError
from .exceptions import MissingFieldsError
from .exceptions import PluggableJSONError
from .exceptions import UnknownTypeError
from .registry import Serializer
from .registry import SerializerDescriptor

__all__ = [
    "ESCAPE_CHAR",
    "ConfigError",
    "DuplicateTypeError",
    "FormatError",
    "MissingFieldsError",
    "PluggableJSON",
    "PluggableJSONError",
    "Serializer",
    "SerializerDescriptor",
    "UnknownTypeError",
    "settings",
]
