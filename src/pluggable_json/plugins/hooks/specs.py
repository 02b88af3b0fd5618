"""Hook specifications for contributing serializers."""

from collections.abc import Mapping, Sequence
from typing import Any

from pluggable_json.registry import Serializer

from .markers import hook_spec


class SerializerSpec:
    """Hook specifications for serializer discovery."""

    @hook_spec
    def pluggable_json_serializers(self) -> Sequence[Serializer | Mapping[str, Any]]:
        """
        Called when a codec is assembled from installed plugins.

        Returns:
            Serializers contributed by the plugin, in the order they should be consulted.
        """
