"""YAML codec for frontmatter blocks.

Text handling is delegated to python-frontmatter's YAML handler (PyYAML safe
loader/dumper). Conversion into caller-supplied types goes through pydantic, so
metadata can be read as a plain dict, a dataclass, a model, or a scalar key.
"""

from __future__ import annotations

import re
from typing import Any

import yaml
from frontmatter.default_handlers import YAMLHandler
from pydantic import PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ..errors import MetadataParseError

# Runtime-inferred serializer: models and dataclasses become plain dicts
_ANY_ADAPTER = TypeAdapter(Any)

_BOOL_TAG = "tag:yaml.org,2002:bool"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class CoreLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 scalars: yes/no/on/off and dates stay strings."""


CoreLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (_BOOL_TAG, _TIMESTAMP_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
CoreLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


class YamlCodec:
    """Load and dump frontmatter metadata as YAML."""

    def __init__(self, handler: YAMLHandler | None = None):
        self.handler = handler or YAMLHandler()

    def load(self, text: str, into: Any = None) -> Any:
        """Decode a metadata block.

        Args:
            text: YAML text between the delimiters
            into: Target type; None returns the raw YAML value

        Returns:
            Decoded value. A block with no content decodes to an empty mapping;
            an explicit null stays None.
        """
        try:
            value = self.handler.load(text, Loader=CoreLoader)
        except yaml.YAMLError as e:
            raise MetadataParseError(f"Error parsing yaml metadata: {e}") from e

        if value is None and not text.strip():
            value = {}
        if into is None:
            return value
        return self.convert(value, into)

    def convert(self, value: Any, into: Any, *, strict: bool = False) -> Any:
        """Convert an already decoded value into `into`.

        With strict=True no coercion happens (the string "7" is not an int).
        """
        try:
            return TypeAdapter(into).validate_python(value, strict=strict)
        except (ValidationError, PydanticUserError) as e:
            raise MetadataParseError(f"Cannot convert metadata to {into!r}: {e}") from e

    def dump(self, value: Any) -> str:
        """Serialize a value to YAML text ending in a newline."""
        try:
            data = _ANY_ADAPTER.dump_python(value)
            text = self.handler.export(data, sort_keys=False)
        except (yaml.YAMLError, PydanticSerializationError) as e:
            raise MetadataParseError(f"Error serializing metadata: {e}") from e
        return text + "\n"


DEFAULT_CODEC = YamlCodec()
