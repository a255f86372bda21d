"""Tree model for parsed configuration documents."""

from enum import StrEnum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from yamlmerge.core.exceptions import InvalidDocumentError, NonStringKeyError


class NodeKind(StrEnum):
    SCALAR = "scalar"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


class ScalarNode(BaseModel):
    """A string, number, boolean, timestamp or null leaf."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    value: Any = None


class MappingNode(BaseModel):
    """String-keyed collection of child nodes."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["mapping"] = "mapping"
    entries: dict[str, "ConfigNode"] = Field(default_factory=dict)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __getitem__(self, key: str) -> "ConfigNode":
        return self.entries[key]

    def keys(self) -> list[str]:
        return list(self.entries)


class SequenceNode(BaseModel):
    """Ordered list of child nodes. Never merged element-wise."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sequence"] = "sequence"
    items: list["ConfigNode"] = Field(default_factory=list)


ConfigNode = Annotated[Union[ScalarNode, MappingNode, SequenceNode], Field(discriminator="kind")]

MappingNode.model_rebuild()
SequenceNode.model_rebuild()


class Document(BaseModel):
    """A parsed document: root name -> configuration tree.

    Root names are kept exactly as parsed so that non-string keys can be
    reported when listing roots.
    """

    model_config = ConfigDict(frozen=True)

    roots: dict[Any, ConfigNode] = Field(default_factory=dict)

    @classmethod
    def from_python(cls, data: Any) -> "Document":
        if not isinstance(data, dict):
            raise InvalidDocumentError(kind_of(data))
        return cls(roots={name: from_python(value, (str(name),)) for name, value in data.items()})


def kind_of(value: Any) -> str:
    """Describe the shape of a plain Python value."""
    if isinstance(value, dict):
        return NodeKind.MAPPING.value
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE.value
    return NodeKind.SCALAR.value


def from_python(value: Any, path: tuple[str, ...] = ()) -> ConfigNode:
    """Convert parsed YAML/TOML data into a node tree.

    Raises NonStringKeyError for any mapping key that is not a string.
    """
    if isinstance(value, dict):
        entries: dict[str, ConfigNode] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise NonStringKeyError(key, path)
            entries[key] = from_python(item, (*path, key))
        return MappingNode(entries=entries)
    if isinstance(value, (list, tuple)):
        return SequenceNode(items=[from_python(item, path) for item in value])
    return ScalarNode(value=value)


def to_python(node: ConfigNode) -> Any:
    """Convert a node tree back into freshly allocated dicts and lists."""
    if isinstance(node, MappingNode):
        return {key: to_python(child) for key, child in node.entries.items()}
    if isinstance(node, SequenceNode):
        return [to_python(item) for item in node.items]
    return node.value
