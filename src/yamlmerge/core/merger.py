"""Recursive merge of a base configuration tree with an override tree."""

import logging

from yamlmerge.core.exceptions import TypeMismatchError
from yamlmerge.core.models import ConfigNode, MappingNode

logger = logging.getLogger(__name__)


def merge(base: MappingNode, override: MappingNode, _path: tuple[str, ...] = ()) -> MappingNode:
    """Merge override into base, returning a new mapping.

    Keys present in both trees take the override value, except where the base
    value is a mapping: then the override value must be a mapping too and the
    two are merged one level down. Sequences and scalars are replaced whole.
    Keys present in only one tree are kept as they are. Neither input is
    modified; unchanged leaves are shared with the result.
    """
    entries: dict[str, ConfigNode] = {}

    for key, value in base.entries.items():
        if key not in override.entries:
            entries[key] = value
            continue

        role_value = override.entries[key]
        if isinstance(value, MappingNode):
            if not isinstance(role_value, MappingNode):
                raise TypeMismatchError(key, value.kind, role_value.kind, (*_path, key))
            entries[key] = merge(value, role_value, (*_path, key))
        else:
            entries[key] = role_value

    for key, value in override.entries.items():
        if key not in base.entries:
            entries[key] = value

    logger.debug("Merged %d keys at %s", len(entries), ".".join(_path) or "<root>")
    return MappingNode(entries=entries)

