"""Lookup of the named roots a merge operates on."""

import logging

from yamlmerge.core.exceptions import InvalidRootTypeError, NonStringRootKeyError, RootNotFoundError
from yamlmerge.core.models import Document, MappingNode

logger = logging.getLogger(__name__)


def get_root(document: Document, name: str) -> MappingNode:
    """Return the mapping stored under a root name."""
    if name not in document.roots:
        raise RootNotFoundError(name)
    node = document.roots[name]
    if not isinstance(node, MappingNode):
        raise InvalidRootTypeError(name, node.kind)
    return node


def resolve_roles(document: Document, base_name: str, override_name: str) -> tuple[MappingNode, MappingNode]:
    """Look up the base and override roots, in that order."""
    base = get_root(document, base_name)
    override = get_root(document, override_name)
    logger.debug(
        "Resolved base %r (%d keys) and override %r (%d keys)",
        base_name,
        len(base.entries),
        override_name,
        len(override.entries),
    )
    return base, override


def list_roots(document: Document) -> list[str]:
    """Return the root names in document order."""
    names = []
    for key in document.roots:
        if not isinstance(key, str):
            raise NonStringRootKeyError(key)
        names.append(key)
    return names
