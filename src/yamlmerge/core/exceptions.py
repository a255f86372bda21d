"""Custom exceptions for yamlmerge."""

from typing import Any


class YamlMergeError(Exception):
    """Base exception for all yamlmerge errors."""


class DocumentError(YamlMergeError):
    """Raised when an input document cannot be found, read or parsed."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class InvalidDocumentError(YamlMergeError):
    """Raised when a document's top level is not a mapping."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Top level of the document must be a mapping, got {kind}")


class NonStringKeyError(YamlMergeError):
    """Raised at parse time when a nested mapping has a non-string key."""

    def __init__(self, key: Any, path: tuple[str, ...] = ()) -> None:
        self.key = key
        self.path = path
        where = ".".join(path) or "<root>"
        super().__init__(f"Mapping keys must be strings, got {key!r} under {where}")


class RootNotFoundError(YamlMergeError):
    """Raised when a requested root is absent from the document."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Root {name!r} was not found in the document")


class InvalidRootTypeError(YamlMergeError):
    """Raised when a requested root is not a mapping."""

    def __init__(self, name: str, kind: str) -> None:
        self.name = name
        self.kind = kind
        super().__init__(f"Root {name!r} must be a mapping, got {kind}")


class NonStringRootKeyError(YamlMergeError):
    """Raised when listing roots and a top-level key is not a string."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Root names must be strings, got {key!r}")


class TypeMismatchError(YamlMergeError):
    """Raised when a base mapping collides with a non-mapping override."""

    def __init__(
        self,
        key: str,
        base_kind: str,
        override_kind: str,
        path: tuple[str, ...] = (),
    ) -> None:
        self.key = key
        self.base_kind = base_kind
        self.override_kind = override_kind
        self.path = path or (key,)
        super().__init__(
            f"Cannot merge key {'.'.join(self.path)!r}: base is a {base_kind}, "
            f"override is a {override_kind}"
        )
