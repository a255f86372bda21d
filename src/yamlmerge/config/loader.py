"""Reading input documents and rendering merged output."""

import logging
import tomllib
from pathlib import Path
from typing import Any

import yaml

from yamlmerge.core.exceptions import DocumentError
from yamlmerge.core.models import Document, MappingNode, to_python

logger = logging.getLogger(__name__)

TOML_SUFFIXES = frozenset({".toml"})


def parse_text(text: str, path: Path) -> Any:
    """Parse document text as TOML or YAML depending on the file suffix."""
    if path.suffix.lower() in TOML_SUFFIXES:
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise DocumentError(str(path), f"Unable to parse TOML file: {path}\n{e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentError(str(path), f"Unable to parse YAML file: {path}\n{e}") from e


def load_document(path: Path) -> Document:
    """Load a document of named roots from a YAML or TOML file."""
    if not path.exists():
        raise DocumentError(str(path), f"No file found at: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(str(path), f"Unable to load file: {path}\n{e}") from e

    document = Document.from_python(parse_text(text, path))
    logger.debug("Loaded %s with %d roots", path, len(document.roots))
    return document


def render_yaml(node: MappingNode, sort_keys: bool = True, indent: int = 2) -> str:
    """Serialize a merged mapping as a block-style YAML document."""
    return yaml.safe_dump(
        to_python(node),
        sort_keys=sort_keys,
        indent=indent,
        default_flow_style=False,
        allow_unicode=True,
    )


def write_output(text: str, path: Path) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise DocumentError(str(path), f"Unable to write file: {path}\n{e}") from e
    logger.info("Wrote merged document to %s", path)
