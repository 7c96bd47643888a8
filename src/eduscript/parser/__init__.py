"""Script parsing: text to program tree."""

import logging
from pathlib import Path
from typing import Union

from ..models import Program
from .errors import ScriptSyntaxError, SourcePosition, SourceSpan
from .grammar import Parser, PropertyBag, PropertyFragment, fold_properties, parse

logger = logging.getLogger(__name__)


def parse_file(path: Union[str, Path]) -> Program:
    """Read a UTF-8 script file and parse it.

    Args:
        path: Path to the script.

    Returns:
        The program tree.

    Raises:
        FileNotFoundError: If the file does not exist.
        ScriptSyntaxError: If the script does not parse.
    """
    path = Path(path)
    logger.debug(f"Reading script {path}")
    text = path.read_text(encoding="utf-8-sig")
    return parse(text)


__all__ = [
    "parse",
    "parse_file",
    "Parser",
    "PropertyBag",
    "PropertyFragment",
    "fold_properties",
    "ScriptSyntaxError",
    "SourcePosition",
    "SourceSpan",
]
