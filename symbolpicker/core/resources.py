"""
Resources — Bundled plain-text symbol lists

One symbol name per line. Files live in the package's resources/
directory and are named by resource identifier (sfsymbol5.txt, ...).
"""

import logging
from pathlib import Path
from typing import Optional, Tuple


logger = logging.getLogger(__name__)


RESOURCE_EXTENSION = "txt"


def get_resources_dir() -> Path:
    """Get the bundled resources directory path."""
    return Path(__file__).parent.parent / "resources"


def split_symbol_lines(content: str) -> Tuple[str, ...]:
    """
    Split file content into symbol names.

    Splits on newlines, drops a trailing carriage return from each line
    and skips empty lines. File order is preserved.
    """
    names = []
    for line in content.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if line:
            names.append(line)
    return tuple(names)


def read_symbol_file(name: str, resource_dir: Optional[Path] = None) -> Optional[Tuple[str, ...]]:
    """
    Read a bundled symbol list.

    Args:
        name: Resource identifier (file stem)
        resource_dir: Directory to read from (default: bundled resources)

    Returns:
        Symbol names, or None if the file is missing or unreadable
    """
    directory = resource_dir if resource_dir is not None else get_resources_dir()
    path = Path(directory) / f"{name}.{RESOURCE_EXTENSION}"

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read symbol list %s: %s", path, e)
        return None

    return split_symbol_lines(content)
