'''
Line-oriented persistence shared by the customer and room stores.

Each record is one line of comma-joined fields in a fixed order. There is
no header and no escaping, so a field containing a comma cannot round-trip.
'''
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Sequence

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
REPLACEMENT_CHAR = "\ufffd"


class MalformedLineError(ValueError):
    """Raised when a persisted line does not have the expected shape."""


class PersistenceError(RuntimeError):
    """Raised when a backing file cannot be rewritten."""


def encode_field(value: object) -> str:
    '''Render a single field; None becomes the empty string.'''
    if value is None:
        return ""
    return str(value)

def encode_line(fields: Sequence[object]) -> str:
    '''Join the fields of one record into a single line.'''
    return FIELD_SEPARATOR.join(encode_field(field) for field in fields)

def decode_line(line: str, field_count: int) -> list[str]:
    """
    Split a persisted line into its positional fields.

    Args:
        line: Raw line without its trailing newline.
        field_count: Number of fields the record type expects.

    Returns:
        The list of raw field strings.

    Raises:
        MalformedLineError: If the line does not split into exactly field_count fields
            or holds bytes that were not valid UTF-8.
    """
    if REPLACEMENT_CHAR in line:
        raise MalformedLineError("line contains undecodable bytes")
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) != field_count:
        raise MalformedLineError(
            f"expected {field_count} fields, found {len(parts)}"
        )
    return parts

def read_lines(path: Path) -> list[str]:
    '''Return the non-blank lines of path, or an empty list if it does not exist.'''
    if not path.exists():
        return []
    # undecodable bytes become U+FFFD so the damaged line is skipped by its parser
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return [line.rstrip("\r\n") for line in f if line.strip()]

def write_lines(path: Path, lines: Iterable[str]) -> None:
    """
    Replace the content of path with lines, all or nothing.

    The lines are written to a temporary file in the same directory which is
    then moved over the target, so readers never observe a half-written file.

    Raises:
        PersistenceError: If the directory or file cannot be written.
    """
    tmp_name: Optional[str] = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
        os.replace(tmp_name, path)
    except OSError as exc:
        logger.exception("Failed to rewrite store file", extra={"path": str(path)})
        if tmp_name is not None and os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise PersistenceError(f"Unable to write {path}: {exc}") from exc
