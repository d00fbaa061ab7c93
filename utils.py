from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    '''Return True when value is None, empty or whitespace-only.'''
    return value is None or not value.strip()

def parse_bool(value: str) -> bool:
    '''Parse a persisted boolean flag, accepting any casing of true/false.'''
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"{value!r} is not a boolean flag")

def parse_optional_int(value: str) -> Optional[int]:
    '''Parse an integer field where the empty string means "absent".'''
    stripped = value.strip()
    if not stripped:
        return None
    return int(stripped)

def has_line_break(value: Optional[str]) -> bool:
    '''Return True when value contains a CR or LF, which would split a persisted record.'''
    return value is not None and ("\n" in value or "\r" in value)
