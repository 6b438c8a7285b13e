import re

from .config import MAX_COLS

ADDRESS_RE = re.compile(r'^([A-Z])(\d+)$')


def split_cell(address):
    """Split an address like 'B12' into ('B', 12)."""
    m = ADDRESS_RE.match(address.strip().upper())
    if not m:
        raise ValueError(f"Invalid cell reference: '{address}'")
    return m.group(1), int(m.group(2))


def col_to_index(col):
    return ord(col) - ord('A')


def index_to_col(index):
    if not 0 <= index < MAX_COLS:
        raise ValueError(f"Column index out of range: {index}")
    return chr(ord('A') + index)


def parse_address(address):
    """Convert an A1-style address to a zero-based (row, col) pair."""
    col, row = split_cell(address)
    if row < 1:
        raise ValueError(f"Invalid cell reference: '{address}'")
    return row - 1, col_to_index(col)


def format_address(row, col):
    """Convert a zero-based (row, col) pair to an A1-style address."""
    return f"{index_to_col(col)}{row + 1}"
