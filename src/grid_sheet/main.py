import re

from .config import NUM_ROWS, NUM_COLS
from .sheet import Sheet
from .notifier import NullNotifier, PrintNotifier
from .utils import parse_address

STATEMENT_RE = re.compile(r'^\[([^\]]*)\]\s*:=(.*)$')


def parse_script(code):
    """Parse a sheet script into (line_number, address, text) statements.

    Each line is '[A1] := <text>'; an empty text clears the cell.
    Blank lines and lines starting with '#' are ignored.
    """
    statements = []
    for line_number, line in enumerate(code.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        match = STATEMENT_RE.match(line)
        if not match:
            raise SyntaxError(f"Invalid statement at line {line_number}: {line}")
        address, text = match.group(1).strip(), match.group(2).strip()
        try:
            parse_address(address)
        except ValueError as e:
            raise SyntaxError(f"{e} at line {line_number}") from e
        statements.append((line_number, address, text))
    return statements


def run_sheet(code, debug=False, rows=NUM_ROWS, cols=NUM_COLS):
    """Run a sheet script on a fresh Sheet.

    Args:
        code (str): The script source
        debug (bool): If True, prints each statement, its notifications
            and the final grid state in CSV format
        rows (int): Number of rows in the sheet
        cols (int): Number of columns in the sheet

    Returns:
        Sheet: The sheet after every statement has run
    """
    notifier = PrintNotifier() if debug else NullNotifier()
    sheet = Sheet(rows, cols, notifier=notifier)

    if debug:
        print("Input code:")
        print(code)
        print("\nParsing...")
    statements = parse_script(code)

    if debug:
        print(f"Found {len(statements)} statement(s)")
        print("\nRunning...")
    for line_number, address, text in statements:
        if debug:
            print(f"line {line_number}: [{address}] := {text}")
        if text:
            sheet.set_cell(address, text)
        else:
            sheet.clear(address)

    if debug:
        print("\nGrid State (CSV format):")
        print(sheet.get_grid_csv())
    return sheet
