import sys
import argparse
import os

from .config import NUM_ROWS, NUM_COLS
from .main import run_sheet
from .utils import format_address


def main(argv=None):
    parser = argparse.ArgumentParser(description='Grid Sheet Calculator')
    parser.add_argument('filename', help='Path to the .sheet script to run')
    parser.add_argument('--debug', action='store_true', help='Trace the run and save the grid state as CSV')
    parser.add_argument('--rows', type=int, default=NUM_ROWS, help=f'Number of rows (default {NUM_ROWS})')
    parser.add_argument('--cols', type=int, default=NUM_COLS, help=f'Number of columns (default {NUM_COLS})')

    args = parser.parse_args(argv)

    try:
        with open(args.filename, 'r') as file:
            code = file.read()

        sheet = run_sheet(code, debug=args.debug, rows=args.rows, cols=args.cols)

        for row, col in sheet.store.coordinates():
            text = sheet.get_display_text(row, col)
            if text:
                print(f"{format_address(row, col)} = {text}")

        # In debug mode, save the grid next to the script
        if args.debug:
            csv_filename = os.path.splitext(args.filename)[0] + '.csv'
            with open(csv_filename, 'w', newline='') as csvfile:
                csvfile.write(sheet.get_grid_csv())
            print(f"\nGrid state saved to: {csv_filename}")

    except FileNotFoundError:
        print(f"Error: File '{args.filename}' not found")
        sys.exit(1)
    except (SyntaxError, ValueError) as e:
        print(f"Error: {str(e)}")
        sys.exit(1)

if __name__ == "__main__":
    main()
