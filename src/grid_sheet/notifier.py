from .utils import format_address


# DisplayNotifier receives the display text of every cell a write touches
# The presentation layer subclasses it; the core never renders anything itself
class DisplayNotifier:
    def on_cell_changed(self, row, col, display_text):
        raise NotImplementedError


class NullNotifier(DisplayNotifier):
    def on_cell_changed(self, row, col, display_text):
        pass


class PrintNotifier(DisplayNotifier):
    """Prints each notification as 'A1 -> text'."""

    def on_cell_changed(self, row, col, display_text):
        print(f"  {format_address(row, col)} -> {display_text!r}")
