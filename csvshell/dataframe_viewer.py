from csvshell.ui import UI
from csvshell.table import Table

CELL_WIDTH = 15

class DataFrameViewer:
    def __init__(self, ui: UI, limit: int = 20):
        self.__ui = ui
        self.__limit = limit

    def show_table(self, table: Table):
        """Display the header, a separator and the first rows of the table, in blue."""
        if table.row_count == 0:
            self.__ui.print_colored("No data loaded. Use 'load <file.csv>' first.", "green")
            return

        self.__ui.print_colored(self.__format_line(table.headers), "green")
        self.__ui.print_colored(self.__format_line(["-" * CELL_WIDTH] * table.col_count), "green")
        for row in table.head(self.__limit):
            self.__ui.print_colored(self.__format_line(row), "blue")

        remaining = table.row_count - self.__limit
        if remaining > 0:
            self.__ui.print_colored(f"...({remaining} more rows)", "green")

    def show_count(self, table: Table):
        if table.row_count == 0:
            self.__ui.print_colored("No data loaded.", "green")
            return
        self.__ui.print_colored(f"{table.row_count} rows", "blue")

    def show_columns(self, table: Table):
        self.__ui.print_colored(f"Columns ({table.col_count}): {', '.join(table.headers)}", "blue")

    def __format_line(self, cells) -> str:
        return "".join(cell.ljust(CELL_WIDTH) for cell in cells).rstrip()
