from csvshell.ui import UI
from csvshell.table import Table

class CsvLoader:
    def __init__(self, ui: UI, max_rows: int = None, max_cols: int = None):
        self.__ui = ui
        self.__max_rows = max_rows
        self.__max_cols = max_cols

    def load_csv(self, table: Table, filename: str) -> tuple:
        """Load a CSV file into the table, with a spinner while it reads. Returns (rows, cols)."""
        stop_spinner = self.__ui.start_spinner(f"Loading {filename}")
        try:
            counts = table.load(filename, self.__max_rows, self.__max_cols)
        finally:
            if stop_spinner is not None:
                stop_spinner()

        self.__ui.debug(f"Decoded '{filename}' as {table.encoding}")
        dropped_rows, dropped_cols = table.truncated
        if dropped_rows:
            self.__ui.error(f"Warning: row limit {self.__max_rows} reached, {dropped_rows} rows not loaded.")
        if dropped_cols:
            self.__ui.error(f"Warning: column limit {self.__max_cols} reached, {dropped_cols} columns not loaded.")
        return counts
