"""In-memory table of text cells, loaded from and saved to flat CSV files.

The CSV dialect is deliberately minimal: the first line holds the header
names, every other line holds one record, fields are separated by commas and
trimmed of surrounding ASCII whitespace. There is no quoting, so a cell that
contains a comma is written verbatim and splits into two fields when read back.
"""
import numpy as np
import pandas as pd

WHITESPACE = " \t\r\n\v\f"

def split_fields(line: str) -> list:
    """Split one CSV line on commas and trim every field."""
    return [field.strip(WHITESPACE) for field in line.split(',')]

def read_lines(path: str) -> tuple:
    """Read a text file as a list of lines without their line endings.

    UTF-8 (with or without a byte-order mark) is tried first; anything that
    does not decode falls back to Latin-1, which accepts every byte.
    Returns (lines, encoding).
    """
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            return [line.rstrip("\n") for line in f], "utf-8-sig"
    except UnicodeDecodeError:
        pass
    with open(path, "r", encoding="latin-1") as f:
        return [line.rstrip("\n") for line in f], "latin-1"

class Table:
    """Ordered header names plus ordered rows, every cell stored as ``str``.

    Every row always holds exactly one cell per header. ``load`` replaces the
    whole table, ``keep_rows`` replaces the rows and ``sort_by`` reorders them;
    nothing else mutates it.
    """

    def __init__(self):
        self.__df = pd.DataFrame()
        self.__encoding = None
        self.__truncated = (0, 0)

    @property
    def headers(self) -> list:
        return list(self.__df.columns)

    @property
    def rows(self) -> list:
        return self.__df.values.tolist()

    @property
    def row_count(self) -> int:
        return len(self.__df.index)

    @property
    def col_count(self) -> int:
        return len(self.__df.columns)

    @property
    def encoding(self) -> str:
        """Encoding the last successful load was decoded with."""
        return self.__encoding

    @property
    def truncated(self) -> tuple:
        """(rows, columns) dropped by the caps during the last load."""
        return self.__truncated

    def load(self, path: str, max_rows: int = None, max_cols: int = None) -> tuple:
        """Replace the table with the contents of ``path``.

        Short rows are padded with empty cells and long rows lose their extra
        fields. When ``max_rows``/``max_cols`` are given, rows and columns past
        the caps are dropped. Raises OSError when the file cannot be read; the
        current contents are kept in that case. Returns (row_count, col_count).
        """
        lines, encoding = read_lines(path)

        headers = split_fields(lines[0]) if lines and lines[0].strip(WHITESPACE) else []
        dropped_cols = 0
        if max_cols is not None and len(headers) > max_cols:
            dropped_cols = len(headers) - max_cols
            headers = headers[:max_cols]
        width = len(headers)

        # Without a header line there is nothing to hang cells on
        body = lines[1:] if width else []
        dropped_rows = 0
        if max_rows is not None and len(body) > max_rows:
            dropped_rows = len(body) - max_rows
            body = body[:max_rows]

        rows = [(split_fields(line) + [""] * width)[:width] for line in body]
        self.__df = pd.DataFrame(rows, columns=headers, dtype=object)
        self.__encoding = encoding
        self.__truncated = (dropped_rows, dropped_cols)
        return self.row_count, self.col_count

    def save(self, path: str) -> int:
        """Write the header line and every row to ``path``. Returns the row count."""
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(",".join(self.headers) + "\n")
            for row in self.rows:
                f.write(",".join(row) + "\n")
        return self.row_count

    def find_column(self, name: str):
        """Index of the first header equal to ``name``, or None."""
        for index, header in enumerate(self.__df.columns):
            if header == name:
                return index
        return None

    def column(self, index: int) -> pd.Series:
        return self.__df.iloc[:, index]

    def head(self, n: int) -> list:
        return self.__df.head(n).values.tolist()

    def keep_rows(self, mask) -> int:
        """Keep the rows where ``mask`` is true, in their current order."""
        self.__df = self.__df[np.asarray(mask, dtype=bool)].reset_index(drop=True)
        return self.row_count

    def sort_by(self, keys) -> None:
        """Reorder rows ascending by ``keys`` (one number per row); equal keys keep their order."""
        order = np.argsort(np.asarray(keys, dtype=float), kind="stable")
        self.__df = self.__df.iloc[order].reset_index(drop=True)
