from csvshell.ui import UI
from csvshell.table import Table
from csvshell.command_parser import CommandParser

PROMPT = "csv> "

class Shell:
    """Read-eval loop over a single table.

    The loop is either running or terminated; it terminates on ``exit`` or
    when the line reader signals end of input (EOFError or Ctrl-C).
    """

    def __init__(self, ui: UI, parser: CommandParser, table: Table = None):
        self.__ui = ui
        self.__parser = parser
        self.__table = table if table is not None else Table()
        self.__running = False

    @property
    def table(self) -> Table:
        return self.__table

    @property
    def running(self) -> bool:
        return self.__running

    def execute(self, line: str) -> bool:
        self.__running = self.__parser.parse_and_execute(line, self.__table)
        return self.__running

    def run(self, read_line=input):
        """Prompt, read and execute lines until exit or end of input."""
        self.__running = True
        while self.__running:
            try:
                line = read_line(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self.__ui.end_line()
                break
            self.execute(line)
        self.__running = False
