import re
from csvshell.ui import UI
from csvshell.table import Table
from csvshell.csv_loader import CsvLoader
from csvshell.dataframe_viewer import DataFrameViewer
from csvshell.predicate import PredicateEvaluator
from csvshell.errors import CsvShellError, UnknownCommandError
from csvshell.commands import (
    Command, LoadCommand, ShowCommand, FilterCommand, SortCommand, SaveCommand,
    CountCommand, ColumnsCommand, HelpCommand, ExitCommand,
)

TOKEN_DELIMITERS = re.compile(r"[ \t\r\n]+")

def tokenize(line: str) -> list:
    """Split an input line on whitespace; the first token is the command name."""
    return [token for token in TOKEN_DELIMITERS.split(line) if token]

class CommandParser:
    def __init__(self, ui: UI, loader: CsvLoader, viewer: DataFrameViewer, evaluator: PredicateEvaluator):
        self.__ui = ui
        self.__commands = {}
        for command in (
            LoadCommand(ui, loader),
            ShowCommand(viewer),
            FilterCommand(ui, evaluator),
            SortCommand(ui),
            SaveCommand(ui),
            CountCommand(viewer),
            ColumnsCommand(viewer),
            HelpCommand(ui, self.__commands),
            ExitCommand(),
        ):
            self.register(command)

    @property
    def commands(self) -> list:
        return list(self.__commands.keys())

    def register(self, command: Command):
        self.__commands[command.name] = command

    def parse_and_execute(self, line: str, table: Table) -> bool:
        """Tokenize one input line and run it. Returns False once the shell should stop."""
        tokens = tokenize(line)
        if not tokens:
            return True
        return self.dispatch(tokens[0], tokens[1:], table)

    def dispatch(self, name: str, args: list, table: Table) -> bool:
        """Run the named command against the table, reporting any failure without stopping the shell."""
        if not name:
            return True
        try:
            command = self.__commands.get(name)
            if command is None:
                raise UnknownCommandError(name)
            self.__ui.debug(f"Dispatching '{name}' with arguments {args}")
            return command.execute(args, table)
        except UnknownCommandError as e:
            self.__ui.error(f"csv: {e}")
            self.__ui.error("Type 'help' for available commands")
        except CsvShellError as e:
            self.__ui.error(f"csv: {e}")
        except OSError as e:
            reason = e.strerror or str(e)
            target = e.filename if e.filename is not None else ""
            self.__ui.error(f"csv: {reason}: {target}" if target else f"csv: {reason}")
        return True
