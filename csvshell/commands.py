"""Built-in shell commands.

Each command validates its own arguments, works on the table it is handed and
returns True to keep the shell running. Failures are raised as CsvShellError
or OSError and reported by the dispatcher.
"""
from csvshell.ui import UI
from csvshell.table import Table
from csvshell.csv_loader import CsvLoader
from csvshell.dataframe_viewer import DataFrameViewer
from csvshell.predicate import PredicateEvaluator, to_numbers
from csvshell.errors import ColumnNotFoundError, MissingArgumentError

class Command:
    name = ""
    usage = ""
    description = ""
    arity = 0

    def execute(self, args: list, table: Table) -> bool:
        raise NotImplementedError

    def require(self, args: list):
        """Raise MissingArgumentError unless the required arguments are present. Extra ones are ignored."""
        if len(args) < self.arity:
            raise MissingArgumentError(f"usage: {self.usage}")

def resolve_column(table: Table, name: str) -> int:
    index = table.find_column(name)
    if index is None:
        raise ColumnNotFoundError(name)
    return index

class LoadCommand(Command):
    name = "load"
    usage = "load <file.csv>"
    description = "Load a CSV file, replacing the current table"
    arity = 1

    def __init__(self, ui: UI, loader: CsvLoader):
        self.__ui = ui
        self.__loader = loader

    def execute(self, args, table):
        self.require(args)
        rows, cols = self.__loader.load_csv(table, args[0])
        self.__ui.print_colored(f"Loaded {rows} rows, {cols} columns", "green")
        return True

class ShowCommand(Command):
    name = "show"
    usage = "show"
    description = "Display the header and the first rows"

    def __init__(self, viewer: DataFrameViewer):
        self.__viewer = viewer

    def execute(self, args, table):
        self.__viewer.show_table(table)
        return True

class FilterCommand(Command):
    name = "filter"
    usage = "filter <column> <op> <value>"
    description = "Keep only rows matching a condition (op: ==, !=, >, <)"
    arity = 3

    def __init__(self, ui: UI, evaluator: PredicateEvaluator):
        self.__ui = ui
        self.__evaluator = evaluator

    def execute(self, args, table):
        self.require(args)
        column, operator, literal = args[:3]
        index = resolve_column(table, column)
        mask = self.__evaluator.mask(table.column(index), operator, literal)
        kept = table.keep_rows(mask)
        self.__ui.print_colored(f"Filtered to {kept} rows", "green")
        return True

class SortCommand(Command):
    name = "sort"
    usage = "sort <column>"
    description = "Sort rows ascending by the numeric value of a column"
    arity = 1

    def __init__(self, ui: UI):
        self.__ui = ui

    def execute(self, args, table):
        self.require(args)
        index = resolve_column(table, args[0])
        table.sort_by(to_numbers(table.column(index)))
        self.__ui.print_colored(f"Sorted by {args[0]}", "green")
        return True

class SaveCommand(Command):
    name = "save"
    usage = "save <file.csv>"
    description = "Write the current table to a CSV file"
    arity = 1

    def __init__(self, ui: UI):
        self.__ui = ui

    def execute(self, args, table):
        self.require(args)
        saved = table.save(args[0])
        self.__ui.print_colored(f"saved {saved} rows to {args[0]}", "green")
        return True

class CountCommand(Command):
    name = "count"
    usage = "count"
    description = "Display the number of rows"

    def __init__(self, viewer: DataFrameViewer):
        self.__viewer = viewer

    def execute(self, args, table):
        self.__viewer.show_count(table)
        return True

class ColumnsCommand(Command):
    name = "columns"
    usage = "columns"
    description = "Display the column names"

    def __init__(self, viewer: DataFrameViewer):
        self.__viewer = viewer

    def execute(self, args, table):
        self.__viewer.show_columns(table)
        return True

class HelpCommand(Command):
    name = "help"
    usage = "help"
    description = "Show this message"

    def __init__(self, ui: UI, commands: dict):
        self.__ui = ui
        self.__commands = commands

    def execute(self, args, table):
        self.__ui.print_colored("CSV Data Shell", "green")
        self.__ui.print_colored("Type commands and arguments, and hit enter.", "green")
        self.__ui.print_colored("The following commands are built in:", "green")
        width = max(len(command.usage) for command in self.__commands.values())
        for command in self.__commands.values():
            self.__ui.print_colored(f"    {command.usage.ljust(width)}  {command.description}", "blue")
        self.__ui.print_colored("Use 'help' to see this message again.", "green")
        return True

class ExitCommand(Command):
    name = "exit"
    usage = "exit"
    description = "Leave the shell"

    def execute(self, args, table):
        return False
