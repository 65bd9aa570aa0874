#!/usr/bin/env python3
import sys
import argparse
import readline
from csvshell.ui import UI
from csvshell.table import Table
from csvshell.csv_loader import CsvLoader
from csvshell.dataframe_viewer import DataFrameViewer
from csvshell.predicate import PredicateEvaluator
from csvshell.command_parser import CommandParser
from csvshell.shell import Shell

def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'")
    return number

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csvshell",
        description="Interactive shell for loading, filtering, sorting and saving CSV files.",
    )
    parser.add_argument("file", nargs="?", help="CSV file to load before the first prompt")
    parser.add_argument("--max-rows", type=positive_int, default=None,
                        help="load at most this many data rows; the rest are dropped")
    parser.add_argument("--max-cols", type=positive_int, default=None,
                        help="load at most this many columns; the rest are dropped")
    parser.add_argument("--show-limit", type=positive_int, default=20,
                        help="rows printed by 'show' (default: 20)")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors")
    parser.add_argument("--no-banner", action="store_true", help="skip the welcome banner")
    parser.add_argument("--verbose", action="store_true", help="print debug messages on stderr")
    return parser

class App:
    def __init__(self, options: argparse.Namespace):
        self.__options = options
        self.__ui = UI(color=not options.no_color, verbose=options.verbose)
        self.__loader = CsvLoader(self.__ui, options.max_rows, options.max_cols)
        self.__viewer = DataFrameViewer(self.__ui, options.show_limit)
        self.__evaluator = PredicateEvaluator(self.__ui)
        self.__parser = CommandParser(self.__ui, self.__loader, self.__viewer, self.__evaluator)
        self.__shell = Shell(self.__ui, self.__parser, Table())

    @property
    def shell(self) -> Shell:
        return self.__shell

    def run(self, read_line=input) -> int:
        """Execute the main program logic."""
        if not self.__options.no_banner:
            self.__ui.display_logo()

        if self.__options.file:
            self.__parser.dispatch("load", [self.__options.file], self.__shell.table)

        self.__shell.run(read_line)
        self.__ui.display_goodbye()
        return 0

def main(argv=None) -> int:
    options = build_arg_parser().parse_args(argv)
    app = App(options)
    return app.run()

if __name__ == "__main__":
    sys.exit(main())
