import pytest

from csvshell.ui import UI
from csvshell.table import Table
from csvshell.csv_loader import CsvLoader
from csvshell.dataframe_viewer import DataFrameViewer
from csvshell.predicate import PredicateEvaluator
from csvshell.command_parser import CommandParser

PEOPLE = "name,age\nAlice,30\nBob,22\nCara,41\n"

@pytest.fixture
def ui():
    return UI(color=False, animate=False)

@pytest.fixture
def table():
    return Table()

@pytest.fixture
def parser(ui):
    return CommandParser(ui, CsvLoader(ui), DataFrameViewer(ui), PredicateEvaluator(ui))

@pytest.fixture
def write_csv(tmp_path):
    def write(content, name="data.csv"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return write

@pytest.fixture
def people(write_csv):
    return write_csv(PEOPLE, "a.csv")

@pytest.fixture
def scripted():
    return make_reader

def make_reader(lines):
    """Line reader that replays ``lines`` and then signals end of input."""
    remaining = iter(lines)

    def read_line(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    return read_line
