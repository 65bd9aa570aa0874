class CsvShellError(Exception):
    """Base class for failures that abort one command but never the shell."""
    pass

class ColumnNotFoundError(CsvShellError):
    def __init__(self, column: str):
        super().__init__(f"column '{column}' not found")
        self.column = column

class MissingArgumentError(CsvShellError):
    """A command was invoked without its required arguments; the message is the usage hint."""
    pass

class InvalidOperatorError(CsvShellError):
    def __init__(self, operator: str):
        super().__init__(f"unknown operator: {operator}")
        self.operator = operator

class UnknownCommandError(CsvShellError):
    def __init__(self, command: str):
        super().__init__(f"unknown command: {command}")
        self.command = command
