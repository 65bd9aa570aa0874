import re
import pandas as pd
from csvshell.ui import UI
from csvshell.errors import InvalidOperatorError

# Longest leading number, the way C's atof reads it: "12abc" -> 12, "abc" -> no match
NUMBER_PATTERN = r"^[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?))"
_NUMBER_RE = re.compile(NUMBER_PATTERN, re.IGNORECASE)

def to_number(value: str) -> float:
    """Permissive numeric reading of a cell: unparseable text is 0.0."""
    match = _NUMBER_RE.match(value)
    return float(match.group(1)) if match else 0.0

def to_numbers(values: pd.Series) -> pd.Series:
    """Vectorized ``to_number`` over a column of text cells."""
    extracted = values.astype(str).str.extract(NUMBER_PATTERN, flags=re.IGNORECASE, expand=False)
    return extracted.map(lambda s: float(s) if isinstance(s, str) else 0.0).astype(float)

def _numeric(value):
    if isinstance(value, pd.Series):
        return to_numbers(value)
    return to_number(value)

class PredicateEvaluator:
    def __init__(self, ui: UI):
        self.__ui = ui
        # Equality is plain string comparison, ordering is numeric
        self.__operators = {
            '==': lambda x, y: x == y,
            '!=': lambda x, y: x != y,
            '>': lambda x, y: _numeric(x) > to_number(y),
            '<': lambda x, y: _numeric(x) < to_number(y),
        }

    @property
    def operators(self) -> list:
        return list(self.__operators.keys())

    def lookup(self, operator: str):
        if operator not in self.__operators:
            raise InvalidOperatorError(operator)
        return self.__operators[operator]

    def compare(self, value1: str, operator: str, value2: str) -> bool:
        """Evaluate ``value1 <operator> value2``. An unknown operator is reported and yields False."""
        try:
            op = self.lookup(operator)
        except InvalidOperatorError as e:
            self.__ui.error(f"csv: {e}")
            return False
        return bool(op(value1, value2))

    def mask(self, values: pd.Series, operator: str, literal: str) -> pd.Series:
        """Evaluate the comparison for every cell of a column, one boolean per row."""
        self.__ui.debug(f"Parsed predicate - operator: '{operator}', value: '{literal}'")
        try:
            op = self.lookup(operator)
        except InvalidOperatorError as e:
            # Nothing is compared on an empty column
            if not values.empty:
                self.__ui.error(f"csv: {e}")
            return pd.Series(False, index=values.index, dtype=bool)
        return op(values, literal).astype(bool)
