"""Error types raised by the loaders, the aggregator and the partial-report step.

Missing input files are reported with the builtin FileNotFoundError.
"""


class ResultsError(Exception):
    pass


class SheetNotFoundError(ResultsError):
    """The results workbook has no usable sheet."""


class StateNotFoundError(ResultsError, KeyError):
    def __init__(self, state: str):
        super().__init__(state)
        self.state = state

    def __str__(self):
        return f"State not found: {self.state}"


class InvalidHourError(ResultsError, ValueError):
    def __init__(self, raw):
        super().__init__(raw)
        self.raw = raw

    def __str__(self):
        return f"Invalid cutoff hour: {self.raw!r}"
