"""Exception taxonomy for sort runs and array input."""


class SortVizError(Exception):
    """Base class for all sortviz errors."""


class AlreadyRunning(SortVizError):
    """A run was requested while another run is still in progress."""

    def __init__(self, message: str = "Already sorting"):
        super().__init__(message)


class UnknownElement(SortVizError, KeyError):
    """An entity id is not registered in the current array."""

    def __init__(self, entity):
        super().__init__(f"Unknown element: {entity}")
        self.entity = entity

    def __str__(self) -> str:
        return self.args[0]


class StaleElement(SortVizError):
    """A run touched a node or position of an array that has since been rebuilt."""

    def __init__(self, entity=None):
        if entity is None:
            message = "Stale element: the array was rebuilt during the run"
        else:
            message = f"Stale element: {entity} is no longer in the array"
        super().__init__(message)
        self.entity = entity


class ArrayInputError(SortVizError, ValueError):
    """Typed or generated array input was rejected before building."""


class EmptyInput(ArrayInputError):
    def __init__(self):
        super().__init__("Please enter numbers separated by commas or spaces")


class InvalidToken(ArrayInputError):
    def __init__(self, token: str):
        super().__init__(f"Invalid number: {token}")
        self.token = token


class TooManyValues(ArrayInputError):
    def __init__(self, count: int, limit: int):
        super().__init__(f"Maximum {limit} numbers allowed")
        self.count = count
        self.limit = limit


class InvalidCount(ArrayInputError):
    def __init__(self, count: int):
        super().__init__(f"Array size cannot be negative: {count}")
        self.count = count
