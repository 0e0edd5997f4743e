class DiagramError(Exception):
    """Base class for failures raised by the diagram engine."""


class InvalidArgumentError(DiagramError, ValueError):
    """A required input is blank, or the path endpoints are identical."""


class SystemNotFoundError(DiagramError, LookupError):
    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.code = code


class IncompleteRecordError(DiagramError):
    """
    A record exists in the snapshot but its review section cannot supply a
    display name. Indicates an upstream data-integrity problem.
    """

    def __init__(self, code: str, missing: str):
        super().__init__(f"System record '{code}' is missing {missing}")
        self.code = code
        self.missing = missing
