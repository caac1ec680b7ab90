"""Exceptions for the codebase navigator."""


class NavigatorError(Exception):
    """Base error raised by the analysis pipeline."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(NavigatorError):
    """The requested project path is missing or does not exist."""

    def __init__(self, message: str = "Invalid or non-existent project path"):
        super().__init__(message)


class UnsupportedPhaseError(NavigatorError):
    """The requested phase is not one of the known analysis phases."""

    def __init__(self, phase: str):
        self.phase = phase
        super().__init__(f"Invalid phase: {phase}")
