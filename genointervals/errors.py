"""
Exception classes for genointervals.

Only configuration problems and a missing input file are raised to the
caller. Malformed lines are never raised; they are recorded on the parsed
dataset instead.
"""

from typing import Dict, Optional


class GenoIntervalsError(Exception):
    """Base exception for all genointervals errors."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        """Initialize the error.

        Parameters
        ----------
        message : str
            Error message
        details : dict, optional
            Additional error details
        """
        super().__init__(message)
        self.details = details or {}


class ParserConfigurationError(GenoIntervalsError):
    """Raised when a column layout or parse option is invalid."""

    def __init__(self, message: str, option: str):
        """Initialize configuration error."""
        super().__init__(message, {"option": option})
        self.option = option


class UnknownAssemblyError(GenoIntervalsError):
    """Raised when a reference assembly identifier is not known."""

    def __init__(self, assembly: str):
        """Initialize unknown assembly error."""
        message = f"Unknown reference assembly '{assembly}'"
        super().__init__(message, {"assembly": assembly})
        self.assembly = assembly


def missing_file_error(path: str) -> FileNotFoundError:
    """Build the error raised when an input file cannot be found."""
    return FileNotFoundError(f"The file `{path}` does not exist or is inaccessible.")
