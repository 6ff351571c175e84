"""
Custom exceptions for the maze search system.

This module defines the hierarchy of custom exceptions used throughout the system
to handle error conditions in a structured way. Search exhaustion is not an error
and has no exception here; it is a normal terminal state of a run.
"""


class MazeError(Exception):
    """
    Base class for all maze search errors.

    Catching this exception handles every error raised deliberately by the
    package while letting unrelated failures propagate.
    """


class ConfigurationError(MazeError):
    """
    Raised when a maze layout or run plan is invalid.

    This exception is raised at load time, before any search begins, when the
    input cannot describe a searchable maze.

    Examples:
        * Non-integer or unknown cell codes
        * Non-square layouts
        * Missing or duplicate Start cell
        * Run plan failing schema validation
        * Targeting an exit the maze does not have
    """

    def __str__(self) -> str:
        """Format configuration error message."""
        return f"Configuration Error: {super().__str__()}"


class SearchStateError(MazeError):
    """
    Raised when a search run is used in a way its state does not allow.

    These errors indicate programming mistakes rather than bad input.

    Examples:
        * Reconstructing a path from a run that never reached its goal
        * Stepping an engine that was never started
        * Reporting on a run that has not terminated
        * Marking a wall cell as open or closed
    """

    def __str__(self) -> str:
        """Format search state error message."""
        return f"Search State Error: {super().__str__()}"


class PathValidationError(MazeError):
    """
    Raised when a path fails validation checks against its grid.

    Examples:
        * Path steps onto a wall
        * Consecutive positions are not orthogonally adjacent
        * Position outside the grid
        * Path does not start or end where the run did
    """
