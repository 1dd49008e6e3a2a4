"""
Roster error taxonomy.

Every failure a user can cause is a RosterError. None of them are fatal:
the orchestrator turns them into an error notification and the roster is
left exactly as it was before the failed call.
"""


class RosterError(Exception):
    """Base class for all user-recoverable roster failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RosterError):
    """A required field is empty/blank or an enum token is invalid."""


class SelectionError(ValidationError):
    """
    A student operation was attempted without its owning group selected,
    or an unknown group was selected.
    """


class DuplicateError(RosterError):
    """A case-insensitive name collision within the relevant scope."""


class RosterImportError(RosterError):
    """The bootstrap resource could not be fetched or parsed."""
