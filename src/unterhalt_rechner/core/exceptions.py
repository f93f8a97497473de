"""Custom exceptions for the child-support calculator."""


class UnterhaltRechnerError(Exception):
    """Base exception."""
    pass


class InvalidNeedTableError(UnterhaltRechnerError):
    pass


class UnknownTableEditionError(UnterhaltRechnerError):
    pass


class HouseholdFileError(UnterhaltRechnerError):
    pass
