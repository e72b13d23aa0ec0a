"""Placeholder validation interfaces.

Defines the diagnostic taxonomy shared by the validator, the debugger and
the API layer.
"""

import enum


class ValidationIssue(str, enum.Enum):
    """Why a placeholder failed validation."""

    NOT_FOUND = "not_found"
    FRAGMENTED = "fragmented"
    REPLACEMENT_FAILED = "replacement_failed"
    VALIDATION_ERROR = "validation_error"


class PlaceholderError(Exception):
    """Base exception for a single placeholder's validation problem."""

    issue: ValidationIssue = ValidationIssue.VALIDATION_ERROR


class PlaceholderNotFoundError(PlaceholderError):
    """The placeholder occurs nowhere in the document."""

    issue = ValidationIssue.NOT_FOUND


class PlaceholderFragmentedError(PlaceholderError):
    """The bare name is present but the decorated token is not contiguous."""

    issue = ValidationIssue.FRAGMENTED


class ReplacementFailedError(PlaceholderError):
    """Occurrences were found but a trial substitution left no sentinel."""

    issue = ValidationIssue.REPLACEMENT_FAILED


class PlaceholderValidationError(PlaceholderError):
    """Unexpected failure while probing a placeholder."""

    issue = ValidationIssue.VALIDATION_ERROR
