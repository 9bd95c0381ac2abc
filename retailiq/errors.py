"""Exceptions raised by the analysis pipeline."""

from __future__ import annotations


class RetailIQError(Exception):
    """Base class for errors the pipeline raises on purpose."""


class InvalidQuestionError(RetailIQError):
    """The question is missing or too short to analyze."""

    def __init__(self, message: str = "Please ask a complete business question"):
        super().__init__(message)


class QueryExecutionError(RetailIQError):
    """The store rejected the generated SQL.

    The message is deliberately generic; the store's own error is logged
    where it is caught and never returned to the caller.
    """

    def __init__(self, message: str = "Error executing query"):
        super().__init__(message)


class LLMNotConfiguredError(RetailIQError):
    """No completion-service API key is configured."""
