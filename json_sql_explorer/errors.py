from __future__ import annotations


class QueryToolError(Exception):
    """Base class for errors surfaced to the user as a result message."""

    kind = 'error'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseError(QueryToolError):
    kind = 'parse'


class ValidationError(QueryToolError):
    kind = 'validation'


class EngineError(QueryToolError):
    kind = 'engine'
