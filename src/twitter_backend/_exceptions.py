from __future__ import annotations

from typing import TYPE_CHECKING, Union

import requests

if TYPE_CHECKING:
    from .errors import ErrorOutcome


class RequestError(Exception):
    """
    Exception thrown if a HTTP request operation returned a non-ok code.

    Attributes:
        response -- request response
    """
    def __init__(self, message: str, response: requests.Response):
        self.response = response
        super().__init__(message)


class InvalidSelection(ValueError):
    """
    Exception thrown when a field/expansion selection is inconsistent,
    e.g. user fields nested under an expansion that loads media.
    """


class MalformedResponse(ValueError):
    """
    Exception thrown if a response body is not any recognized API envelope.

    Attributes:
        body -- raw response body, kept for diagnostics
    """
    def __init__(self, message: str, body: Union[bytes, str]):
        self.body = body
        super().__init__(message)


class TwitterApiFailure(Exception):
    """
    Exception thrown by endpoint methods when a request failed as a whole.

    Attributes:
        outcome -- classified failure (SingleError, MultipleErrors or TransportFailure)
    """
    def __init__(self, message: str, outcome: ErrorOutcome):
        self.outcome = outcome
        super().__init__(message)
