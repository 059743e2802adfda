"""Maybe / Result / Review 값 타입과 함수 조합자."""

import logging

from fe.exceptions import EmptyInputError, FEError, UnwrapError
from fe.functions import compose, const, curry, identity
from fe.maybe import Just, Maybe, Nothing, just, nothing
from fe.result import Error, Ok, Result, all_ok, error, ok, oks
from fe.review import (
    Accepted,
    Issues,
    Rejected,
    Review,
    StepIssue,
    StepOk,
    StepReject,
    accepted,
    issues,
    rejected,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FEError",
    "UnwrapError",
    "EmptyInputError",
    "identity",
    "const",
    "compose",
    "curry",
    "Maybe",
    "Just",
    "Nothing",
    "just",
    "nothing",
    "Result",
    "Ok",
    "Error",
    "ok",
    "error",
    "oks",
    "all_ok",
    "Review",
    "Accepted",
    "Issues",
    "Rejected",
    "StepOk",
    "StepIssue",
    "StepReject",
    "accepted",
    "issues",
    "rejected",
]
