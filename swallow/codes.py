"""Diagnostic codes attached to compiler error reports."""

from enum import IntEnum


class Code(IntEnum):
    """Numbered reasons a compilation can fail."""

    UNKNOWN = 0
    PARSING = 1
    LID_NOT_DECLARED = 2
    UID_NOT_DECLARED = 3
    EXPR_TYPE_CHECKING_FAILED = 4
    BINOP_NOT_DECLARED = 5
    BINOP_TYPE_MISMATCH = 6
    APPLICATION_TYPE_MISMATCH = 7
    MATCH_EXPR_TYPE_CHECKING_FAILED = 8
    MATCH_EXPR_BRANCHE_TYPE_CONFLICTS = 9
    MATCH_EXPR_CURRENT_BRANCHE_TYPE_CHECKING_FAILED = 10
    MATCH_EXPR_IS_NON_EXHAUSTIVE = 11
    MATCH_NON_DATA_TYPE = 12
    PATTERN_CONSTRUCTOR_IS_NOT_FUNCTION = 13
    PATTERN_CONSTRUCTOR_IS_DUPLICATED = 14
    PATTERN_MISMATCH = 15
    FUNCTION_BODY_TYPE_CHECKING_FAILED = 16
    CONSTRUCTOR_NOT_DECLARED = 17
    AMBIGUOUSLY_TYPE = 18