# parser/exceptions.py
# This file is part of Tabula - A Propositional Logic Truth Table Generator
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula parsing.

Every rejection produced by the parser is a ParseError whose message starts
with a single generic diagnostic, followed by a short detail. GroupingError
marks the intentional rejections caused by the precedence-free grammar:
chained binary connectives and brackets around atoms or negations.
"""

WFF_DIAGNOSTIC = "Syntax error (not a wff)"


class ParseError(RuntimeError):
    """Exception raised when formula text is not a well-formed formula.

    Attributes:
        detail: Short description of what went wrong, without the generic prefix
    """

    def __init__(self, detail: str = ""):
        self.detail = detail
        message = f"{WFF_DIAGNOSTIC}: {detail}" if detail else f"{WFF_DIAGNOSTIC}."
        super().__init__(message)


class GroupingError(ParseError):
    """Raised when a formula relies on implicit grouping.

    The grammar has no precedence or associativity, so three operands joined
    by binary connectives need explicit brackets, and brackets are only
    allowed around binary connectives.
    """

    pass
