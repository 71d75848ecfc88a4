##
# File:    FormulaParseError.py
# Author:  jdw
# Date:    19-Oct-2026
# Version: 0.001
#
# Updates:
#
##
"""
Exception classes raised for syntactically invalid molecular formula strings.

Each error carries the formula, the 0-based character offset of the failing
construct and the character found there (None at end of input).
"""

__docformat__ = "restructuredtext en"
__author__ = "John Westbrook"
__email__ = "john.westbrook@rcsb.org"
__license__ = "Apache 2.0"


class FormulaParseError(ValueError):
    """Base class for formula syntax errors."""

    reason = "Invalid formula syntax"

    def __init__(self, formula, position, detail=None):
        self.formula = formula
        self.position = position
        self.character = formula[position] if 0 <= position < len(formula) else None
        self.detail = detail
        super(FormulaParseError, self).__init__(self.__buildMessage())

    def __buildMessage(self):
        what = self.reason
        if self.detail:
            what = "%s %r" % (what, self.detail)
        elif self.character is not None:
            what = "%s %r" % (what, self.character)
        if self.character is None:
            return "%s at end of input (position %d) in %r" % (what, self.position, self.formula)
        return "%s at position %d in %r" % (what, self.position, self.formula)


class UnmatchedOpeningBracketError(FormulaParseError):
    reason = "Unmatched opening bracket"


class UnmatchedClosingBracketError(FormulaParseError):
    reason = "Unmatched closing bracket"


class InvalidAtomSymbolError(FormulaParseError):
    reason = "Invalid atom symbol"


class InvalidMultiplierError(FormulaParseError):
    reason = "Invalid multiplier"


class TrailingCharactersError(FormulaParseError):
    reason = "Trailing characters"


class UnexpectedCharacterError(FormulaParseError):
    reason = "Unexpected character"


class NestingTooDeepError(FormulaParseError):
    reason = "Bracket nesting too deep"
