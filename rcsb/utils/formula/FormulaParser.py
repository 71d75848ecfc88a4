##
# File:    FormulaParser.py
# Author:  jdw
# Date:    19-Oct-2026
# Version: 0.001
#
# Updates:
#
##
"""
Recursive descent parser for molecular formula strings with nested groups.

Grammar:

    molecule := term*
    term     := atom multiplier? | open-bracket molecule close-bracket multiplier?
    atom     := uppercase-letter lowercase-letter?
    multiplier := digit+

The three bracket pairs (), [] and {} are interchangeable but must be closed
by their own kind, e.g. K4[ON(SO3)2]2 -> K4 O14 N2 S4.
"""

__docformat__ = "restructuredtext en"
__author__ = "John Westbrook"
__email__ = "john.westbrook@rcsb.org"
__license__ = "Apache 2.0"

import logging
import string
from enum import Enum

from rcsb.utils.formula.FormulaParseError import (
    InvalidAtomSymbolError,
    InvalidMultiplierError,
    NestingTooDeepError,
    TrailingCharactersError,
    UnexpectedCharacterError,
    UnmatchedClosingBracketError,
    UnmatchedOpeningBracketError,
)

logger = logging.getLogger(__name__)


class BracketKind(Enum):
    ROUND = ("(", ")")
    SQUARE = ("[", "]")
    CURLY = ("{", "}")

    def __init__(self, opener, closer):
        self.opener = opener
        self.closer = closer


OPENING_BRACKETS = {kind.opener: kind for kind in BracketKind}
CLOSING_BRACKETS = {kind.closer: kind for kind in BracketKind}


class FormulaParser(object):
    """Parse a molecular formula into element counts.

    Counts are accumulated per bracket level and multiplied into the
    enclosing level, so results are ordered by the first appearance of each
    element in a left-to-right reading of the formula.
    """

    def __init__(self, **kwargs):
        self.__maxDepth = kwargs.get("maxDepth", 64)
        self.__maxMultiplier = kwargs.get("maxMultiplier", 2 ** 64 - 1)

    def parse(self, formula):
        """Parse the formula and return element counts as a list of (element, count) tuples.

        Args:
            formula (str): formula string (e.g. Mg(OH)2)

        Raises:
            FormulaParseError: the subclass describing the first syntax error in the formula

        Returns:
            (list): [(element, count), ...] in order of first appearance
        """
        return list(self.parseFormula(formula).items())

    def parseFormula(self, formula):
        """Parse the formula and return a dictionary of counts of each atom type."""
        rD, pos = self.__parseMolecule(formula, 0, 0)
        if pos < len(formula):
            if formula[pos] in CLOSING_BRACKETS:
                raise UnmatchedClosingBracketError(formula, pos)
            raise TrailingCharactersError(formula, pos, detail=formula[pos:])
        logger.debug("formula %r result %r", formula, rD)
        return rD

    def __parseMolecule(self, formula, pos, depth):
        """Parse consecutive terms until end of input, a closing bracket or a stray digit.

        Returns:
            (dict, int): element counts for this bracket level and the position following the last term
        """
        countD = {}
        while pos < len(formula):
            token = formula[pos]
            if token in CLOSING_BRACKETS or token in string.digits:
                break
            if token in OPENING_BRACKETS:
                termD, pos = self.__parseGroup(formula, pos, depth + 1)
            else:
                termD, pos = self.__parseAtom(formula, pos)
            countD = self.__mergeCounts(countD, termD)
        return countD, pos

    def __parseGroup(self, formula, pos, depth):
        """Parse a bracketed group and its optional multiplier.

        Example K4[ON(SO3)2]2
                      ^^^^^^ this group is nested within
                   ^^^^^^^^^^^ this group
        """
        if depth > self.__maxDepth:
            raise NestingTooDeepError(formula, pos)
        kind = OPENING_BRACKETS[formula[pos]]
        innerD, end = self.__parseMolecule(formula, pos + 1, depth)
        if end >= len(formula):
            raise UnmatchedOpeningBracketError(formula, pos)
        token = formula[end]
        if token not in CLOSING_BRACKETS:
            # a digit with no atom or group in front of it
            raise UnexpectedCharacterError(formula, end)
        if CLOSING_BRACKETS[token] is not kind:
            raise UnmatchedClosingBracketError(formula, end)
        weight, end = self.__parseMultiplier(formula, end + 1)
        return self.__mergeCounts({}, innerD, weight), end

    def __parseAtom(self, formula, pos):
        """Parse one element symbol and its optional multiplier.

        Example K4[ON(SO3)2]2
                ^^ ^^  ^^ atoms with and without multipliers
        """
        if formula[pos] not in string.ascii_letters:
            raise UnexpectedCharacterError(formula, pos)
        end = pos + 1
        while end < len(formula) and formula[end] in string.ascii_lowercase:
            end += 1
        symbol = formula[pos:end]
        if symbol[0] not in string.ascii_uppercase or len(symbol) > 2:
            raise InvalidAtomSymbolError(formula, pos, detail=symbol)
        count, end = self.__parseMultiplier(formula, end)
        return {symbol: count}, end

    def __parseMultiplier(self, formula, pos):
        """Parse an optional digit sequence at pos. An absent multiplier is 1.

        Returns:
            (int, int): multiplier value and the position following it
        """
        end = pos
        while end < len(formula) and formula[end] in string.digits:
            end += 1
        if end == pos:
            return 1, pos
        digits = formula[pos:end]
        value = digits.lstrip("0")
        # compare lengths first so huge literals are never converted
        if not value or len(value) > len(str(self.__maxMultiplier)) or int(value) > self.__maxMultiplier:
            raise InvalidMultiplierError(formula, pos, detail=digits)
        return int(value), end

    def __mergeCounts(self, countD, termD, weight=1):
        """Merge weighted term counts into a copy of countD, keeping the existing element order."""
        rD = dict(countD)
        for atom, num in termD.items():
            rD[atom] = rD.get(atom, 0) + num * weight
        return rD
