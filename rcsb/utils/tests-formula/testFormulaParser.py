##
# File:    testFormulaParser.py
# Author:  J. Westbrook
# Date:    19-Oct-2026
# Version: 0.001
#
# Update:
#
#
##
"""
Tests for the molecular formula parser.

"""

__docformat__ = "restructuredtext en"
__author__ = "John Westbrook"
__email__ = "jwest@rcsb.rutgers.edu"
__license__ = "Apache 2.0"

import logging
import time
import unittest

from rcsb.utils.formula import __version__
from rcsb.utils.formula.FormulaParseError import (
    FormulaParseError,
    InvalidAtomSymbolError,
    InvalidMultiplierError,
    NestingTooDeepError,
    TrailingCharactersError,
    UnexpectedCharacterError,
    UnmatchedClosingBracketError,
    UnmatchedOpeningBracketError,
)
from rcsb.utils.formula.FormulaParser import BracketKind, FormulaParser

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s]-%(module)s.%(funcName)s: %(message)s")
logger = logging.getLogger()
logger.setLevel(logging.INFO)


class FormulaParserTests(unittest.TestCase):
    def setUp(self):
        self.__fp = FormulaParser()
        self.__startTime = time.time()
        logger.debug("Running tests on version %s", __version__)
        logger.info("Starting %s at %s", self.id(), time.strftime("%Y %m %d %H:%M:%S", time.localtime()))

    def tearDown(self):
        endTime = time.time()
        logger.info("Completed %s at %s (%.4f seconds)", self.id(), time.strftime("%Y %m %d %H:%M:%S", time.localtime()), endTime - self.__startTime)

    def __assertFails(self, formula, errorClass, position):
        with self.assertRaises(errorClass) as cm:
            self.__fp.parse(formula)
        self.assertEqual(cm.exception.position, position)
        self.assertEqual(cm.exception.formula, formula)
        logger.debug("Formula %r fails with %s", formula, str(cm.exception))
        return cm.exception

    def testParseSimple(self):
        """Test parsing formulas without groups ..."""
        self.assertEqual(self.__fp.parse("H"), [("H", 1)])
        self.assertEqual(self.__fp.parse("O2"), [("O", 2)])
        self.assertEqual(self.__fp.parse("H2O"), [("H", 2), ("O", 1)])
        self.assertEqual(self.__fp.parse("C6H12O6"), [("C", 6), ("H", 12), ("O", 6)])
        self.assertEqual(self.__fp.parse("NaCl"), [("Na", 1), ("Cl", 1)])

    def testParseGroups(self):
        """Test parsing nested groups with multipliers ..."""
        self.assertEqual(self.__fp.parse("Mg(OH)2"), [("Mg", 1), ("O", 2), ("H", 2)])
        self.assertEqual(self.__fp.parse("K4[ON(SO3)2]2"), [("K", 4), ("O", 14), ("N", 2), ("S", 4)])
        self.assertEqual(self.__fp.parse("{[(H)2]3}4"), [("H", 24)])
        self.assertEqual(self.__fp.parse("(CH3)3COH"), [("C", 4), ("H", 10), ("O", 1)])
        self.assertEqual(self.__fp.parse("Fe2(SO4)3"), [("Fe", 2), ("S", 3), ("O", 12)])

    def testParseEmpty(self):
        self.assertEqual(self.__fp.parse(""), [])
        self.assertEqual(self.__fp.parseFormula(""), {})
        self.assertEqual(self.__fp.parse("()"), [])

    def testParseFormulaDict(self):
        eD = self.__fp.parseFormula("K4[ON(SO3)2]2")
        self.assertEqual(eD, {"K": 4, "O": 14, "N": 2, "S": 4})
        self.assertEqual(list(eD.keys()), ["K", "O", "N", "S"])

    def testMultiplierDigits(self):
        """Test multi-digit, leading zero and very large multipliers ..."""
        self.assertEqual(self.__fp.parse("C12"), [("C", 12)])
        self.assertEqual(self.__fp.parse("H02"), [("H", 2)])
        self.assertEqual(self.__fp.parse("C18446744073709551615"), [("C", 2 ** 64 - 1)])
        self.assertEqual(self.__fp.parse("(C1000000)1000000"), [("C", 10 ** 12)])
        self.__assertFails("C18446744073709551616", InvalidMultiplierError, 1)
        self.__assertFails("C" + "9" * 5000, InvalidMultiplierError, 1)
        fp = FormulaParser(maxMultiplier=99)
        self.assertEqual(fp.parse("H99"), [("H", 99)])
        with self.assertRaises(InvalidMultiplierError):
            fp.parse("H100")

    def testOrdering(self):
        """Test first appearance order across group merges ..."""
        self.assertEqual(self.__fp.parse("O(HN)2H"), [("O", 1), ("H", 3), ("N", 2)])
        self.assertEqual(self.__fp.parse("[(SN)2C]O"), [("S", 2), ("N", 2), ("C", 1), ("O", 1)])
        self.assertEqual(self.__fp.parse("NI"), [("N", 1), ("I", 1)])
        self.assertEqual(self.__fp.parse("NiI"), [("Ni", 1), ("I", 1)])

    def testDeterministic(self):
        for formula in ["K4[ON(SO3)2]2", "Mg(OH)2", "C6H5(CH2)2{NH[CO]2}3"]:
            self.assertEqual(self.__fp.parse(formula), self.__fp.parse(formula))
            self.assertEqual(self.__fp.parse(formula), FormulaParser().parse(formula))

    def testMultiplierExpansion(self):
        """Test that a group with multiplier m contributes m times its interior counts ..."""
        for interior in ["OH", "SO4", "ON(SO3)2", "C2H5[NH2]3"]:
            innerD = self.__fp.parseFormula(interior)
            for mult in [1, 2, 7, 31]:
                for opener, closer in [(kind.opener, kind.closer) for kind in BracketKind]:
                    groupD = self.__fp.parseFormula("%s%s%s%d" % (opener, interior, closer, mult))
                    self.assertEqual(groupD, {atom: num * mult for atom, num in innerD.items()})

    def testSummation(self):
        self.assertEqual(self.__fp.parseFormula("CH3CH2OH"), {"C": 2, "H": 6, "O": 1})
        self.assertEqual(self.__fp.parseFormula("H2(H3)2[H]4H"), {"H": 13})
        self.assertEqual(self.__fp.parseFormula("(OH)2O3(O)"), {"O": 6, "H": 2})

    def testConcatenation(self):
        for fA, fB in [("H2O", "NaCl"), ("Mg(OH)2", "K4[N(SC3)2]2"), ("", "Fe2")]:
            unionD = dict(self.__fp.parseFormula(fA))
            unionD.update(self.__fp.parseFormula(fB))
            self.assertEqual(self.__fp.parseFormula(fA + fB), unionD)
            self.assertEqual(self.__fp.parse(fA + fB), self.__fp.parse(fA) + self.__fp.parse(fB))

    def testFails(self):
        """Test syntax errors and their positions ..."""
        self.__assertFails("H2O)", UnmatchedClosingBracketError, 3)
        self.__assertFails("Mg(OH2", UnmatchedOpeningBracketError, 2)
        self.__assertFails("pie", InvalidAtomSymbolError, 0)
        self.__assertFails("Mg(OH", UnmatchedOpeningBracketError, 2)
        self.__assertFails("Mg(OH}2", UnmatchedClosingBracketError, 5)
        self.__assertFails("H0", InvalidMultiplierError, 1)
        self.__assertFails("(OH)00", InvalidMultiplierError, 4)

    def testBracketErrors(self):
        self.__assertFails(")", UnmatchedClosingBracketError, 0)
        self.__assertFails("[(H)]]", UnmatchedClosingBracketError, 5)
        self.__assertFails("[(H])", UnmatchedClosingBracketError, 3)
        self.__assertFails("{H", UnmatchedOpeningBracketError, 0)
        self.__assertFails("(H[O)", UnmatchedClosingBracketError, 4)
        self.__assertFails("((H)", UnmatchedOpeningBracketError, 0)

    def testSymbolErrors(self):
        self.__assertFails("Hoh", InvalidAtomSymbolError, 0)
        self.__assertFails("Hco2", InvalidAtomSymbolError, 0)
        self.__assertFails("NaCl(ab)", InvalidAtomSymbolError, 5)
        err = self.__assertFails("CObalt", InvalidAtomSymbolError, 1)
        self.assertEqual(err.detail, "Obalt")

    def testCharacterErrors(self):
        self.__assertFails("H2 O", UnexpectedCharacterError, 2)
        self.__assertFails("H2O+", UnexpectedCharacterError, 3)
        self.__assertFails("Hé", UnexpectedCharacterError, 1)
        self.__assertFails("(2H)", UnexpectedCharacterError, 1)
        self.__assertFails("2H2O", TrailingCharactersError, 0)
        err = self.__assertFails("H2O)3", UnmatchedClosingBracketError, 3)
        self.assertEqual(err.character, ")")

    def testFirstErrorReported(self):
        self.__assertFails("xH2O)", InvalidAtomSymbolError, 0)
        self.__assertFails("H0(O", InvalidMultiplierError, 1)
        self.__assertFails("H2O)(", UnmatchedClosingBracketError, 3)

    def testNestingDepth(self):
        deepOk = "(" * 64 + "H" + ")" * 64
        self.assertEqual(self.__fp.parse(deepOk), [("H", 1)])
        self.__assertFails("(" * 65 + "H" + ")" * 65, NestingTooDeepError, 64)
        self.__assertFails("(" * 1000, NestingTooDeepError, 64)
        fp = FormulaParser(maxDepth=2)
        self.assertEqual(fp.parse("[(H2)2]2"), [("H", 8)])
        with self.assertRaises(NestingTooDeepError):
            fp.parse("{[(H2)2]2}")

    def testErrorMessage(self):
        err = self.__assertFails("H2O)", UnmatchedClosingBracketError, 3)
        self.assertIsInstance(err, FormulaParseError)
        self.assertIsInstance(err, ValueError)
        self.assertEqual(str(err), "Unmatched closing bracket ')' at position 3 in 'H2O)'")
        err = self.__assertFails("H2(O", UnmatchedOpeningBracketError, 2)
        self.assertEqual(str(err), "Unmatched opening bracket '(' at position 2 in 'H2(O'")
        err = self.__assertFails("He0", InvalidMultiplierError, 2)
        self.assertEqual(str(err), "Invalid multiplier '0' at position 2 in 'He0'")


def parserSuite():
    suiteSelect = unittest.TestSuite()
    suiteSelect.addTest(FormulaParserTests("testParseSimple"))
    suiteSelect.addTest(FormulaParserTests("testParseGroups"))
    suiteSelect.addTest(FormulaParserTests("testParseEmpty"))
    suiteSelect.addTest(FormulaParserTests("testParseFormulaDict"))
    suiteSelect.addTest(FormulaParserTests("testMultiplierDigits"))
    suiteSelect.addTest(FormulaParserTests("testOrdering"))
    return suiteSelect


def propertySuite():
    suiteSelect = unittest.TestSuite()
    suiteSelect.addTest(FormulaParserTests("testDeterministic"))
    suiteSelect.addTest(FormulaParserTests("testMultiplierExpansion"))
    suiteSelect.addTest(FormulaParserTests("testSummation"))
    suiteSelect.addTest(FormulaParserTests("testConcatenation"))
    return suiteSelect


def errorSuite():
    suiteSelect = unittest.TestSuite()
    suiteSelect.addTest(FormulaParserTests("testFails"))
    suiteSelect.addTest(FormulaParserTests("testBracketErrors"))
    suiteSelect.addTest(FormulaParserTests("testSymbolErrors"))
    suiteSelect.addTest(FormulaParserTests("testCharacterErrors"))
    suiteSelect.addTest(FormulaParserTests("testFirstErrorReported"))
    suiteSelect.addTest(FormulaParserTests("testNestingDepth"))
    suiteSelect.addTest(FormulaParserTests("testErrorMessage"))
    return suiteSelect


if __name__ == "__main__":
    mySuite = parserSuite()
    unittest.TextTestRunner(verbosity=2).run(mySuite)

    mySuite = propertySuite()
    unittest.TextTestRunner(verbosity=2).run(mySuite)

    mySuite = errorSuite()
    unittest.TextTestRunner(verbosity=2).run(mySuite)
