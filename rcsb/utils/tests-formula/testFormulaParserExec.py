##
# File:    testFormulaParserExec.py
# Author:  J. Westbrook
# Date:    19-Oct-2026
# Version: 0.001
#
# Update:
#
#
##
"""
Tests for the formula parser command line entry point.

"""

__docformat__ = "restructuredtext en"
__author__ = "John Westbrook"
__email__ = "jwest@rcsb.rutgers.edu"
__license__ = "Apache 2.0"

import io
import logging
import os
import time
import unittest
from unittest import mock

from rcsb.utils.formula import __version__
from rcsb.utils.formula.FormulaParserExec import main, parseFormulaList, readFormulaList
from rcsb.utils.io.MarshalUtil import MarshalUtil

HERE = os.path.abspath(os.path.dirname(__file__))
TOPDIR = os.path.dirname(os.path.dirname(os.path.dirname(HERE)))

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s]-%(module)s.%(funcName)s: %(message)s")
logger = logging.getLogger()
logger.setLevel(logging.INFO)


class FormulaParserExecTests(unittest.TestCase):
    def setUp(self):
        self.__workPath = os.path.join(HERE, "test-output")
        self.__dataPath = os.path.join(HERE, "test-data")
        self.__mU = MarshalUtil(workPath=self.__workPath)
        self.__mU.mkdir(self.__workPath)
        self.__startTime = time.time()
        logger.debug("Running tests on version %s", __version__)
        logger.info("Starting %s at %s", self.id(), time.strftime("%Y %m %d %H:%M:%S", time.localtime()))

    def tearDown(self):
        endTime = time.time()
        logger.info("Completed %s at %s (%.4f seconds)", self.id(), time.strftime("%Y %m %d %H:%M:%S", time.localtime()), endTime - self.__startTime)

    def __runMain(self, argv):
        with mock.patch("sys.stdout", new_callable=io.StringIO) as mockOut, mock.patch("sys.stderr", new_callable=io.StringIO) as mockErr:
            status = main(argv)
        return status, mockOut.getvalue(), mockErr.getvalue()

    def testParseFormulaList(self):
        ok, rL = parseFormulaList(["H2O", "Mg(OH)2"])
        self.assertTrue(ok)
        self.assertEqual(rL, [{"formula": "H2O", "atoms": [["H", 2], ["O", 1]]}, {"formula": "Mg(OH)2", "atoms": [["Mg", 1], ["O", 2], ["H", 2]]}])
        #
        ok, rL = parseFormulaList(["H2O", "H2O)"])
        self.assertFalse(ok)
        self.assertEqual(rL[1]["errorType"], "UnmatchedClosingBracketError")
        self.assertEqual(rL[1]["position"], 3)
        #
        ok, rL = parseFormulaList(["((H))"], maxDepth=1)
        self.assertFalse(ok)
        self.assertEqual(rL[0]["errorType"], "NestingTooDeepError")

    def testReadFormulaList(self):
        fL = readFormulaList(os.path.join(self.__dataPath, "formulas.txt"))
        self.assertEqual(fL, ["H2O", "Mg(OH)2", "K4[ON(SO3)2]2", "C6H12O6"])

    def testMainConsole(self):
        status, out, _ = self.__runMain(["K4[ON(SO3)2]2"])
        self.assertEqual(status, 0)
        self.assertEqual(out, "Atoms: [('K', 4), ('O', 14), ('N', 2), ('S', 4)]\n")
        #
        status, out, _ = self.__runMain(["H2O", "Mg(OH2"])
        self.assertEqual(status, 1)
        lineL = out.splitlines()
        self.assertEqual(lineL[0], "Atoms: [('H', 2), ('O', 1)]")
        self.assertTrue(lineL[1].startswith("Error: Unmatched opening bracket"))

    def testMainNoInput(self):
        status, out, err = self.__runMain([])
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn("Please provide a molecular formula", err)

    def testMainExport(self):
        outPath = os.path.join(self.__workPath, "formula-results.json")
        status, out, _ = self.__runMain(["--input_file", os.path.join(self.__dataPath, "formulas.txt"), "--output_file", outPath])
        self.assertEqual(status, 0)
        self.assertEqual(len(out.splitlines()), 4)
        rL = self.__mU.doImport(outPath, fmt="json")
        self.assertEqual(len(rL), 4)
        self.assertEqual(rL[2], {"formula": "K4[ON(SO3)2]2", "atoms": [["K", 4], ["O", 14], ["N", 2], ["S", 4]]})
        #
        outPath = os.path.join(self.__workPath, "formula-results-bad.json")
        status, _, _ = self.__runMain(["H2", "--input_file", os.path.join(self.__dataPath, "formulas-bad.txt"), "--output_file", outPath])
        self.assertEqual(status, 1)
        rL = self.__mU.doImport(outPath, fmt="json")
        self.assertEqual([rD["formula"] for rD in rL], ["H2", "NaCl", "Mg(OH}2", "pie"])
        self.assertEqual(rL[2]["errorType"], "UnmatchedClosingBracketError")
        self.assertEqual(rL[2]["position"], 5)
        self.assertEqual(rL[3]["errorType"], "InvalidAtomSymbolError")
        self.assertNotIn("error", rL[1])

    def testMainMissingInputFile(self):
        status, out, _ = self.__runMain(["--input_file", os.path.join(self.__dataPath, "does-not-exist.txt")])
        self.assertEqual(status, 1)
        self.assertEqual(out, "")

    def testMainNonAsciiInputFile(self):
        """Test that file formulas reach the parser unaltered ..."""
        outPath = os.path.join(self.__workPath, "formula-results-nonascii.json")
        status, out, _ = self.__runMain(["--input_file", os.path.join(self.__dataPath, "formulas-nonascii.txt"), "--output_file", outPath])
        self.assertEqual(status, 1)
        lineL = out.splitlines()
        self.assertEqual(len(lineL), 3)
        self.assertEqual(lineL[0], "Atoms: [('H', 2), ('O', 1)]")
        self.assertEqual(lineL[1], "Error: Unexpected character 'é' at position 1 in 'Hé'")
        self.assertEqual(lineL[2], "Error: Unexpected character '#' at position 0 in '#H2'")
        rL = self.__mU.doImport(outPath, fmt="json")
        self.assertEqual([rD["formula"] for rD in rL], ["H2O", "Hé", "#H2"])
        self.assertEqual(rL[1]["position"], 1)

    def testMainUndecodableInputFile(self):
        filePath = os.path.join(self.__workPath, "formulas-undecodable.txt")
        with open(filePath, "wb") as ofh:
            ofh.write(b"H\xff2O\n")
        status, out, _ = self.__runMain(["--input_file", filePath])
        self.assertEqual(status, 1)
        self.assertEqual(out, "")

    def testMainExportFailure(self):
        status, out, _ = self.__runMain(["H2O", "--output_file", "/proc/not-a-directory/formula-results.json"])
        self.assertEqual(status, 1)
        self.assertEqual(out, "Atoms: [('H', 2), ('O', 1)]\n")

    def testMainMaxDepth(self):
        status, out, _ = self.__runMain(["--max_depth", "1", "((H))"])
        self.assertEqual(status, 1)
        self.assertTrue(out.startswith("Error: Bracket nesting too deep"))
        status, out, _ = self.__runMain(["--max_depth", "2", "((H))"])
        self.assertEqual(status, 0)
        self.assertEqual(out, "Atoms: [('H', 1)]\n")

    def testMainDebug(self):
        rootLogger = logging.getLogger()
        try:
            status, out, _ = self.__runMain(["--debug", "H2O"])
            self.assertEqual(status, 0)
            self.assertEqual(out, "Atoms: [('H', 2), ('O', 1)]\n")
            self.assertEqual(rootLogger.getEffectiveLevel(), logging.DEBUG)
        finally:
            rootLogger.setLevel(logging.INFO)


def execSuite():
    suiteSelect = unittest.TestSuite()
    suiteSelect.addTest(FormulaParserExecTests("testParseFormulaList"))
    suiteSelect.addTest(FormulaParserExecTests("testReadFormulaList"))
    suiteSelect.addTest(FormulaParserExecTests("testMainConsole"))
    suiteSelect.addTest(FormulaParserExecTests("testMainNoInput"))
    suiteSelect.addTest(FormulaParserExecTests("testMainExport"))
    suiteSelect.addTest(FormulaParserExecTests("testMainMissingInputFile"))
    suiteSelect.addTest(FormulaParserExecTests("testMainNonAsciiInputFile"))
    suiteSelect.addTest(FormulaParserExecTests("testMainUndecodableInputFile"))
    suiteSelect.addTest(FormulaParserExecTests("testMainExportFailure"))
    suiteSelect.addTest(FormulaParserExecTests("testMainMaxDepth"))
    suiteSelect.addTest(FormulaParserExecTests("testMainDebug"))
    return suiteSelect


if __name__ == "__main__":
    mySuite = execSuite()
    unittest.TextTestRunner(verbosity=2).run(mySuite)
