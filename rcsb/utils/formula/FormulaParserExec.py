##
# File:    FormulaParserExec.py
# Author:  jdw
# Date:    19-Oct-2026
#
# formula_parse [formula ...] [--input_file <path>] [--output_file <path>] [--max_depth N] [--debug]
#
# Updates:
#
##
"""
Command line entry point to parse molecular formulas and report element counts.
"""

__docformat__ = "restructuredtext en"
__author__ = "John Westbrook"
__email__ = "john.westbrook@rcsb.org"
__license__ = "Apache 2.0"

import argparse
import logging
import os
import sys

from rcsb.utils.formula import __version__
from rcsb.utils.formula.FormulaParseError import FormulaParseError
from rcsb.utils.formula.FormulaParser import FormulaParser
from rcsb.utils.io.MarshalUtil import MarshalUtil

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s]-%(module)s.%(funcName)s: %(message)s")
logger = logging.getLogger()


def parseFormulaList(formulaList, maxDepth=64):
    """Parse each formula in the input list.

    Args:
        formulaList (list): formula strings
        maxDepth (int, optional): maximum bracket nesting depth. Defaults to 64.

    Returns:
        (bool, list): True if all formulas parse, list of result dictionaries
                      {"formula": <str>, "atoms": [[<element>, <count>], ...]} or
                      {"formula": <str>, "error": <str>, "errorType": <str>, "position": <int>}
    """
    fp = FormulaParser(maxDepth=maxDepth)
    ok = True
    rL = []
    for formula in formulaList:
        try:
            atomL = fp.parse(formula)
            rL.append({"formula": formula, "atoms": [[atom, num] for atom, num in atomL]})
        except FormulaParseError as e:
            logger.debug("Failing for %r with %s", formula, str(e))
            rL.append({"formula": formula, "error": str(e), "errorType": type(e).__name__, "position": e.position})
            ok = False
    return ok, rL


def readFormulaList(filePath):
    mU = MarshalUtil()
    lineL = mU.doImport(filePath, fmt="list", enforceAscii=False, encodingErrors="strict", uncomment=False) or []
    return [line.strip() for line in lineL if line and line.strip()]


def exportResults(filePath, resultList):
    try:
        mU = MarshalUtil()
        dirPath = os.path.dirname(filePath)
        if dirPath:
            mU.mkdir(dirPath)
        ok = mU.doExport(filePath, resultList, fmt="json", indent=3)
        logger.info("Exported %d results to %s (status %r)", len(resultList), filePath, ok)
        return ok
    except Exception as e:
        logger.exception("Exporting %s failing with %s", filePath, str(e))
    return False


def main(argv=None):
    parser = argparse.ArgumentParser(description="Parse molecular formulas into element counts (version %s)" % __version__)
    parser.add_argument("formulas", nargs="*", help="Molecular formula(s), e.g. K4[ON(SO3)2]2")
    parser.add_argument("--input_file", default=None, help="Text file with one formula per line")
    parser.add_argument("--output_file", default=None, help="Export results to this JSON file")
    parser.add_argument("--max_depth", type=int, default=64, help="Maximum bracket nesting depth")
    parser.add_argument("--debug", default=False, action="store_true", help="Turn on verbose logging")
    args = parser.parse_args(argv)
    #
    if args.debug:
        logger.setLevel(logging.DEBUG)
    #
    formulaList = list(args.formulas)
    if args.input_file:
        if not os.access(args.input_file, os.R_OK):
            logger.error("Cannot read input file %s", args.input_file)
            return 1
        try:
            fileFormulaList = readFormulaList(args.input_file)
        except Exception as e:
            logger.exception("Reading %s failing with %s", args.input_file, str(e))
            return 1
        # undecodable files come back empty
        if not fileFormulaList and os.path.getsize(args.input_file) > 0:
            logger.error("No formulas read from %s", args.input_file)
            return 1
        formulaList.extend(fileFormulaList)
    if not formulaList:
        sys.stderr.write("Please provide a molecular formula as argument or with --input_file\n")
        return 1
    #
    ok, rL = parseFormulaList(formulaList, maxDepth=args.max_depth)
    for rD in rL:
        if "atoms" in rD:
            sys.stdout.write("Atoms: %r\n" % [tuple(atom) for atom in rD["atoms"]])
        else:
            sys.stdout.write("Error: %s\n" % rD["error"])
    #
    if args.output_file:
        ok = exportResults(args.output_file, rL) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
