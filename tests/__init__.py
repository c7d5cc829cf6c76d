# encoding: utf-8
import os

from mo_logs import Log

from mo_ini import IniParser, IniException

RESOURCES = os.path.join(os.path.dirname(os.path.abspath(__file__)), "resources")


def resource(name):
    return os.path.join(RESOURCES, name)


def parse(content, **kwargs):
    """
    Parse content with a fresh IniParser, return its IniResults
    """
    return IniParser(**kwargs).parse_string(content)


def runTests(tests, failureTests=False, **kwargs):
    """
    Parse each of a list of ini texts, each with a fresh IniParser, showing
    each text and the parsed results or the error.

    Parameters:
     - tests - list of ini texts
     - failureTests - (default= ``False``) indicates if these tests are expected to fail parsing
     - kwargs - given to each IniParser

    Returns: a (success, results) tuple, where success indicates that all tests succeeded
    (or all failed if ``failureTests`` is True), and results is a list of
    (text, IniResults or IniException)
    """
    success = True
    allResults = []
    for t in tests:
        try:
            Log.note("begin test on\n{{string|indent}}", string=t)
            result = parse(t, **kwargs)
        except IniException as cause:
            if not failureTests:
                Log.warning("FAIL", cause=cause)
                success = False
            result = cause
        else:
            if failureTests:
                Log.warning("EXPECTING FAIL")
                success = False
            else:
                Log.note("{{result}}", result=result.dump())
        allResults.append((t, result))

    return success, allResults
