# encoding: utf-8
from contextlib import contextmanager
from copy import copy

from mo_ini.utils import expect_text, RESERVED_CHARS, Log

DEFAULT_WHITE_CHARS = " \n\t\r"
CURRENT_WHITE_CHARS = copy(DEFAULT_WHITE_CHARS)


def set_default_whitespace(chars):
    """
    Set the characters trimmed from both ends of every key, value and section
    name, for tokenizers created from now on
    """
    global CURRENT_WHITE_CHARS

    CURRENT_WHITE_CHARS = copy(check_white(chars))


def check_white(chars):
    """
    :return: chars, if they can be trimmed without eating a structural character
    """
    expect_text(chars, "whitespace")
    structural = [c for c in chars if c in RESERVED_CHARS and c != "\n"]
    if structural:
        Log.error(
            "can not use {{chars|quote}} as whitespace", chars="".join(structural)
        )
    return chars


@contextmanager
def default_whitespace(chars):
    """
    Overrides the default whitespace chars

    Example::

        # default whitespace chars are space, <TAB>, CR and newline
        tokenize("[ a ]")  # -> [, a, ]

        # keep the spaces, only strip tabs
        with default_whitespace("\t"):
            tokenize("[ a ]")  # -> [, " a ", ]
    """
    global CURRENT_WHITE_CHARS

    old_value = CURRENT_WHITE_CHARS
    set_default_whitespace(chars)
    try:
        yield
    finally:
        CURRENT_WHITE_CHARS = old_value
