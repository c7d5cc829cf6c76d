# encoding: utf-8
from mo_ini.core import IniParser
from mo_ini.engine import Engine, State, DebugActions
from mo_ini.exceptions import IniException, IniFileNotFound, IniSyntaxError
from mo_ini.results import IniResults
from mo_ini.tokens import EOS, Token, TokenType, Tokenizer, tokenize
from mo_ini.utils import RESERVED_CHARS
from mo_ini.white import default_whitespace, set_default_whitespace, DEFAULT_WHITE_CHARS

__all__ = [
    "IniParser",
    "IniResults",
    "IniException",
    "IniFileNotFound",
    "IniSyntaxError",
    "Engine",
    "State",
    "DebugActions",
    "EOS",
    "Token",
    "TokenType",
    "Tokenizer",
    "tokenize",
    "default_whitespace",
    "set_default_whitespace",
    "DEFAULT_WHITE_CHARS",
    "RESERVED_CHARS",
]
