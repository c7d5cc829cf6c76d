# encoding: utf-8
from collections import namedtuple
from enum import Enum

from mo_future import is_text

from mo_ini import white
from mo_ini.white import check_white
from mo_ini.utils import Log, NEWLINE, RESERVED_CHARS, STRUCTURAL_CHARS


class TokenType(Enum):
    STRUCTURAL = "structural"
    NEWLINE = "newline"
    TEXT = "text"


class _EndOfStream(object):
    __slots__ = []

    def __bool__(self):
        return False

    def __repr__(self):
        return "EOS"


EOS = _EndOfStream()


class Token(namedtuple("Token", ["kind", "value", "start"])):
    """
    One lexical unit: a structural character, a newline, or trimmed text.
    ``start`` is the offset of the first consumed character in the source.
    """

    __slots__ = []

    @property
    def is_ident(self):
        # ALL TEXT QUALIFIES, EVEN THE EMPTY STRING LEFT BY A WHITESPACE-ONLY RUN
        return self.kind is TokenType.TEXT

    @property
    def is_newline(self):
        return self.kind is TokenType.NEWLINE

    def is_char(self, char):
        return self.kind is TokenType.STRUCTURAL and self.value == char

    def __str__(self):
        return self.value


def text_token(value, start=0):
    return Token(TokenType.TEXT, value, start)


def char_token(char, start=0):
    if char == NEWLINE:
        return Token(TokenType.NEWLINE, char, start)
    if len(char) != 1 or char not in STRUCTURAL_CHARS:
        Log.error("expecting one of {{chars|quote}}", chars=RESERVED_CHARS)
    return Token(TokenType.STRUCTURAL, char, start)


class Tokenizer(object):
    """
    Split ini text into Tokens, looking ahead at most one character

    :param content: the whole text to tokenize
    :param white: characters trimmed from both ends of text tokens
                  (default is ``white.CURRENT_WHITE_CHARS``)
    :param strict: drop text tokens that trim to nothing
    """

    def __init__(self, content, white=None, strict=False):
        if not is_text(content):
            Log.error(
                "expecting text to tokenize, not {{type}}", type=type(content).__name__
            )
        self.content = content
        self.white_chars = _current_white() if white is None else check_white(white)
        self.strict = strict
        self.loc = 0

    def peek(self):
        """
        :return: next character, without consuming it, or EOS
        """
        if self.loc >= len(self.content):
            return EOS
        return self.content[self.loc]

    def next_token(self):
        """
        :return: the next Token, or EOS when the content is exhausted
        """
        start = self.loc
        peeked = self.peek()
        if peeked is EOS:
            return EOS
        if peeked in RESERVED_CHARS:
            self.loc += 1
            return char_token(peeked, start)

        end = start
        content = self.content
        length = len(content)
        while end < length and content[end] not in RESERVED_CHARS:
            end += 1
        self.loc = end
        return text_token(content[start:end].strip(self.white_chars), start)

    def __iter__(self):
        while True:
            token = self.next_token()
            if token is EOS:
                return
            if self.strict and token.is_ident and not token.value:
                continue
            yield token


def _current_white():
    return white.CURRENT_WHITE_CHARS


def tokenize(content, white=None, strict=False):
    """
    :return: list of every Token in content
    """
    return list(Tokenizer(content, white=white, strict=strict))
