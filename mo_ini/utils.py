# encoding: utf-8
from mo_future import is_text
from mo_logs import Log

OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
EQUALS = "="
SEMICOLON = ";"
NEWLINE = "\n"

STRUCTURAL_CHARS = OPEN_BRACKET + CLOSE_BRACKET + EQUALS + SEMICOLON
RESERVED_CHARS = STRUCTURAL_CHARS + NEWLINE

NEWLINE_MARKER = "LF"
EOF_MARKER = "EOF"


def noop(*args):
    return


def render_token(token):
    """
    Text of a token as shown in diagnostics; newlines become LF
    :param token: Token, or None when there is no token at that position
    """
    if token is None:
        return ""
    if token.value == NEWLINE:
        return NEWLINE_MARKER
    return token.value


def expect_text(value, name):
    if not is_text(value):
        Log.error(
            "expecting {{name}} to be text, not {{type}}",
            name=name,
            type=type(value).__name__,
        )
    return value
