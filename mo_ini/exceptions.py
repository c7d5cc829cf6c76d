# encoding: utf-8
from mo_ini.utils import render_token, EOF_MARKER


class IniException(Exception):
    """base exception class for all ini parsing errors"""

    __slots__ = ["file_name"]

    def __init__(self, file_name, message):
        Exception.__init__(self, message)
        self.file_name = file_name

    @property
    def message(self):
        return self.args[0]

    def __str__(self):
        return self.message


class IniFileNotFound(IniException):
    """
    The file could not be opened for reading.  The reason (missing, not
    readable, a directory, ...) is only available as ``__cause__``
    """

    def __init__(self, file_name):
        IniException.__init__(
            self, file_name, 'Can not open file "' + str(file_name) + '"'
        )


class IniSyntaxError(IniException):
    """
    The token stream does not match the grammar

    - lineno    - 1-based line of the offending token
    - token     - the offending Token; the last Token when input ended early
    - previous  - the Token before it, if any
    - following - the Token after it, if any
    - at_end    - True when input ended in the middle of a statement
    - state     - the State the engine was in
    """

    __slots__ = ["lineno", "token", "previous", "following", "state", "at_end"]

    def __init__(
        self, file_name, lineno, state, previous, token, following=None, at_end=False
    ):
        self.file_name = file_name
        self.lineno = lineno
        self.state = state
        self.previous = previous
        self.token = token
        self.following = following
        self.at_end = at_end
        IniException.__init__(self, file_name, self._build_message())

    def _build_message(self):
        message = (
            'Syntax error on file "'
            + str(self.file_name)
            + '" at line '
            + str(self.lineno)
            + ".\n..."
            + render_token(self.previous)
            + " ->"
            + render_token(self.token)
            + "<- "
        )
        if self.at_end:
            return message + EOF_MARKER
        return message + render_token(self.following) + "..."
