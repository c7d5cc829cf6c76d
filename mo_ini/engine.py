# encoding: utf-8
from collections import namedtuple
from enum import IntEnum

from mo_logs import Log

from mo_ini.exceptions import IniSyntaxError
from mo_ini.tokens import Token
from mo_ini.utils import (
    CLOSE_BRACKET,
    EQUALS,
    OPEN_BRACKET,
    SEMICOLON,
    noop,
    render_token,
)


class State(IntEnum):
    START = 0  # statement start
    SECTION_NAME = 1  # after [
    SECTION_CLOSE = 2  # after [name
    EQUALS = 3  # after key
    VALUE = 4  # after key=
    COMMENT = 5  # after ;


DebugActions = namedtuple("DebugActions", ["TRY", "MATCH", "FAIL"])


class Engine(object):
    """
    Finite state machine that validates a token stream and writes every
    assignment it recognizes into an IniResults
    """

    def __init__(self, file_name=""):
        self.file_name = file_name
        self.debugActions = DebugActions(noop, noop, noop)

    def set_debug_actions(self, try_action=None, match_action=None, fail_action=None):
        """
        Enable display of debugging messages while running the state machine.
        """
        self.debugActions = DebugActions(
            try_action or _defaultTryDebugAction,
            match_action or _defaultMatchDebugAction,
            fail_action or _defaultFailDebugAction,
        )
        return self

    def run(self, tokens, results):
        """
        :param tokens: list of Token
        :param results: IniResults to receive the assignments
        :return: results
        """
        debug = self.debugActions
        state = State.START
        section = ""  # CURRENT SECTION, UNTIL THE NEXT HEADER
        pending = None  # SECTION NAME, OR KEY, SEEN BUT NOT YET COMMITTED
        lineno = 1

        for i, token in enumerate(tokens):
            if not isinstance(token, Token):
                Log.error("expecting Token, not {{type}}", type=type(token).__name__)
            debug.TRY(state, token)

            if state == State.START:
                if token.is_char(OPEN_BRACKET):
                    new_state = State.SECTION_NAME
                elif token.is_ident:
                    pending = token.value
                    new_state = State.EQUALS
                elif token.is_char(SEMICOLON):
                    new_state = State.COMMENT
                elif token.is_newline:
                    lineno += 1
                    new_state = State.START
                else:
                    new_state = None
            elif state == State.SECTION_NAME:
                if token.is_ident:
                    pending = token.value
                    new_state = State.SECTION_CLOSE
                else:
                    new_state = None
            elif state == State.SECTION_CLOSE:
                if token.is_char(CLOSE_BRACKET):
                    section = pending
                    new_state = State.START
                else:
                    new_state = None
            elif state == State.EQUALS:
                if token.is_char(EQUALS):
                    new_state = State.VALUE
                else:
                    new_state = None
            elif state == State.VALUE:
                if token.is_ident:
                    results.set(section, pending, token.value)
                    new_state = State.START
                elif token.is_newline:
                    results.set(section, pending, "")
                    lineno += 1
                    new_state = State.START
                else:
                    new_state = None
            else:  # State.COMMENT
                if token.is_ident:
                    new_state = State.START
                else:
                    new_state = None

            if new_state is None:
                debug.FAIL(state, token)
                raise IniSyntaxError(
                    self.file_name,
                    lineno,
                    state,
                    tokens[i - 1] if i > 0 else None,
                    token,
                    tokens[i + 1] if i + 1 < len(tokens) else None,
                )
            if new_state == State.START:
                pending = None
            debug.MATCH(state, token, new_state)
            state = new_state

        if state != State.START:
            debug.FAIL(state, None)
            raise IniSyntaxError(
                self.file_name,
                lineno,
                state,
                tokens[-2] if len(tokens) > 1 else None,
                tokens[-1],
                at_end=True,
            )
        return results


def _defaultTryDebugAction(state, token):
    Log.note(
        "Try {{token|quote}} in state {{state}}",
        token=render_token(token),
        state=state.name,
    )


def _defaultMatchDebugAction(state, token, new_state):
    Log.note(
        "Matched {{token|quote}}: {{state}} -> {{new_state}}",
        token=render_token(token),
        state=state.name,
        new_state=new_state.name,
    )


def _defaultFailDebugAction(state, token):
    if token is None:
        Log.note("Input ended in state {{state}}", state=state.name)
    else:
        Log.note(
            "No transition for {{token|quote}} in state {{state}}",
            token=render_token(token),
            state=state.name,
        )
