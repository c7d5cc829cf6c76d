# encoding: utf-8
import sys
from threading import RLock

from mo_dots import Data
from mo_future import is_text

from mo_ini.engine import Engine
from mo_ini.exceptions import IniFileNotFound
from mo_ini.results import IniResults
from mo_ini.tokens import tokenize
from mo_ini.white import check_white

locker = RLock()


def entrypoint(func):
    def output(*args, **kwargs):
        with locker:
            return func(*args, **kwargs)

    output.__name__ = func.__name__
    output.__doc__ = func.__doc__
    return output


class IniParser(object):
    """
    Read ini files into an IniResults

    Example::

        config = IniParser("config.ini")
        config.read()
        config["server"]["port"]  # -> "8080"

    Parsing again adds to the same results; call ``clear()`` to start over.
    """

    def __init__(self, file_name="", white=None, strict=False):
        self.parser_config = Data(strict=strict)
        self.file_name = file_name
        if white is not None:
            self.parser_config.white = check_white(white)
        self.engine = Engine(file_name)
        self.results = IniResults()

    @property
    def file_name(self):
        file_name = self.parser_config.file_name
        return file_name if is_text(file_name) else ""

    @file_name.setter
    def file_name(self, file_name):
        self.parser_config.file_name = "" if file_name is None else str(file_name)

    def __getitem__(self, section):
        return self.results[section]

    def __contains__(self, section):
        return section in self.results

    def clear(self):
        self.results.clear()

    def set_debug_actions(self, try_action=None, match_action=None, fail_action=None):
        self.engine.set_debug_actions(try_action, match_action, fail_action)
        return self

    def read(self):
        """
        Parse the file given to the constructor
        """
        return self.parse_file(self.file_name)

    @entrypoint
    def parse_file(self, file_or_filename):
        """
        Execute the parser on the given file or filename.
        If a filename is specified (instead of a file object),
        the entire file is opened, read, and closed before parsing.
        """
        if hasattr(file_or_filename, "read"):
            file_name = getattr(file_or_filename, "name", None)
            if not is_text(file_name):
                file_name = self.file_name
            content = file_or_filename.read()
        else:
            file_name = file_or_filename
            try:
                with open(file_or_filename, "r", encoding="utf8") as f:
                    content = f.read()
            except (OSError, UnicodeDecodeError) as cause:
                problem = IniFileNotFound(str(file_name))
                problem.__cause__ = cause
                raise problem
        return self.parse_string(content, file_name=str(file_name))

    @entrypoint
    def parse_string(self, content, file_name=None):
        """
        Parse ini text into ``self.results``

        :param content: the whole ini text
        :param file_name: name shown in syntax errors (default ``self.file_name``)
        :return: self.results
        """
        white = self.parser_config.white
        tokens = tokenize(
            content,
            white=white if is_text(white) else None,
            strict=bool(self.parser_config.strict),
        )
        engine = self.engine
        engine.file_name = self.file_name if file_name is None else file_name
        return engine.run(tokens, self.results)

    def dump(self):
        return self.results.dump()

    def print(self, file=None):
        """
        Write ``[section][key]=value`` for every value, one per line
        """
        out = file or sys.stdout
        text = self.results.dump()
        if text:
            out.write(text + "\n")

    def to_ini(self):
        return self.results.to_ini()
