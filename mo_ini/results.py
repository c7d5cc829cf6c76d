# encoding: utf-8
from collections.abc import Mapping, MutableMapping

from mo_ini.utils import Log, expect_text


class IniResults(MutableMapping):
    """
    Parsed ini content: section name -> {key name: value}

    Looking up a section that does not exist creates it, empty.  Sections
    iterate in sorted order, and so do the keys of each section.

    Example::

        results = IniParser().parse_string("[users]\\nK = 8\\n")
        results["users"]["K"]  # -> "8"
        results["missing"]  # -> {}
    """

    __slots__ = ["sections"]

    def __init__(self, sections=None):
        self.sections = {}
        if sections:
            for name, keys in sections.items():
                self[name] = keys

    def __getitem__(self, section):
        return self.sections.setdefault(section, {})

    def __setitem__(self, section, keys):
        if not isinstance(keys, Mapping):
            Log.error(
                "expecting a mapping of key to value for section {{section|quote}}",
                section=section,
            )
        self.sections[section] = dict(sorted(keys.items()))

    def __delitem__(self, section):
        del self.sections[section]

    def __contains__(self, section):
        return section in self.sections

    def __iter__(self):
        return iter(sorted(self.sections))

    def __len__(self):
        return len(self.sections)

    def __eq__(self, other):
        if isinstance(other, IniResults):
            return self.sections == other.sections
        if isinstance(other, Mapping):
            return self.sections == dict(other)
        return False

    def __ne__(self, other):
        return not (self == other)

    __hash__ = None

    def get(self, section, default=None):
        return self.sections.get(section, default)

    def set(self, section, key, value):
        """
        Assign one value; the last assignment to a key wins.  Keys are kept
        in sorted order; keys written through ``results[section][key]`` are not.
        """
        keys = self[section]
        if key in keys or not keys or key > next(reversed(keys)):
            keys[key] = value
            return
        keys[key] = value
        ordered = sorted(keys.items())
        keys.clear()
        keys.update(ordered)

    def value(self, section, key, default=None):
        """
        :return: the value of key in section, without creating either
        """
        return self.sections.get(section, {}).get(key, default)

    def clear(self):
        self.sections.clear()

    def copy(self):
        return IniResults(self.sections)

    def triples(self):
        """
        :return: generator of (section, key, value), sorted by section then key
        """
        for section in self:
            keys = self.sections[section]
            for key in sorted(keys):
                yield section, key, keys[key]

    def dump(self):
        """
        One ``[section][key]=value`` line per value
        """
        return "\n".join(
            "[" + section + "][" + key + "]=" + value
            for section, key, value in self.triples()
        )

    def to_ini(self):
        """
        Render as ini text.  Keys of the unnamed section come first, with no
        header.  Sections without keys are not written.
        """
        output = []
        for section in self:
            keys = self.sections[section]
            if not keys:
                continue
            if section:
                output.append("[" + expect_text(section, "section") + "]\n")
            for key in sorted(keys):
                output.append(key + "=" + expect_text(keys[key], "value") + "\n")
        return "".join(output)

    def __repr__(self):
        return "IniResults(" + repr(self.sections) + ")"

    def __str__(self):
        return self.dump()
