# encoding: utf-8
from unittest import TestCase

from mo_testing.fuzzytestcase import FuzzyTestCase

from mo_ini import IniResults
from tests import parse


class TestResults(FuzzyTestCase):
    def test_lookup_creates_section(self):
        results = IniResults()
        self.assertNotIn("new", results)
        TestCase.assertEqual(self, results["new"], {})
        self.assertIn("new", results)

    def test_write_through_lookup(self):
        results = IniResults()
        results["a"]["k"] = "v"
        TestCase.assertEqual(self, results.sections, {"a": {"k": "v"}})

    def test_get_does_not_create(self):
        results = IniResults()
        self.assertIsNone(results.get("a"))
        self.assertEqual(results.get("a", "nothing"), "nothing")
        self.assertIsNone(results.value("a", "k"))
        self.assertEqual(results.value("a", "k", "default"), "default")
        self.assertEqual(len(results), 0)

    def test_set(self):
        results = IniResults()
        results.set("a", "k", "1")
        results.set("a", "k", "2")
        self.assertEqual(results.value("a", "k"), "2")

    def test_replace_section(self):
        results = IniResults({"a": {"x": "1"}})
        results["a"] = {"y": "2"}
        TestCase.assertEqual(self, results.sections, {"a": {"y": "2"}})

    def test_replace_section_needs_mapping(self):
        results = IniResults()
        with self.assertRaises("expecting a mapping"):
            results["a"] = "not a mapping"

    def test_delete(self):
        results = IniResults({"a": {"x": "1"}, "b": {"y": "2"}})
        del results["a"]
        TestCase.assertEqual(self, list(results), ["b"])

    def test_sorted_iteration(self):
        results = IniResults()
        for name in ["zeta", "alpha", "", "mid"]:
            results.set(name, "k", "v")
        TestCase.assertEqual(self, list(results), ["", "alpha", "mid", "zeta"])

    def test_sorted_keys(self):
        TestCase.assertEqual(self, list(parse("[a]\nz=1\na=2\nm=3\n")["a"]), ["a", "m", "z"])

        results = IniResults()
        for key in ["b", "c", "a", "b"]:
            results.set("s", key, key)
        TestCase.assertEqual(self, list(results["s"]), ["a", "b", "c"])

        results["t"] = {"y": "1", "x": "2"}
        TestCase.assertEqual(self, list(results["t"]), ["x", "y"])

    def test_clear(self):
        results = IniResults({"a": {"x": "1"}})
        results.clear()
        self.assertEqual(len(results), 0)
        TestCase.assertEqual(self, results.sections, {})

    def test_equality(self):
        results = IniResults({"a": {"x": "1"}})
        self.assertTrue(results == {"a": {"x": "1"}})
        self.assertTrue(results == IniResults({"a": {"x": "1"}}))
        self.assertTrue(results != {"a": {"x": "2"}})
        self.assertFalse(results == "a")

    def test_copy_is_independent(self):
        results = IniResults({"a": {"x": "1"}})
        other = results.copy()
        other.set("a", "x", "2")
        self.assertEqual(results.value("a", "x"), "1")

    def test_triples(self):
        results = parse("[b]\nz=1\ny=2\n[a]\nk=\n")
        TestCase.assertEqual(
            self,
            list(results.triples()),
            [("a", "k", ""), ("b", "y", "2"), ("b", "z", "1")],
        )

    def test_dump(self):
        results = parse("top=1\n[b]\nz=1\ny=2\n[a]\nk=\n")
        TestCase.assertEqual(
            self, results.dump(), "[][top]=1\n[a][k]=\n[b][y]=2\n[b][z]=1"
        )
        TestCase.assertEqual(self, str(results), results.dump())

    def test_dump_empty(self):
        TestCase.assertEqual(self, IniResults().dump(), "")

    def test_to_ini(self):
        results = IniResults({"b": {"x": "1", "e": ""}, "": {"top": "t"}, "a": {}})
        TestCase.assertEqual(self, results.to_ini(), "top=t\n[b]\ne=\nx=1\n")

    def test_round_trip(self):
        original = IniResults(
            {
                "": {"name": "root"},
                "server": {"host": "localhost", "port": "8080"},
                "client": {"retries": "3", "timeout": ""},
            }
        )
        TestCase.assertEqual(self, parse(original.to_ini()).sections, original.sections)

    def test_round_trip_drops_empty_sections(self):
        original = IniResults({"empty": {}, "full": {"k": "v"}})
        TestCase.assertEqual(self, parse(original.to_ini()).sections, {"full": {"k": "v"}})

    def test_deterministic(self):
        content = "; settings\nroot=1\n[a]\nx=1\nx=2\n[b]\ny=\n"
        first = parse(content)
        second = parse(content)
        TestCase.assertEqual(self, first.sections, second.sections)
        TestCase.assertEqual(self, first.dump(), second.dump())
