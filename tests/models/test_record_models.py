#!/usr/bin/env python3
"""
Tests for record models.
"""

import unittest

from ibadmin.models import FieldKind, FieldValue, IngestResult, IngestSettings, Record, Schema


class TestFieldValue(unittest.TestCase):
    """Test cases for FieldValue."""

    def test_coerce_text(self):
        value = FieldValue.coerce("abc")
        self.assertEqual(value.kind, FieldKind.TEXT)
        self.assertEqual(value.render(), "abc")

    def test_coerce_list(self):
        value = FieldValue.coerce(["a", "b"])
        self.assertTrue(value.is_list)
        self.assertEqual(value.items, ("a", "b"))
        self.assertEqual(value.render(), "a,b")
        self.assertEqual(value.render(";"), "a;b")

    def test_coerce_none_is_empty_text(self):
        value = FieldValue.coerce(None)
        self.assertEqual(value.kind, FieldKind.TEXT)
        self.assertTrue(value.is_empty())

    def test_coerce_keeps_field_value(self):
        value = FieldValue.of_text("x")
        self.assertIs(FieldValue.coerce(value), value)

    def test_to_python(self):
        self.assertEqual(FieldValue.of_list(["a"]).to_python(), ["a"])
        self.assertEqual(FieldValue.of_text("a").to_python(), "a")


class TestRecord(unittest.TestCase):
    """Test cases for Record."""

    def test_values_are_tagged(self):
        record = Record({"ip": "10.0.0.1"}, aliases=["a", "b"])
        self.assertEqual(record["ip"], FieldValue.of_text("10.0.0.1"))
        self.assertEqual(record["aliases"].kind, FieldKind.LIST)

    def test_preserves_field_order(self):
        record = Record({"b": "1", "a": "2"})
        self.assertEqual(list(record), ["b", "a"])

    def test_text_default(self):
        record = Record({"ip": "10.0.0.1"})
        self.assertEqual(record.text("ip"), "10.0.0.1")
        self.assertEqual(record.text("vlan", "none"), "none")

    def test_to_dict_and_equality(self):
        record = Record({"ip": "10.0.0.1", "aliases": ["a"]})
        self.assertEqual(record.to_dict(), {"ip": "10.0.0.1", "aliases": ["a"]})
        self.assertEqual(record, Record({"ip": "10.0.0.1", "aliases": ["a"]}))

    def test_record_is_read_only(self):
        record = Record({"ip": "10.0.0.1"})
        with self.assertRaises(TypeError):
            record["ip"] = "10.0.0.2"


class TestIngestModels(unittest.TestCase):
    """Test cases for ingestion settings and results."""

    def test_settings_defaults(self):
        settings = IngestSettings()
        self.assertEqual(settings.verbosity, 0)
        self.assertEqual(settings.report_every, 2500)

    def test_record_count(self):
        result = IngestResult(index={"a": Record({"k": "a"})}, schema=Schema(("k",), "k"))
        self.assertEqual(result.record_count, 1)
        self.assertEqual(result.source, "<stream>")


if __name__ == "__main__":
    unittest.main()
