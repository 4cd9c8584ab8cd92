"""Tests for identifier normalization and splitting."""

import pytest

from classloader.identifiers import is_legacy_identifier
from classloader.identifiers import normalize_identifier
from classloader.identifiers import parse_identifier
from classloader.identifiers import split_identifier


class TestNormalize:
    def test_strips_whitespace_and_separators(self):
        assert normalize_identifier("  .App.Model.User. ") == ("App.Model.User", "App.Model.User")

    def test_strips_backslash_separator(self):
        stripped, normalized = normalize_identifier("\\App\\Model\\", separator="\\")
        assert stripped == normalized == "App\\Model"

    def test_legacy_flat_identifier_is_rewritten(self):
        assert normalize_identifier("App_Model_User") == ("App_Model_User", "App.Model.User")

    def test_hierarchical_identifier_keeps_legacy_separators(self):
        stripped, normalized = normalize_identifier("App.Sub_Name.Class_Name")
        assert normalized == "App.Sub_Name.Class_Name"

    def test_legacy_handling_can_be_disabled(self):
        assert normalize_identifier("App_Model_User", legacy_separator=None) == ("App_Model_User", "App_Model_User")

    def test_none_is_empty(self):
        assert normalize_identifier(None) == ("", "")


class TestIsLegacy:
    @pytest.mark.parametrize(
        "identifier,expected",
        [
            ("App_Model_User", True),
            ("App.Model_User", False),
            ("SingleName", False),
            ("", False),
        ],
    )
    def test_decision_is_made_for_whole_identifier(self, identifier, expected):
        assert is_legacy_identifier(identifier) is expected


class TestSplit:
    def test_splits_at_last_separator(self):
        assert split_identifier("App.Model.User") == (("App", "Model"), "User")

    def test_no_separator(self):
        assert split_identifier("User") == ((), "User")


class TestParse:
    def test_parse_hierarchical(self):
        name = parse_identifier("App\\Controller\\TestController", separator="\\")

        assert name is not None
        assert name.segments == ("App", "Controller")
        assert name.simple_name == "TestController"
        assert name.top_level == "App"
        assert name.module_name == "App.Controller.TestController"

    def test_parse_legacy_keeps_raw_for_module_name(self):
        name = parse_identifier("App_Model_User")

        assert name is not None
        assert name.segments == ("App", "Model")
        assert name.simple_name == "User"
        assert name.module_name == "App_Model_User"

    def test_parse_without_namespace(self):
        name = parse_identifier("SingleName")

        assert name is not None
        assert name.segments == ()
        assert name.top_level is None

    @pytest.mark.parametrize("identifier", ["", "   ", "...", None, "App..User", "App__User"])
    def test_malformed_identifiers(self, identifier):
        assert parse_identifier(identifier) is None

    @pytest.mark.parametrize("identifier", ["App._private", "App.Model_", "App.Model__User"])
    def test_simple_name_with_empty_legacy_piece_is_malformed(self, identifier):
        assert parse_identifier(identifier) is None

    def test_leading_legacy_separator_allowed_when_legacy_disabled(self):
        name = parse_identifier("App._private", legacy_separator=None)

        assert name is not None
        assert name.simple_name == "_private"

    def test_legacy_separator_in_intermediate_segment_is_allowed(self):
        name = parse_identifier("App._internal.User")

        assert name is not None
        assert name.segments == ("App", "_internal")
