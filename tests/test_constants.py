"""Tests for input_settings.core.constants — verify documented values."""
from input_settings.core import constants


class TestConversionConstants:
    def test_separators(self):
        assert constants.DEFAULT_SEPARATOR == ","
        assert constants.RANGE_SEPARATOR == "-"

    def test_bool_literals_are_lower_case(self):
        assert constants.BOOL_TRUE == constants.BOOL_TRUE.lower()
        assert constants.BOOL_FALSE == constants.BOOL_FALSE.lower()


class TestMessageTemplates:
    def test_no_data(self):
        assert constants.MSG_NO_DATA.format(name="Foo") == 'variable "Foo" has no data'

    def test_file_templates(self):
        assert "not found" in constants.MSG_FILE_MISSING.format(path="p")
        assert "empty" in constants.MSG_FILE_EMPTY.format(path="p")

    def test_dir_templates(self):
        assert "not found" in constants.MSG_DIR_MISSING.format(path="p")
        assert "empty" in constants.MSG_DIR_EMPTY.format(path="p")
