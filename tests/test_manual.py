"""Tests for the manual-section codec."""

import pytest

from codelock.manual import (
    ManualSectionKeyError,
    create_manual_section,
    empty_manual_sections,
    extract_manual_sections,
)

NO_SECTIONS = """
        class One extends Zero {
          constructor() {
            this.value = 1;
          }
        }
"""

MALFORMED = [
    "/* BEGIN MANUAL SECTION *//* END MANUAL SECTION */",
    "/* BEGIN MANUAL SECTION no_end_designator *//* END */",
    "/* BEGIN MANUAL SECTION key with whitespace *//* END MANUAL SECTION */",
]

MULTIPLE_SECTIONS = """
        /* BEGIN MANUAL SECTION custom-imports_empty_section */
        /* END MANUAL SECTION */

        class One extends Zero {
          constructor() {
            this.value = 1;
            /* BEGIN MANUAL SECTION One-constructor_with_code */
            console.log("custom constructor");
            /* BEGIN some other thing */
            console.log("more custom constructing");
            /* END some other thing */
            /* END MANUAL SECTION */
          }

          /* BEGIN MANUAL SECTION custom-methods_blank_line_section */

          /* END MANUAL SECTION */
        }
"""


def _empty_section(key):
    return f"/* BEGIN MANUAL SECTION {key} */\n/* END MANUAL SECTION */"


class TestCreateManualSection:
    @pytest.mark.parametrize("key", ["", "a ", "a b", "a\nb", "\t"])
    def test_rejects_empty_or_whitespace_keys(self, key):
        with pytest.raises(ManualSectionKeyError):
            create_manual_section(key, "CODE")

    def test_key_error_is_value_error(self):
        with pytest.raises(ValueError, match="should not be empty"):
            create_manual_section("", "CODE")

    def test_accepts_unusual_keys(self):
        key = "SomeSection_冠状病毒-<>{}()[]!@#$%^&*etc🦠"
        contents = 'console.log("Multiline section content");\n    undefined = "undefined";'
        generated = create_manual_section(key, contents)
        assert f"BEGIN MANUAL SECTION {key}" in generated
        assert contents in generated
        assert generated.endswith("END MANUAL SECTION */")

    def test_inserts_code_on_its_own_line(self):
        assert create_manual_section("key", "a();\nb();") == (
            "/* BEGIN MANUAL SECTION key */\n"
            "a();\n"
            "b();\n"
            "/* END MANUAL SECTION */"
        )

    def test_empty_content(self):
        assert create_manual_section("key", "") == _empty_section("key")
        assert create_manual_section("key", "  \n\n  ") == _empty_section("key")

    def test_trims_surrounding_blank_lines(self):
        content = "\n          magic();\n          moreMagic();\n        "
        assert create_manual_section("key", content) == (
            "/* BEGIN MANUAL SECTION key */\n"
            "magic();\n"
            "          moreMagic();\n"
            "/* END MANUAL SECTION */"
        )


class TestExtractManualSections:
    def test_ignores_code_without_sections(self):
        assert extract_manual_sections("") == {}
        assert extract_manual_sections(NO_SECTIONS) == {}

    @pytest.mark.parametrize("code", MALFORMED)
    def test_ignores_malformed_sections(self, code):
        assert extract_manual_sections(code) == {}

    def test_extracts_single_line_section(self):
        code = '/* BEGIN MANUAL SECTION key */console.log("code");/* END MANUAL SECTION */'
        assert extract_manual_sections(code) == {"key": 'console.log("code");'}

    def test_extracts_multiline_section(self):
        code = """
            this.value = 1;
            /* BEGIN MANUAL SECTION key */
            console.log("line one"); // Comment
            console.log("line two");
            /* END MANUAL SECTION */
        """
        assert extract_manual_sections(code) == {
            "key": 'console.log("line one"); // Comment\n            console.log("line two");',
        }

    def test_extracts_multiple_sections(self):
        assert extract_manual_sections(MULTIPLE_SECTIONS) == {
            "custom-imports_empty_section": "",
            "One-constructor_with_code": (
                'console.log("custom constructor");\n'
                "            /* BEGIN some other thing */\n"
                '            console.log("more custom constructing");\n'
                "            /* END some other thing */"
            ),
            "custom-methods_blank_line_section": "",
        }

    def test_round_trips_rendered_section(self):
        body = "\n  first();\n\n  second();  \n"
        assert extract_manual_sections(create_manual_section("k", body)) == {"k": body.strip()}

    def test_duplicate_key_last_occurrence_wins(self):
        code = create_manual_section("dup", "first") + "\n" + create_manual_section("dup", "second")
        assert extract_manual_sections(code) == {"dup": "second"}

    def test_body_with_end_designator_is_truncated(self):
        code = (
            "/* BEGIN MANUAL SECTION example */\n"
            "before();\n"
            "/* END MANUAL SECTION */\n"
            "after();\n"
            "/* END MANUAL SECTION */"
        )
        assert extract_manual_sections(code) == {"example": "before();"}


class TestEmptyManualSections:
    def test_passthrough_without_sections(self):
        assert empty_manual_sections("") == ""
        assert empty_manual_sections(NO_SECTIONS) == NO_SECTIONS

    @pytest.mark.parametrize("code", MALFORMED)
    def test_passthrough_malformed_sections(self, code):
        assert empty_manual_sections(code) == code

    @pytest.mark.parametrize("code", [
        "/* BEGIN MANUAL SECTION key *//* END MANUAL SECTION */",
        "/* BEGIN MANUAL SECTION key */\n/* END MANUAL SECTION */",
        "/* BEGIN MANUAL SECTION key */\n\n\n/* END MANUAL SECTION */",
    ])
    def test_resets_empty_section(self, code):
        assert empty_manual_sections(code) == _empty_section("key")

    def test_empties_single_line_section(self):
        code = '/* BEGIN MANUAL SECTION key */console.log("code");/* END MANUAL SECTION */'
        assert empty_manual_sections(code) == _empty_section("key")

    def test_empties_multiline_section(self):
        code = (
            "/* BEGIN MANUAL SECTION key */\n"
            'console.log("one");\nconsole.log("two");'
            "/* END MANUAL SECTION */"
        )
        assert empty_manual_sections(code) == _empty_section("key")

    def test_empties_multiple_sections(self):
        assert empty_manual_sections(MULTIPLE_SECTIONS) == """
        /* BEGIN MANUAL SECTION custom-imports_empty_section */
/* END MANUAL SECTION */

        class One extends Zero {
          constructor() {
            this.value = 1;
            /* BEGIN MANUAL SECTION One-constructor_with_code */
/* END MANUAL SECTION */
          }

          /* BEGIN MANUAL SECTION custom-methods_blank_line_section */
/* END MANUAL SECTION */
        }
"""

    def test_idempotent(self):
        once = empty_manual_sections(MULTIPLE_SECTIONS)
        assert empty_manual_sections(once) == once


EDGE_INPUTS = [
    "",
    "   \n\t  \n",
    "/* BEGIN MANUAL SECTION at_start */start();/* END MANUAL SECTION */\nrest();",
    "head();\n/* BEGIN MANUAL SECTION at_end */\nend();\n/* END MANUAL SECTION */",
    create_manual_section("a", "one();") + create_manual_section("b", "two();"),
    create_manual_section("ключ_冠状病毒🦠", "unicode();\n  more();"),
    create_manual_section("dup", "first") + "\n" + create_manual_section("dup", "second"),
    "/* BEGIN MANUAL SECTION k */\ninner();\n/* END MANUAL SECTION */\nafter();\n/* END MANUAL SECTION */",
    "\r\n/* BEGIN MANUAL SECTION crlf */\r\nx();\r\n/* END MANUAL SECTION */\r\n",
] + MALFORMED


class TestEmptyManualSectionsEdgeCases:
    @pytest.mark.parametrize("code", EDGE_INPUTS)
    def test_idempotent(self, code):
        once = empty_manual_sections(code)
        assert empty_manual_sections(once) == once

    @pytest.mark.parametrize("code", EDGE_INPUTS)
    def test_keeps_keys(self, code):
        assert extract_manual_sections(empty_manual_sections(code)).keys() == extract_manual_sections(code).keys()
