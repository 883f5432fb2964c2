"""Manual-section codec.

Manual sections are delimited regions of generated code that may be edited
by hand and are carried over into the next generation pass:

    /* BEGIN MANUAL SECTION <key> */
    hand-written code
    /* END MANUAL SECTION */

A section ends at the first end designator after its begin designator, so a
body that itself contains the end designator text is cut short there.
"""

from __future__ import annotations

import re

from codelock import BEGIN_DESIGNATOR, END_DESIGNATOR, ManualSectionMap

_SECTION_RE = re.compile(
    r"/\* " + re.escape(BEGIN_DESIGNATOR) + r" (?P<key>\S+) \*/"
    r"(?P<code>.*?)"
    r"/\* " + re.escape(END_DESIGNATOR) + r" \*/",
    re.DOTALL,
)
_WHITESPACE_RE = re.compile(r"\s")


class ManualSectionKeyError(ValueError):
    """Raised when a manual section key is empty or contains whitespace."""


def create_manual_section(section_key: str, section_code: str) -> str:
    """Render a manual section for ``section_key`` around ``section_code``.

    Surrounding blank lines are trimmed from ``section_code``; the code is
    placed on its own line(s) between the designators.

    Raises:
        ManualSectionKeyError: If ``section_key`` is empty or has whitespace.
    """
    if not section_key or _WHITESPACE_RE.search(section_key):
        raise ManualSectionKeyError(
            "Manual section keys should not be empty or contain whitespaces. "
            f'Received "{section_key}".'
        )

    body = section_code.strip()
    body = f"{body}\n" if body else ""
    return f"/* {BEGIN_DESIGNATOR} {section_key} */\n{body}/* {END_DESIGNATOR} */"


def extract_manual_sections(code: str) -> ManualSectionMap:
    """Map each manual section key in ``code`` to its trimmed content.

    Malformed designators are ignored. If a key appears more than once, the
    last occurrence wins.
    """
    sections: ManualSectionMap = {}
    for match in _SECTION_RE.finditer(code):
        sections[match.group("key")] = match.group("code").strip()
    return sections


def empty_manual_sections(code: str) -> str:
    """Remove all code between manual section designators.

    Everything outside well-formed sections is left byte-for-byte intact.
    """
    return _SECTION_RE.sub(lambda m: create_manual_section(m.group("key"), ""), code)
