"""File docblock codec.

A file docblock is the comment block starting at the very first character
of a file:

    /**
     * Content
     *
     * More content
     */

Only a block anchored at offset 0 counts. The same block preceded by a blank
line, or by anything else, is ordinary file content.
"""

from __future__ import annotations

import re

_DOCBLOCK_RE = re.compile(r"\A/\*\*\n(?P<contents>(?: \*.*\n)*?) \*/\n")


def get_file_docblock(code: str) -> str | None:
    """Get the file docblock content from ``code``.

    Args:
        code: Contents of a source file.

    Returns:
        Docblock content with each line's leading `` *`` removed, or None if
        the file does not start with a well-formed docblock.
    """
    match = _DOCBLOCK_RE.match(code)
    if not match:
        return None

    lines = match.group("contents").split("\n")
    return "\n".join(line[len(" *"):].strip() for line in lines).strip()


def remove_file_docblock(code: str) -> str:
    """Remove the file docblock (and its trailing newline) from ``code``.

    Code without a file docblock is returned unchanged.
    """
    match = _DOCBLOCK_RE.match(code)
    if not match:
        return code
    return code[match.end():]


def create_docblock(content: str) -> str:
    """Render ``content`` (plain lines, no leading stars) as a docblock."""
    lines = [" " + f"* {line}".strip() for line in content.split("\n")]
    return "/**\n" + "\n".join(lines) + "\n */"


def prepend_file_docblock(code: str, content: str) -> str:
    """Prepend a docblock for ``content`` to ``code``.

    Assumes ``code`` does not already start with a file docblock; an
    existing one is left in place underneath the new block.
    """
    return f"{create_docblock(content)}\n\n{code.lstrip()}"
