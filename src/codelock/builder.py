"""Fluent builder for generated code.

A generator assembles a file with a CodeBuilder seeded with the manual
sections extracted from the previous version of that file:

    def build(b: CodeBuilder) -> CodeBuilder:
        return (
            b.add_line("import type { User } from './User';")
            .add_line()
            .add_block("export interface UserSchema", lambda block: (
                block.add_line("id: string;")
                .add_manual_section("custom_fields", lambda s: s)
            ))
        )

Nested builders share the parent's (read-only) section map, and report back
whether they declared any manual section.
"""

from __future__ import annotations

from typing import Callable

from codelock import ManualSectionMap
from codelock.docblock import create_docblock
from codelock.manual import create_manual_section

BuilderFn = Callable[["CodeBuilder"], "CodeBuilder"]
Formatter = Callable[[str], str]


class CodeBuilder:
    """Accumulates generated code."""

    def __init__(self, manual_sections: ManualSectionMap | None = None) -> None:
        self._code = ""
        self._has_manual_sections = False
        self._manual_sections: ManualSectionMap = manual_sections if manual_sections is not None else {}

    def _child(self) -> CodeBuilder:
        return CodeBuilder(self._manual_sections)

    def add(self, code: str) -> CodeBuilder:
        """Append ``code`` as-is."""
        self._code += code
        return self

    def add_line(self, code: str = "") -> CodeBuilder:
        """Append ``code`` and a newline. Call without arguments for a blank line."""
        self._code += code + "\n"
        return self

    def add_docblock(self, content: str) -> CodeBuilder:
        """Append a docblock rendered from plain ``content``, with a trailing newline."""
        return self.add_line(create_docblock(content))

    def add_block(self, code_before_block: str, block_fn: BuilderFn) -> CodeBuilder:
        """Append a braced block.

        Args:
            code_before_block: Code before the block's ``{``, e.g. ``if (a === b)``.
            block_fn: Builds the block body using a child builder.
        """
        block = block_fn(self._child())
        self._has_manual_sections = self._has_manual_sections or block.has_manual_sections
        return self.add(code_before_block).add_line(" {").add_line(block.to_string()).add_line("}")

    def add_manual_section(self, section_key: str, section_fn: BuilderFn) -> CodeBuilder:
        """Append a manually editable section.

        The content stored for ``section_key`` in the previous version of the
        file is kept; ``section_fn`` only builds the default content used
        when nothing (or nothing but whitespace) was stored.
        """
        existing = self._manual_sections.get(section_key)
        if existing:
            content = existing
        else:
            content = section_fn(self._child()).to_string()
        self._has_manual_sections = True
        return self.add_line(create_manual_section(section_key, content))

    def format(self, formatter: Formatter) -> CodeBuilder:
        """Replace the accumulated code with ``formatter(code)``."""
        self._code = formatter(self._code)
        return self

    @property
    def has_manual_sections(self) -> bool:
        """Whether the built code contains at least one manual section."""
        return self._has_manual_sections

    def to_string(self) -> str:
        return self._code

    def __str__(self) -> str:
        return self._code

    def result(self) -> tuple[str, bool]:
        """Return ``(code, has_manual_sections)`` for CodeFile.build."""
        return self._code, self._has_manual_sections
