"""Generated source file — load, rebuild, lock, save.

Typical regeneration cycle:

    CodeFile("src/schemas/UserSchema.ts").build_with(build_schema).lock().save_to_file()

Manual sections of the file already on disk are handed to the generator, so
hand-written code inside them survives. Nothing is written unless the new
content differs from what was read.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from codelock import ManualSectionMap
from codelock.builder import BuilderFn, CodeBuilder, Formatter
from codelock.lock import lock_code, verify_lock
from codelock.manual import extract_manual_sections

logger = logging.getLogger(__name__)

Generator = Callable[[ManualSectionMap], tuple[str, bool]]


def read_source(path: Path | str, encoding: str = "utf-8") -> str:
    """Read a source file exactly as stored; line endings are not translated."""
    with open(path, encoding=encoding, newline="") as f:
        return f.read()


def write_source(path: Path | str, code: str, encoding: str = "utf-8") -> None:
    """Write a source file exactly as given; line endings are not translated."""
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(code)


class CodeFile:
    """In-memory representation of a generated code file."""

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding
        self._stored: str | None = None
        self._contents = ""
        self._has_manual_sections = False

        if self.path.exists():
            self._stored = read_source(self.path, encoding)
            self._contents = self._stored
            logger.debug("Loaded %s (%d chars)", self.path, len(self._contents))
        else:
            logger.debug("No existing file at %s, starting empty", self.path)

    @property
    def has_pending_changes(self) -> bool:
        """Whether the in-memory code differs from what is on disk."""
        baseline = self._stored if self._stored is not None else ""
        return self._contents != baseline

    def verify(self) -> bool:
        """Verify that the lock in the current code is present and valid."""
        return verify_lock(self._contents)

    def build(self, generator: Generator) -> CodeFile:
        """Replace the code with freshly generated, unlocked code.

        Args:
            generator: Called with the manual sections of the current code;
                returns the generated code and whether it declares any
                manual section.
        """
        sections = extract_manual_sections(self._contents)
        code, has_manual_sections = generator(sections)
        self._contents = code
        self._has_manual_sections = has_manual_sections
        logger.debug(
            "Built %s: %d existing manual section(s), manual sections %s",
            self.path, len(sections), "declared" if has_manual_sections else "not declared",
        )
        return self

    def build_with(self, builder_fn: BuilderFn) -> CodeFile:
        """Like build, using a CodeBuilder seeded with the current manual sections."""
        return self.build(lambda sections: builder_fn(CodeBuilder(sections)).result())

    def format(self, formatter: Formatter) -> CodeFile:
        """Pass the current code through an external formatter."""
        self._contents = formatter(self._contents)
        return self

    def lock(self, comment: str | None = None) -> CodeFile:
        """Prepend a lock docblock to the current code.

        Call once per build; locking twice stacks two lock docblocks.

        Args:
            comment: Optional text for the lock docblock, e.g. the command
                that regenerates the file.
        """
        self._contents = lock_code(self._contents, self._has_manual_sections, comment)
        logger.debug("Locked %s (editable=%s)", self.path, self._has_manual_sections)
        return self

    def save_to_file(self, force: bool = False) -> bool:
        """Write the code to ``path`` if it changed since it was read or last saved.

        Args:
            force: Write even when there are no pending changes.

        Returns:
            True if the file was written.
        """
        if not (force or self.has_pending_changes):
            logger.debug("Skipping save of %s, no pending changes", self.path)
            return False

        write_source(self.path, self._contents, self.encoding)
        self._stored = self._contents
        logger.debug("Saved %s", self.path)
        return True

    def __str__(self) -> str:
        return self._contents

    def __repr__(self) -> str:
        return f"CodeFile({str(self.path)!r})"
