"""Codelock — tamper-evident header for generated files.

A locked file starts with a docblock whose last line records a hash of the
rest of the file:

    @generated-editable Codelock<<HASH>>   manual sections allowed
    @generated Codelock<<HASH>>            no manual edits at all

For editable files the hash is computed with every manual section emptied,
so edits inside sections keep the lock valid while edits anywhere else
(including a renamed section key) break it.

The hash only detects accidental edits; it is not meant to resist someone
who wants to forge a lock.
"""

from __future__ import annotations

import base64
import hashlib
import re
from dataclasses import dataclass

from codelock import EDITABLE_TAG, UNEDITABLE_TAG
from codelock.docblock import get_file_docblock, prepend_file_docblock, remove_file_docblock
from codelock.manual import empty_manual_sections

HASH_BYTES = 24

EDITABLE_MESSAGE = """\
This file is generated with manually editable sections. Only make
modifications between BEGIN MANUAL SECTION and END MANUAL SECTION
designators."""

UNEDITABLE_MESSAGE = "This file is generated. Do not modify it manually."

_EDITABLE_LOCK_RE = re.compile(r"^" + re.escape(EDITABLE_TAG) + r" Codelock<<(?P<hash>\S+?)>>$")
_UNEDITABLE_LOCK_RE = re.compile(r"^" + re.escape(UNEDITABLE_TAG) + r" Codelock<<(?P<hash>\S+?)>>$")


@dataclass(frozen=True)
class LockInfo:
    """Lock details read from a locked file's docblock."""

    hash: str
    manual_sections_allowed: bool


def get_lock_info(locked_code: str) -> LockInfo | None:
    """Get lock information from a locked source file.

    Args:
        locked_code: Code in a source file, prepended with a lock docblock.

    Returns:
        LockInfo, or None if the file has no docblock or its docblock does
        not end with a codelock line.
    """
    docblock = get_file_docblock(locked_code)
    if not docblock:
        return None

    # Lock line is always the docblock's last line
    lock_line = docblock.split("\n")[-1]

    match = _EDITABLE_LOCK_RE.match(lock_line)
    if match:
        return LockInfo(hash=match.group("hash"), manual_sections_allowed=True)

    match = _UNEDITABLE_LOCK_RE.match(lock_line)
    if match:
        return LockInfo(hash=match.group("hash"), manual_sections_allowed=False)

    return None


def compute_hash(code: str, manual_sections_allowed: bool) -> str:
    """Compute the lock hash for ``code`` (without its lock docblock).

    Args:
        code: Code to be hashed.
        manual_sections_allowed: Whether manual sections are emptied first.

    Returns:
        Base64 encoded SHAKE-128 digest of the normalized code.
    """
    hashable = (empty_manual_sections(code) if manual_sections_allowed else code).strip()
    digest = hashlib.shake_128(hashable.encode("utf-8")).digest(HASH_BYTES)
    return base64.b64encode(digest).decode("ascii")


def lock_code(code: str, manual_sections_allowed: bool, comment: str | None = None) -> str:
    """Hash ``code`` and prepend a lock docblock.

    Does NOT strip an existing lock first, since the first thing in ``code``
    may be an unrelated docblock. Lock freshly generated code only.

    Args:
        code: Code to be locked.
        manual_sections_allowed: Whether the code may contain manual sections.
        comment: Optional extra text placed above the lock line, e.g. how to
            regenerate the file.

    Returns:
        Locked code.
    """
    code_hash = compute_hash(code, manual_sections_allowed)

    if manual_sections_allowed:
        message, tag = EDITABLE_MESSAGE, EDITABLE_TAG
    else:
        message, tag = UNEDITABLE_MESSAGE, UNEDITABLE_TAG

    paragraphs = [message]
    if comment and comment.strip():
        paragraphs.append(comment.strip())
    paragraphs.append(f"{tag} Codelock<<{code_hash}>>")

    return prepend_file_docblock(code, "\n\n".join(paragraphs))


def verify_lock(locked_code: str) -> bool:
    """Return True if ``locked_code`` has a lock and its hash still matches."""
    info = get_lock_info(locked_code)
    if info is None:
        return False
    return info.hash == compute_hash(remove_file_docblock(locked_code), info.manual_sections_allowed)
