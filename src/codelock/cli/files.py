"""Generated-file CLI commands."""

import argparse
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def _resolve_targets(args: argparse.Namespace) -> tuple[list[Path], str]:
    """Paths named on the command line, else those configured in codelock.yaml."""
    from codelock.config import load_config

    config = load_config(args.config)
    if args.paths:
        return [Path(p) for p in args.paths], config.encoding
    return config.resolve_files(), config.encoding


def _read_target(args: argparse.Namespace) -> str | None:
    """Read ``args.path`` with the configured encoding; None if it is missing."""
    from codelock.codefile import read_source
    from codelock.config import load_config

    encoding = load_config(args.config).encoding
    path = Path(args.path)
    if not path.is_file():
        print(f"File not found: {args.path}")
        return None
    return read_source(path, encoding)


def cmd_verify(args: argparse.Namespace) -> int:
    from codelock.codefile import read_source
    from codelock.config import ConfigError
    from codelock.lock import verify_lock

    try:
        targets, encoding = _resolve_targets(args)
    except ConfigError as e:
        print(f"Config error: {e}")
        return 2

    results = []
    for path in targets:
        if not path.is_file():
            results.append({"path": str(path), "valid": False, "error": "file not found"})
            continue
        valid = verify_lock(read_source(path, encoding))
        logger.info("%s: %s", path, "valid" if valid else "invalid")
        results.append({"path": str(path), "valid": valid})

    failed = [r for r in results if not r["valid"]]

    if args.json:
        print(json.dumps({"results": results, "failed": len(failed)}, indent=2))
        return 1 if failed else 0

    if not results:
        print("No generated files to verify.")
        return 0

    for r in results:
        status = "PASS" if r["valid"] else "FAIL"
        detail = f" ({r['error']})" if "error" in r else ""
        print(f"  {status} {r['path']}{detail}")

    print(f"\n{len(results) - len(failed)} passed, {len(failed)} failed")
    return 1 if failed else 0


def cmd_info(args: argparse.Namespace) -> int:
    from codelock.config import ConfigError
    from codelock.docblock import remove_file_docblock
    from codelock.lock import compute_hash, get_lock_info

    try:
        code = _read_target(args)
    except ConfigError as e:
        print(f"Config error: {e}")
        return 2
    if code is None:
        return 1

    info = get_lock_info(code)
    if info is None:
        if args.json:
            print(json.dumps({"path": args.path, "locked": False}, indent=2))
        else:
            print(f"No codelock found in {args.path}")
        return 1

    expected = compute_hash(remove_file_docblock(code), info.manual_sections_allowed)
    data = {
        "path": args.path,
        "locked": True,
        "hash": info.hash,
        "expected_hash": expected,
        "manual_sections_allowed": info.manual_sections_allowed,
        "valid": info.hash == expected,
    }

    if args.json:
        print(json.dumps(data, indent=2))
        return 0

    print(f"Codelock: {args.path}")
    print("─" * 40)
    print(f"  Editable:  {'yes' if info.manual_sections_allowed else 'no'}")
    print(f"  Recorded:  {info.hash}")
    print(f"  Expected:  {expected}")
    print(f"  Status:    {'VALID' if data['valid'] else 'MODIFIED'}")
    return 0


def cmd_sections(args: argparse.Namespace) -> int:
    from codelock.config import ConfigError
    from codelock.manual import extract_manual_sections

    try:
        code = _read_target(args)
    except ConfigError as e:
        print(f"Config error: {e}")
        return 2
    if code is None:
        return 1

    sections = extract_manual_sections(code)

    if args.json:
        print(json.dumps(sections, indent=2, ensure_ascii=False))
        return 0

    if not sections:
        print(f"No manual sections in {args.path}")
        return 0

    print(f"Manual sections in {args.path}:\n")
    for key, content in sections.items():
        lines = len(content.splitlines())
        print(f"  {key:<30} {lines} line(s)")
    return 0
