"""Boundary check: keep backend and engine cleanly separated.

Run from repo root:

    python scripts/check_engine_boundary.py

Rules enforced:

1) In backend/app/**/*.py, the only allowed matstat imports are:
   - matstat.api
   - matstat.contracts...

2) In matstat/**/*.py, forbid imports from:
   - backend...
   - fastapi / starlette / uvicorn

This script is intentionally small and dependency-free so it can run in CI.
"""

from __future__ import annotations

import ast
import sys
from dataclasses import dataclass
from pathlib import Path

FRAMEWORK_MODULES: tuple[str, ...] = ("fastapi", "starlette", "uvicorn")


@dataclass(frozen=True)
class Violation:
    file: Path
    lineno: int
    kind: str
    detail: str


def _repo_root() -> Path:
    # This file is <repo_root>/scripts/check_engine_boundary.py
    return Path(__file__).resolve().parents[1]


def _iter_py_files(root: Path) -> list[Path]:
    return [p for p in root.rglob("*.py") if "__pycache__" not in p.parts]


def _is_module(mod: str, name: str) -> bool:
    return mod == name or mod.startswith(name + ".")


def _parse_imports(py_file: Path) -> list[tuple[int, str]]:
    """Return a list of (lineno, imported_module) for each absolute import."""

    src = py_file.read_text(encoding="utf-8")
    tree = ast.parse(src, filename=str(py_file))
    out: list[tuple[int, str]] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for a in node.names:
                out.append((node.lineno or 1, a.name))
        elif isinstance(node, ast.ImportFrom):
            if node.module is None or node.level:
                continue
            out.append((node.lineno or 1, node.module))

    return out


def _scan(root: Path, check) -> list[Violation]:
    if not root.exists():
        return []

    violations: list[Violation] = []
    for py_file in _iter_py_files(root):
        try:
            imports = _parse_imports(py_file)
        except SyntaxError as e:
            violations.append(Violation(py_file, int(e.lineno or 1), "syntax", str(e)))
            continue
        for lineno, mod in imports:
            violations.extend(check(py_file, lineno, mod))
    return violations


def _backend_rule(py_file: Path, lineno: int, mod: str) -> list[Violation]:
    if not _is_module(mod, "matstat"):
        return []
    if mod == "matstat.api" or _is_module(mod, "matstat.contracts"):
        return []
    return [
        Violation(
            py_file,
            lineno,
            "backend->engine",
            f"Disallowed engine import '{mod}'. Allowed: matstat.api, matstat.contracts.*",
        )
    ]


def _engine_rule(py_file: Path, lineno: int, mod: str) -> list[Violation]:
    if _is_module(mod, "backend"):
        return [Violation(py_file, lineno, "engine->backend", f"Engine must not import backend ('{mod}').")]
    for fw in FRAMEWORK_MODULES:
        if _is_module(mod, fw):
            return [
                Violation(
                    py_file,
                    lineno,
                    "engine->framework",
                    f"Engine must not import {fw} (keep HTTP adapters under backend/).",
                )
            ]
    return []


def find_violations(repo_root: Path) -> list[Violation]:
    out = _scan(repo_root / "backend" / "app", _backend_rule)
    out.extend(_scan(repo_root / "matstat", _engine_rule))
    return out


def main() -> int:
    repo_root = _repo_root()
    all_violations = find_violations(repo_root)

    if not all_violations:
        print("ENGINE BOUNDARY CHECK: OK")
        return 0

    print("ENGINE BOUNDARY CHECK: FAILED\n")
    for v in sorted(all_violations, key=lambda x: (str(x.file), x.lineno)):
        rel = v.file.relative_to(repo_root)
        print(f"- {rel}:{v.lineno} [{v.kind}] {v.detail}")

    print(
        "\nFix boundary violations by importing the engine through matstat.api and "
        "matstat.contracts, and keeping matstat free from backend/framework deps."
    )
    return 1


if __name__ == "__main__":
    sys.exit(main())
