from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sha3fics.core import enumerator
from sha3fics.core.classify import Classified, TargetKind
from sha3fics.core.enumerator import (
    Enumerated,
    enumerate_scope,
    matches_search_pattern,
    resolve_scope,
)
from sha3fics.core.errors import ErrorKind, Failure


def _touch(p: Path, data: bytes = b"x") -> Path:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data)
    return p


def _names(result: Enumerated | Failure) -> list[str]:
    assert isinstance(result, Enumerated)
    return sorted(os.path.relpath(p, result.base_dir) for p in result.paths)


# ---------------------------------------------------------------------------
# Scope resolution
# ---------------------------------------------------------------------------


class TestResolveScope:
    def test_file_scope_uses_containing_directory(self, tmp_path: Path) -> None:
        f = _touch(tmp_path / "README.md")
        scope = resolve_scope(Classified(TargetKind.FILE, str(f)))
        assert scope.base_dir == tmp_path
        assert scope.search == "README.md"
        assert scope.path == f

    def test_bare_wildcard_is_anchored_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        scope = resolve_scope(Classified(TargetKind.WILDCARD, "*.txt"))
        assert scope.base_dir == Path(os.getcwd())
        assert scope.search == "*.txt"

    def test_relative_wildcard_splits_base_and_pattern(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        scope = resolve_scope(Classified(TargetKind.WILDCARD, os.path.join("logs", "*.txt")))
        assert scope.base_dir == Path(os.getcwd()) / "logs"
        assert scope.search == "*.txt"

    def test_directory_trailing_separator_is_trimmed(self, tmp_path: Path) -> None:
        d = tmp_path / "data"
        d.mkdir()
        scope = resolve_scope(Classified(TargetKind.DIRECTORY, str(d) + os.sep))
        assert scope.path == d
        assert scope.search == "data"

    def test_invalid_kind_has_no_scope(self) -> None:
        with pytest.raises(ValueError):
            resolve_scope(Classified(TargetKind.INVALID, "nope"))


# ---------------------------------------------------------------------------
# Pattern matching
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("name", "pattern", "expected"),
    [
        ("x.txt", "*.txt", True),
        ("y.log", "*.txt", False),
        ("a1.txt", "a?.txt", True),
        ("a12.txt", "a?.txt", False),
        (".hidden.txt", "*.txt", True),
        ("a[1].txt", "a[1]*", True),
        ("a1.txt", "a[1]*", False),
    ],
)
def test_matches_search_pattern(name: str, pattern: str, expected: bool) -> None:
    assert matches_search_pattern(name, pattern) is expected


# ---------------------------------------------------------------------------
# Enumeration strategies
# ---------------------------------------------------------------------------


def test_file_enumerates_exactly_itself(tmp_path: Path) -> None:
    f = _touch(tmp_path / "one.bin")
    _touch(tmp_path / "other.bin")
    scope = resolve_scope(Classified(TargetKind.FILE, str(f)))
    assert _names(enumerate_scope(scope, recursive=True)) == ["one.bin"]


def test_wildcard_is_top_level_only(tmp_path: Path) -> None:
    logs = tmp_path / "logs"
    _touch(logs / "x.txt")
    _touch(logs / "y.log")
    _touch(logs / "nested" / "z.txt")
    (logs / "dir.txt").mkdir()
    scope = resolve_scope(Classified(TargetKind.WILDCARD, str(logs / "*.txt")))
    assert _names(enumerate_scope(scope, recursive=True)) == ["x.txt"]


def test_wildcard_with_missing_base_directory_fails(tmp_path: Path) -> None:
    scope = resolve_scope(Classified(TargetKind.WILDCARD, str(tmp_path / "missing" / "*.txt")))
    out = enumerate_scope(scope, recursive=False)
    assert isinstance(out, Failure)
    assert out.kind is ErrorKind.ENUMERATION
    assert out.message.startswith("unable to evaluate wildcard")


def test_wildcard_matching_nothing_is_empty_success(tmp_path: Path) -> None:
    scope = resolve_scope(Classified(TargetKind.WILDCARD, str(tmp_path / "*.none")))
    out = enumerate_scope(scope, recursive=False)
    assert isinstance(out, Enumerated)
    assert out.paths == ()


def test_directory_non_recursive_and_recursive(tmp_path: Path) -> None:
    data = tmp_path / "data"
    _touch(data / "a.txt")
    _touch(data / "sub" / "c.txt")
    _touch(data / "sub" / "deeper" / "d.txt")
    scope = resolve_scope(Classified(TargetKind.DIRECTORY, str(data)))

    assert _names(enumerate_scope(scope, recursive=False)) == ["a.txt"]
    assert _names(enumerate_scope(scope, recursive=True)) == [
        "a.txt",
        os.path.join("sub", "c.txt"),
        os.path.join("sub", "deeper", "d.txt"),
    ]


def test_output_path_is_excluded(tmp_path: Path) -> None:
    _touch(tmp_path / "a.txt")
    out = _touch(tmp_path / "[any].sha3")
    scope = resolve_scope(Classified(TargetKind.WILDCARD, str(tmp_path / "*")))
    assert _names(enumerate_scope(scope, recursive=False, exclude=out)) == ["a.txt"]


def test_directory_listing_failure_is_reported(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    data = tmp_path / "data"
    data.mkdir()

    def _denied(root: Path, *, recursive: bool) -> list[Path]:
        raise PermissionError(13, "Permission denied", str(root))

    monkeypatch.setattr(enumerator, "_iter_files", _denied)
    scope = resolve_scope(Classified(TargetKind.DIRECTORY, str(data)))
    out = enumerate_scope(scope, recursive=True)
    assert isinstance(out, Failure)
    assert out.kind is ErrorKind.ENUMERATION
    assert "unable to enumerate directory" in out.message
    assert "Permission denied" in out.message


def test_directory_removed_before_listing_is_reported(tmp_path: Path) -> None:
    data = tmp_path / "data"
    data.mkdir()
    scope = resolve_scope(Classified(TargetKind.DIRECTORY, str(data)))
    data.rmdir()

    for recursive in (False, True):
        out = enumerate_scope(scope, recursive=recursive)
        assert isinstance(out, Failure)
        assert out.kind is ErrorKind.ENUMERATION
        assert "unable to enumerate directory" in out.message


def test_directory_listing_skips_non_files(tmp_path: Path) -> None:
    data = tmp_path / "data"
    _touch(data / "a.txt")
    (data / "empty").mkdir()
    scope = resolve_scope(Classified(TargetKind.DIRECTORY, str(data)))
    assert _names(enumerate_scope(scope, recursive=True)) == ["a.txt"]
