import os
from pathlib import Path, PureWindowsPath

import pytest

from mobilekit.paths import (
    NoHomeDir,
    PathNotPrefixed,
    checkouts_dir,
    contract_home,
    expand_home,
    install_dir,
    last_modified,
    normalize_path,
    prefix_path,
    relativize_path,
    tools_dir,
    under_root,
    unprefix_path,
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


@pytest.mark.parametrize(
    "root, path, result",
    [
        (
            "/home/user/cargo-mobile2-project/gen/android/cargo-mobile2-project",
            "app/build/outputs/apk/arm64/debug/app-arm64-debug.apk",
            "/home/user/cargo-mobile2-project/gen/android/cargo-mobile2-project/app/build/outputs/apk/arm64/debug/app-arm64-debug.apk",
        ),
        (
            "/home/user/cargo-mobile2-project/gen/android/cargo-mobile2-project",
            "/home/other/project/gen/android/app/build/outputs/apk/arm64/debug/app-arm64-debug.apk",
            "/home/other/project/gen/android/app/build/outputs/apk/arm64/debug/app-arm64-debug.apk",
        ),
    ],
)
def test_prefix_path(root, path, result):
    assert prefix_path(root, path) == Path(result)


def test_prefix_path_verbatim_windows():
    root = "\\\\?\\C:\\Users\\user\\cargo-mobile2-project\\gen\\android\\cargo-mobile2-project"
    path = "app\\..\\app\\build\\outputs\\.\\apk\\arm64\\debug\\app-arm64-debug.apk"
    expected = "\\\\?\\C:\\Users\\user\\cargo-mobile2-project\\gen\\android\\cargo-mobile2-project\\app\\build\\outputs\\apk\\arm64\\debug\\app-arm64-debug.apk"
    assert str(prefix_path(root, path)) == expected


def test_prefix_path_verbatim_rooted_path_keeps_prefix():
    root = "\\\\?\\C:\\Users\\user"
    result = prefix_path(root, "\\other\\file.txt")
    assert PureWindowsPath(str(result)) == PureWindowsPath("\\\\?\\C:\\other\\file.txt")


def test_expand_home(home):
    assert expand_home("~/foo/bar") == home / "foo" / "bar"
    assert expand_home("~") == home


def test_expand_home_leaves_other_paths(home):
    assert expand_home("/abs/path") == Path("/abs/path")
    assert expand_home("~foo/bar") == Path("~foo/bar")


def test_contract_home(home):
    assert contract_home(home / "project") == str(Path("~") / "project")
    assert contract_home("/elsewhere/project") == "/elsewhere/project"


def test_contract_home_round_trip(home):
    original = home / "a" / "b"
    assert expand_home(contract_home(original)) == original


def test_install_dir_uses_cargo_home(tmp_path, monkeypatch):
    monkeypatch.setenv("CARGO_HOME", str(tmp_path))
    assert install_dir() == tmp_path / ".mobilekit"
    assert checkouts_dir() == tmp_path / ".mobilekit" / "checkouts"
    assert tools_dir() == tmp_path / ".mobilekit" / "tools"


def test_install_dir_falls_back_to_home(home, monkeypatch):
    monkeypatch.delenv("CARGO_HOME", raising=False)
    assert install_dir() == home / ".cargo" / ".mobilekit"


def test_no_home_dir_message():
    assert str(NoHomeDir()) == "Failed to get user's home directory!"


def test_unprefix_path():
    assert unprefix_path("/a/b", "/a/b/c/d") == Path("c/d")


def test_unprefix_path_error():
    with pytest.raises(PathNotPrefixed) as info:
        unprefix_path("/a/b", "/x/y")
    assert info.value.path == Path("/x/y")
    assert info.value.prefix == Path("/a/b")


def test_relativize_path():
    assert relativize_path("/a/b/c", "/a/d") == Path("../b/c")
    assert relativize_path("/a/b/c", "/a") == Path("b/c")
    assert relativize_path("/a", "/a/b/c") == Path("../..")


def test_relativize_path_round_trip():
    src, dest = Path("/one/two/three"), Path("/one/four/five")
    rel = relativize_path(src, dest)
    assert normalize_path(dest / rel) == normalize_path(src)


def test_relativize_path_requires_absolute():
    with pytest.raises(ValueError):
        relativize_path("a/b", "/c")
    with pytest.raises(ValueError):
        relativize_path("/a/b", "c")


def test_normalize_existing_path(tmp_path):
    (tmp_path / "dir").mkdir()
    assert normalize_path(tmp_path / "dir" / ".." / "dir") == (tmp_path / "dir").resolve()


def test_normalize_missing_path(tmp_path):
    result = normalize_path(tmp_path / "missing" / ".." / "other")
    assert result == Path(os.path.abspath(tmp_path / "other"))
    assert result.is_absolute()


def test_under_root(tmp_path):
    root = tmp_path.resolve()
    (root / "sub").mkdir()
    assert under_root("sub", root) is True
    assert under_root("sub/not-there", root) is True
    assert under_root("../outside", root) is False


def test_last_modified(tmp_path):
    older, newer = tmp_path / "older", tmp_path / "newer"
    older.write_text("a")
    newer.write_text("b")
    os.utime(older, (1000, 1000))
    os.utime(newer, (2000, 2000))
    assert last_modified(older, newer) == newer
    assert last_modified(newer, older) == newer


def test_last_modified_ties_and_missing(tmp_path):
    a, b = tmp_path / "a", tmp_path / "b"
    a.write_text("a")
    b.write_text("b")
    os.utime(a, (1000, 1000))
    os.utime(b, (1000, 1000))
    assert last_modified(a, b) == a
    assert last_modified(tmp_path / "missing", a) == a
    assert last_modified(a, tmp_path / "missing") == a