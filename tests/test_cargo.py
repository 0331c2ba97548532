import pytest

from mobilekit.cargo import CargoCommand, explicit_cargo_env


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("CARGO_TARGET_DIR", raising=False)
    monkeypatch.delenv("CARGO_BUILD_TARGET_DIR", raising=False)


def test_plain_subcommand():
    invocation = CargoCommand("build").build({})
    assert invocation.args == ["build"]
    assert invocation.argv == ["cargo", "build"]
    assert invocation.env == {}


def test_all_options_in_order():
    invocation = (
        CargoCommand("build")
        .with_verbose(True)
        .with_package("app")
        .with_target("aarch64-linux-android")
        .with_no_default_features(True)
        .with_features(["a", "b"])
        .with_args(["--extra"])
        .with_release(True)
        .build({})
    )
    assert invocation.args == [
        "build",
        "-vv",
        "--package",
        "app",
        "--target",
        "aarch64-linux-android",
        "--no-default-features",
        "--features",
        "a b",
        "--extra",
        "--release",
    ]


def test_manifest_path_is_canonicalized(tmp_path):
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text("[package]\n")
    args = CargoCommand("check").with_manifest_path(tmp_path / "." / "Cargo.toml").build().args
    assert args == ["check", "--manifest-path", str(manifest.resolve())]


def test_missing_manifest_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        CargoCommand("check").with_manifest_path(tmp_path / "missing.toml")


def test_builders_do_not_mutate():
    base = CargoCommand("run")
    released = base.with_release(True)
    assert base.build().args == ["run"]
    assert released.build().args == ["run", "--release"]


def test_none_clears_option():
    command = CargoCommand("run").with_package("app").with_package(None)
    assert command.build().args == ["run"]


def test_explicit_cargo_env_reads_target_dirs(monkeypatch, tmp_path):
    assert explicit_cargo_env() == {}
    monkeypatch.setenv("CARGO_TARGET_DIR", str(tmp_path))
    monkeypatch.setenv("CARGO_BUILD_TARGET_DIR", str(tmp_path / "b"))
    assert explicit_cargo_env() == {
        "CARGO_TARGET_DIR": str(tmp_path),
        "CARGO_BUILD_TARGET_DIR": str(tmp_path / "b"),
    }


def test_build_merges_env(monkeypatch, tmp_path):
    monkeypatch.setenv("CARGO_TARGET_DIR", str(tmp_path))
    invocation = CargoCommand("build").build({"ANDROID_HOME": "/sdk", "CARGO_TARGET_DIR": "old"})
    assert invocation.env == {"ANDROID_HOME": "/sdk", "CARGO_TARGET_DIR": str(tmp_path)}