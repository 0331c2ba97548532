# mobilekit

Building blocks for tools that drive mobile Rust projects. It covers path
handling, parsing version numbers and `rustc --version` output, wrapped
terminal reports, interactive prompts, creating symbolic and hard links,
and putting together the arguments and environment for a `cargo`
subcommand. It needs nothing beyond the standard library.

## Install

```
pip install mobilekit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Modules

### `mobilekit.paths`

- `home_dir()` returns the home directory and raises `NoHomeDir` when it
  cannot be found.
- `expand_home(path)` replaces a leading `~` component with the home
  directory. `contract_home(path)` replaces the home directory with `~`.
  On Windows it returns the path unchanged. It raises `ContractHomeError`
  for text that cannot be encoded as UTF-8.
- `install_dir()` is `$CARGO_HOME/.mobilekit` when `CARGO_HOME` is set,
  and `~/.cargo/.mobilekit` otherwise. `checkouts_dir()` and `tools_dir()`
  are its `checkouts` and `tools` subdirectories.
- `prefix_path(root, path)` joins `path` onto `root`. For verbatim Windows
  roots (`\\?\...`) it resolves `.` and `..` lexically.
- `unprefix_path(root, path)` strips `root` from the front of `path` and
  raises `PathNotPrefixed` when `path` does not start with `root`.
- `relativize_path(abs_path, abs_relative_to)` expresses one absolute path
  relative to another, for example `../../x/y`. It raises `ValueError` for
  paths that are not absolute.
- `normalize_path(path)` resolves an existing path and makes a missing one
  absolute. It raises `NormalizationError` when this fails.
- `under_root(path, root)` tells whether `root / path` stays inside `root`
  once normalized.
- `last_modified(first, second)` returns whichever path was modified more
  recently. On a tie it returns `first`. A path that cannot be read counts
  as never modified.

### `mobilekit.common`

- `list_display(items)` joins items as English text: `"a"`, `"a and b"`,
  `"a, b, and c"`.
- `reverse_domain(domain)` turns `example.com` into `com.example`.
- `parse_host_target_triple(output)` extracts the `host:` triple from the
  text printed by `rustc --verbose --version`. It raises `SearchFailed`
  when there is none.
- `prepend_to_path(path, base_path)` returns `"path:base_path"`.
- `get_string_for_group(match, group, string)` returns a named group's text
  and raises `CaptureGroupError` when the group did not match.
- `installed_commit_msg()` reads `install_dir() / "commit"`. It returns
  `None` when the file is absent and raises `InstalledCommitMsgError` when
  the file cannot be read. `format_commit_msg(msg)` renders it as
  `Contains commits up to "..."`.
- `with_working_dir(working_dir)` is a context manager that changes into a
  directory and changes back on exit. It raises `WorkingDirError` when a
  change fails.
- `one_or_many(value)` turns a single value, a list or a tuple into a list.

### `mobilekit.versions`

- `VersionTriple.parse("1")`, `"1.2"` or `"1.2.3"` fills the missing parts
  with zero and raises `VersionTripleError` otherwise.
- `VersionTriple.from_match(match)` builds a triple from a regex match with
  `version`, `major`, `minor` and `patch` groups.
- `VersionDouble.parse` does the same for `major[.minor]` and raises
  `VersionDoubleError`.
- Both types are ordered, frozen dataclasses, and `str()` gives `1.2.3` or
  `1.2`.
- `RustVersion.parse(output)` reads `rustc --version` output into a triple,
  an optional `RustVersionFlavor` (such as `beta.3` or `nightly`) and
  optional `RustVersionDetails` (commit hash and date). It raises
  `RustVersionError` when it cannot.
- `RustVersion.valid(is_macos=None)` always accepts a version on platforms
  other than macOS. On macOS it accepts versions up to 1.45.2, and versions
  from 1.49.0 whose date is 2020-10-24 or later or is missing.

### `mobilekit.cli`

- `TextWrapper(width=..., initial_indent=..., subsequent_indent=...)` wraps
  text without breaking at hyphens and keeps existing line breaks. The
  width defaults to the terminal width. `indented(indent)` returns a copy
  that indents every line.
- `Label` has the members `ERROR`, `ACTION_REQUEST` and `VICTORY`.
  `color()` returns the label's ANSI colour code. `exit_code()` is 0 for
  `VICTORY` and 1 for the others.
- `Report.error`, `Report.action_request` and `Report.victory` build
  reports. `format(wrapper, colorize=None)` renders the message line
  followed by the details, indented by four spaces. When `colorize` is
  `None`, colour follows `CLICOLOR_FORCE`, `NO_COLOR`, `CLICOLOR` and
  whether stdout is a terminal. `print(wrapper)` writes errors to stderr
  and other reports to stdout.

### `mobilekit.prompt`

All prompts read from standard input.

- `minimal(msg)` asks once and returns the trimmed reply.
- `default(msg, default=None, default_color=None)` shows the default in
  parentheses and returns it when the reply is empty.
- `yes_no(msg, default=None)` returns `True`, `False`, the default when the
  reply is empty, or `None` when the reply is neither `y` nor `n`.
- `list_display_only(choices)` prints an indexed list.
- `select(header, choices, noun, alternative, msg)` prints the list and asks
  again until it gets a valid index, which it returns. With exactly one
  choice, `0` is the default.

### `mobilekit.ln`

- `Call(link_type, force, source, target, target_style)` describes one link.
  `LinkType` is `HARD` or `SYMBOLIC`. `Clobber` is `NEVER`, `FILE_ONLY` or
  `FILE_OR_DIRECTORY`. With `TargetStyle.DIRECTORY` the link is created
  inside `target` and takes the source's name.
- `Call.exec()` creates the link with `os.symlink` or `os.link` and replaces
  what is in the way as `force` allows.
- `force_symlink(source, target, target_style)` creates a symbolic link and
  replaces files or directories.
- `force_symlink_relative(abs_source, abs_target, target_style)` does the
  same with a link that stores a relative path.
- Failures raise `LinkError`. Its `cause` is an `ErrorCause` member.

### `mobilekit.cargo`

- `CargoCommand(subcommand)` is an immutable builder. `with_verbose`,
  `with_package`, `with_manifest_path`, `with_target`,
  `with_no_default_features`, `with_features`, `with_args` and
  `with_release` each return a new builder. `with_manifest_path` resolves
  the path, which must exist.
- `build(env=None)` returns a `CargoInvocation` that holds `args`, `env`
  and `argv`. The environment is `env` merged with `explicit_cargo_env()`,
  which holds `CARGO_TARGET_DIR` and `CARGO_BUILD_TARGET_DIR` when they are
  set.

## Example

```python
from mobilekit.cargo import CargoCommand
from mobilekit.cli import Report, TextWrapper
from mobilekit.common import list_display, reverse_domain
from mobilekit.versions import RustVersion, VersionTriple

list_display(["a", "b", "c"])    # "a, b, and c"
reverse_domain("example.com")    # "com.example"
VersionTriple.parse("1.49")      # VersionTriple(major=1, minor=49, patch=0)
str(RustVersion.parse("rustc 1.70.0 (90c541806 2023-05-31)"))
# "1.70.0 (90c541806 2023-5-31)"

Report.victory("all done", "nothing left to do").print(TextWrapper())

invocation = (
    CargoCommand("build")
    .with_target("aarch64-linux-android")
    .with_release(True)
    .build({})
)
invocation.args  # ['build', '--target', 'aarch64-linux-android', '--release']
```

## What it does not do

mobilekit never starts other programs.

- It does not run `cargo`, `rustc`, `rustup`, `git` or `gradle`.
- `CargoCommand.build` only describes an invocation. Running it is up to
  the caller.
- `parse_host_target_triple` and `RustVersion.parse` take output that the
  caller has already captured.
- It has no command-line entry point of its own.
- It does not manage git repositories or submodules, and it does not update
  or reinstall itself.