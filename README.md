# starprompt

Building blocks for an informative shell prompt. `starprompt` gathers the
pieces a prompt shows (tool versions, project versions, repository state,
the current time, session details) and helps lay them out.

## Installation

```
pip install starprompt
```

## What is inside

- `starprompt.process`: `read_file` returns a file's text; `exec_cmd(cmd, args)`
  runs a command and returns a `CommandOutput` (`stdout`, `stderr`), or `None`
  when the command cannot be started or exits with a non-zero status.
- `starprompt.segment`: `Style` (colours and text attributes, `paint(text)`)
  and `Segment` (a named value with an optional style, rendered with ANSI
  escapes by `ansi_string()` or `str()`).
- `starprompt.pathtrunc`: `truncate(path, n)` keeps the last `n` components of
  a path; `0` leaves it untouched.
- `starprompt.java`: `parse_jre_version`, `format_java_version` and
  `get_java_version` (honours `JAVA_HOME`).
- `starprompt.toolversions`: version helpers for Go, PHP, Ruby, Python
  (including the active virtual environment name), Node.js and Terraform,
  plus `get_terraform_workspace` (honours `TF_WORKSPACE` and `TF_DATA_DIR`).
- `starprompt.dotnet`: recognises .NET project files, reads SDK pinning from
  `global.json`, and asks `dotnet --list-sdks` / `dotnet --version` when needed.
- `starprompt.package`: reads the project version from `Cargo.toml`,
  `package.json`, `pyproject.toml` (Poetry) or `composer.json`, in that order.
- `starprompt.clock`: `format_time`, `create_offset_time_string` and
  `current_time_string`; `%T` and `%r` give 24- and 12-hour times.
- `starprompt.kubernetes`: current context and namespace from `KUBECONFIG` or
  `~/.kube/config`.
- `starprompt.memory`: `format_kib`, `percent_sign` (doubled for zsh) and
  `format_usage`.
- `starprompt.hostname`: `trim_hostname` and `get_hostname` (optionally only
  over SSH).
- `starprompt.session`: environment variable lookup, nix-shell labels,
  background job counts, and the rules for when to show the user name.
- `starprompt.branches`: grapheme-aware branch truncation, Mercurial branch and
  bookmark reading, and commit hash abbreviation.
- `starprompt.gitstate`: `RepoState` and `get_state_description`, including
  rebase progress read from the `.git` directory.
- `starprompt.gitstatus`: `Status` flags, `summarize_statuses` into a
  `RepoStatus`, and `status_segments` listing what to show in display order.
- `starprompt.layout`: `count_wide_chars` and `format_explanation`, a
  width-aware breakdown of a prompt, one module per line.

## Examples

```python
from datetime import datetime, timezone

from starprompt.clock import create_offset_time_string
from starprompt.package import format_version
from starprompt.pathtrunc import truncate

truncate("~/starship/engines/booster/rocket", 3)   # "engines/booster/rocket"
format_version(' "0.1.0" ')                        # "v0.1.0"

now = datetime(2014, 7, 8, 15, 36, 47, tzinfo=timezone.utc)
create_offset_time_string(now, "+5", "%r")          # "08:36:47 PM"
```

An invalid offset raises `starprompt.clock.InvalidOffsetError`.

## What it does not do

`starprompt` is a library of helpers. It has no command that prints a prompt,
reads no configuration file, and does not assemble modules into a prompt line
by itself. It does not open git repositories: repository state, file statuses
and ahead/behind counts are passed in by the caller. It does not measure
system memory; callers supply the used and total amounts. It does not detect
the Rust toolchain version.

## Running the tests

```
pip install starprompt[test]
pytest
```