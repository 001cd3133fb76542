import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from starprompt.dotnet import (
    DotNetFile,
    FileType,
    check_directory_for_global_json,
    estimate_dotnet_version,
    get_dotnet_file_type,
    get_latest_sdk_from_cli,
    get_local_dotnet_files,
    get_pinned_sdk_version,
    get_pinned_sdk_version_from_file,
    get_version_from_cli,
    try_find_nearby_global_json,
)

PINNED = '{"sdk": {"version": "1.2.3"}}'


def _completed(returncode=0, stdout=b""):
    return subprocess.CompletedProcess(
        args=[], returncode=returncode, stdout=stdout, stderr=b""
    )


def test_should_parse_version_from_global_json():
    json_text = """
        {
            "sdk": {
                "version": "1.2.3"
            }
        }
    """
    assert get_pinned_sdk_version(json_text) == "v1.2.3"


def test_should_ignore_empty_global_json():
    assert get_pinned_sdk_version("{}") is None


@pytest.mark.parametrize(
    "text",
    ["not json", "[]", '{"sdk": "1.0"}', '{"sdk": {"version": 3}}'],
)
def test_pinned_version_rejects_other_shapes(text):
    assert get_pinned_sdk_version(text) is None


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("global.json", FileType.GLOBAL_JSON),
        ("GLOBAL.JSON", FileType.GLOBAL_JSON),
        ("project.json", FileType.PROJECT_JSON),
        ("App.sln", FileType.SOLUTION_FILE),
        ("App.csproj", FileType.PROJECT_FILE),
        ("Lib.FSPROJ", FileType.PROJECT_FILE),
        ("Old.xproj", FileType.PROJECT_FILE),
        ("readme.md", None),
        ("package.json", None),
    ],
)
def test_get_dotnet_file_type(name, expected):
    assert get_dotnet_file_type(Path("/work") / name) == expected


def test_get_local_dotnet_files_filters_and_keeps_order():
    files = get_local_dotnet_files(["a.txt", "b.csproj", "global.json", "c.py"])
    assert files == [
        DotNetFile(Path("b.csproj"), FileType.PROJECT_FILE),
        DotNetFile(Path("global.json"), FileType.GLOBAL_JSON),
    ]


def test_pinned_version_from_file(tmp_path):
    path = tmp_path / "global.json"
    path.write_text(PINNED)
    assert get_pinned_sdk_version_from_file(path) == "v1.2.3"


def test_pinned_version_from_missing_file(tmp_path):
    assert get_pinned_sdk_version_from_file(tmp_path / "global.json") is None


def test_check_directory_for_global_json(tmp_path):
    assert check_directory_for_global_json(tmp_path) is None
    (tmp_path / "global.json").write_text(PINNED)
    assert check_directory_for_global_json(tmp_path) == "v1.2.3"


def test_nearby_global_json_in_parent(tmp_path):
    (tmp_path / "global.json").write_text(PINNED)
    project = tmp_path / "project"
    project.mkdir()
    assert try_find_nearby_global_json(project, None) == "v1.2.3"


def test_nearby_global_json_in_repo_root(tmp_path):
    (tmp_path / "global.json").write_text('{"sdk": {"version": "3.0.100"}}')
    project = tmp_path / "src" / "project"
    project.mkdir(parents=True)
    assert try_find_nearby_global_json(project, tmp_path) == "v3.0.100"


def test_nearby_skips_parent_above_repo_root(tmp_path):
    (tmp_path / "global.json").write_text(PINNED)
    repo = tmp_path / "repo"
    repo.mkdir()
    assert try_find_nearby_global_json(repo, repo) is None


def test_estimate_prefers_global_json(tmp_path):
    global_json = tmp_path / "global.json"
    global_json.write_text('{"sdk": {"version": "2.2.402"}}')
    files = get_local_dotnet_files([tmp_path / "app.csproj", global_json])
    assert estimate_dotnet_version(files, tmp_path, None) == "v2.2.402"


def test_estimate_project_uses_parent_global_json(tmp_path):
    (tmp_path / "global.json").write_text('{"sdk": {"version": "2.1.0"}}')
    project = tmp_path / "app"
    project.mkdir()
    files = get_local_dotnet_files([project / "app.csproj"])
    assert estimate_dotnet_version(files, project, None) == "v2.1.0"


def test_estimate_without_files():
    assert estimate_dotnet_version([], "/work", None) is None


def test_estimate_solution_uses_cli(tmp_path):
    files = get_local_dotnet_files([tmp_path / "app.sln"])
    output = _completed(stdout=b"3.1.100 [/usr/share/dotnet/sdk]\n")
    with patch("subprocess.run", return_value=output):
        assert estimate_dotnet_version(files, tmp_path, None) == "v3.1.100"


def test_version_from_cli():
    with patch("subprocess.run", return_value=_completed(stdout=b"2.1.0\n")):
        assert get_version_from_cli() == "v2.1.0"


def test_version_from_cli_missing_dotnet():
    with patch("subprocess.run", side_effect=FileNotFoundError):
        assert get_version_from_cli() is None


def test_latest_sdk_from_cli():
    output = _completed(
        stdout=b"2.2.402 [/usr/share/dotnet/sdk]\n3.0.100 [/usr/share/dotnet/sdk]\n\n"
    )
    with patch("subprocess.run", return_value=output):
        assert get_latest_sdk_from_cli() == "v3.0.100"


def test_latest_sdk_falls_back_to_version():
    with patch(
        "subprocess.run",
        side_effect=[_completed(returncode=1), _completed(stdout=b"2.0.0\n")],
    ):
        assert get_latest_sdk_from_cli() == "v2.0.0"


@pytest.mark.parametrize("stdout", [b"", b"garbage\n", b"1 [x]\n"])
def test_latest_sdk_unparseable(stdout):
    with patch("subprocess.run", return_value=_completed(stdout=stdout)):
        assert get_latest_sdk_from_cli() is None


def test_latest_sdk_missing_dotnet():
    with patch("subprocess.run", side_effect=FileNotFoundError):
        assert get_latest_sdk_from_cli() is None