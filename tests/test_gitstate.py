import pytest

from starprompt.gitstate import (
    RepoState,
    StateDescription,
    StateProgress,
    describe_rebase,
    get_state_description,
)


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_clean_has_no_description(tmp_path):
    assert get_state_description(RepoState.CLEAN, tmp_path) is None


@pytest.mark.parametrize(
    "state, label",
    [
        (RepoState.MERGE, "merge"),
        (RepoState.REVERT, "revert"),
        (RepoState.REVERT_SEQUENCE, "revert"),
        (RepoState.CHERRY_PICK, "cherry_pick"),
        (RepoState.CHERRY_PICK_SEQUENCE, "cherry_pick"),
        (RepoState.BISECT, "bisect"),
        (RepoState.APPLY_MAILBOX, "am"),
        (RepoState.APPLY_MAILBOX_OR_REBASE, "am_or_rebase"),
    ],
)
def test_simple_labels(tmp_path, state, label):
    assert get_state_description(state, tmp_path) == StateDescription(label)


def test_rebase_merge_progress(tmp_path):
    _write(tmp_path / ".git" / "rebase-merge" / "msgnum", "3\n")
    _write(tmp_path / ".git" / "rebase-merge" / "end", "10\n")
    assert describe_rebase(tmp_path) == StateDescription("rebase", StateProgress(3, 10))


def test_rebase_apply_progress(tmp_path):
    _write(tmp_path / ".git" / "rebase-apply" / "next", "2")
    _write(tmp_path / ".git" / "rebase-apply" / "last", "5")
    assert describe_rebase(tmp_path) == StateDescription("rebase", StateProgress(2, 5))


def test_rebase_merge_takes_precedence(tmp_path):
    _write(tmp_path / ".git" / "rebase-merge" / "msgnum", "1")
    _write(tmp_path / ".git" / "rebase-merge" / "end", "4")
    _write(tmp_path / ".git" / "rebase-apply" / "next", "2")
    _write(tmp_path / ".git" / "rebase-apply" / "last", "5")
    assert describe_rebase(tmp_path).progress == StateProgress(1, 4)


def test_rebase_without_progress_files(tmp_path):
    (tmp_path / ".git").mkdir()
    assert describe_rebase(tmp_path) == StateDescription("rebase")


def test_rebase_with_unparsable_progress(tmp_path):
    _write(tmp_path / ".git" / "rebase-merge" / "msgnum", "three")
    _write(tmp_path / ".git" / "rebase-merge" / "end", "10")
    assert describe_rebase(tmp_path).progress is None


def test_rebase_with_missing_total(tmp_path):
    _write(tmp_path / ".git" / "rebase-apply" / "next", "2")
    assert describe_rebase(tmp_path).progress is None


@pytest.mark.parametrize(
    "state",
    [RepoState.REBASE, RepoState.REBASE_INTERACTIVE, RepoState.REBASE_MERGE],
)
def test_rebase_states_read_progress(tmp_path, state):
    _write(tmp_path / ".git" / "rebase-merge" / "msgnum", "7")
    _write(tmp_path / ".git" / "rebase-merge" / "end", "9")
    description = get_state_description(state, tmp_path)
    assert description == StateDescription("rebase", StateProgress(7, 9))