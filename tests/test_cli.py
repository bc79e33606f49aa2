"""Tests for the hooks command line."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner
from hooks_cli.main import cli


@pytest.fixture
def runner(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("HOOKS_LOG_PATH", str(tmp_path / "hooks.log.jsonl"))
    monkeypatch.delenv("HOOKS_CONTEXT", raising=False)
    monkeypatch.delenv("HOOKS_DATA_DIR", raising=False)
    return CliRunner()


@pytest.fixture
def invoke(runner, data_dir):
    def _invoke(*args, **kwargs):
        return runner.invoke(cli, ["--data-dir", str(data_dir), "--global", *args], **kwargs)

    return _invoke


def state(data_dir: Path) -> list:
    return json.loads((data_dir / "global").read_text())


class TestAddRemove:
    def test_add_appends_and_persists(self, invoke, data_dir, files):
        for path in files:
            result = invoke("add", path)
            assert result.exit_code == 0, result.output

        assert state(data_dir) == files
        assert "added at [3]" in result.output

    def test_add_start_and_at(self, invoke, data_dir, files):
        a, b, c = files
        invoke("add", a)
        invoke("add", "--start", b)
        result = invoke("add", "--at", "2", c)

        assert result.exit_code == 0
        assert "inserted at [2]" in result.output
        assert state(data_dir) == [b, c, a]

    def test_add_duplicate_warns_and_fails(self, invoke, data_dir, files):
        invoke("add", files[0])
        result = invoke("add", files[0])

        assert result.exit_code == 1
        assert "already exists at [1]" in result.output
        assert state(data_dir) == files[:1]

    def test_add_start_and_at_conflict(self, invoke, files):
        result = invoke("add", "--start", "--at", "2", files[0])
        assert result.exit_code == 2

    def test_add_missing_file_is_rejected(self, invoke, tmp_path):
        result = invoke("add", str(tmp_path / "nope.txt"))
        assert result.exit_code == 2

    def test_relative_paths_are_made_absolute(self, invoke, data_dir, files, monkeypatch):
        monkeypatch.chdir(Path(files[0]).parent)
        result = invoke("add", "a.py")
        assert result.exit_code == 0, result.output
        assert state(data_dir) == [files[0]]

    def test_remove_by_position(self, invoke, data_dir, files):
        for path in files:
            invoke("add", path)

        result = invoke("remove", "2")

        assert result.exit_code == 0
        assert "Removed [2]" in result.output
        assert state(data_dir) == [files[0], files[2]]

    def test_remove_out_of_range(self, invoke, files):
        invoke("add", files[0])
        result = invoke("remove", "5")
        assert result.exit_code == 1
        assert "No hook at [5]" in result.output

    def test_remove_current(self, invoke, data_dir, files):
        invoke("add", files[0])
        invoke("add", files[1])

        assert invoke("remove-current", files[0]).exit_code == 0
        assert state(data_dir) == [files[1]]

        result = invoke("remove-current", files[0])
        assert result.exit_code == 1
        assert "is not a hook" in result.output


class TestMove:
    def test_left_and_right(self, invoke, data_dir, files):
        a, b, c = files
        for path in files:
            invoke("add", path)

        result = invoke("left", c)
        assert "Moved [3] <-> [2]" in result.output
        assert state(data_dir) == [a, c, b]

        invoke("right", a)
        assert state(data_dir) == [c, a, b]

    def test_boundaries(self, invoke, data_dir, files):
        invoke("add", files[0])
        invoke("add", files[1])

        result = invoke("left", files[0])
        assert result.exit_code == 1
        assert "Already at first position" in result.output

        result = invoke("right", files[1])
        assert result.exit_code == 1
        assert "Already at last position" in result.output
        assert state(data_dir) == files[:2]


class TestNavigate:
    def test_jump_prints_path(self, invoke, files):
        invoke("add", files[0])
        invoke("add", files[1])

        result = invoke("jump", "2")

        assert result.exit_code == 0
        assert result.output.strip() == files[1]

    def test_jump_opens_editor(self, invoke, files):
        invoke("add", files[0])
        with patch("hooks_cli.commands.navigate.click.edit") as edit:
            result = invoke("jump", "1", "--open")
        assert result.exit_code == 0
        edit.assert_called_once_with(filename=files[0])

    def test_next_and_prev_wrap(self, invoke, files):
        a, b, _ = files
        invoke("add", a)
        invoke("add", b)

        assert invoke("next", b).output.strip() == a
        assert invoke("prev", a).output.strip() == b
        assert invoke("next").output.strip() == a

    def test_next_on_empty_list(self, invoke):
        result = invoke("next")
        assert result.exit_code == 1
        assert "No hooks defined" in result.output


class TestListAndWhere:
    def test_plain_list(self, invoke, files):
        for path in files:
            invoke("add", path)
        result = invoke("list", "--plain")
        assert result.output.splitlines() == files

    def test_empty_list(self, invoke):
        result = invoke("list")
        assert result.exit_code == 0
        assert "No hooks for global" in result.output

    def test_where(self, invoke, data_dir):
        result = invoke("where")
        assert "Context: global" in result.output


class TestMenu:
    def test_menu_from_file_reorders(self, invoke, data_dir, files):
        a, b, _ = files
        invoke("add", a)
        invoke("add", b)

        result = invoke("menu", "--from-file", "-", input=f"[5] = {b}\n[1] = {a}\n")

        assert result.exit_code == 0, result.output
        assert "State saved" in result.output
        assert state(data_dir) == [b, a]

    def test_menu_from_file_rejects_invalid(self, invoke, data_dir, files):
        invoke("add", files[0])

        result = invoke("menu", "--from-file", "-", input="[1] = /nonexistent\n")

        assert result.exit_code == 1
        assert "Invalid lines: 1" in result.output
        assert state(data_dir) == files[:1]

    def test_editor_round_trip(self, invoke, data_dir, files):
        a, b, c = files
        invoke("add", a)
        invoke("add", b)

        with patch("hooks_cli.commands.menu.click.edit", return_value=f"[1] = {c}\n[2] = {a}\n") as edit:
            result = invoke("menu")

        assert result.exit_code == 0, result.output
        seeded = edit.call_args.args[0]
        assert seeded == f"[1] = {a}\n[2] = {b}\n"
        assert state(data_dir) == [c, a]

    def test_editor_closed_without_saving(self, invoke, data_dir, files):
        invoke("add", files[0])
        with patch("hooks_cli.commands.menu.click.edit", return_value=None):
            result = invoke("menu")
        assert result.exit_code == 0
        assert "without changes" in result.output
        assert state(data_dir) == files[:1]

    def test_invalid_edit_can_be_retried(self, invoke, data_dir, files):
        a, b, _ = files
        invoke("add", a)
        edits = ["[1] = /nonexistent\n", f"[1] = {b}\n"]

        with patch("hooks_cli.commands.menu.click.edit", side_effect=edits) as edit:
            result = invoke("menu", input="y\n")

        assert result.exit_code == 0, result.output
        assert edit.call_count == 2
        assert edit.call_args.args[0] == "[1] = /nonexistent\n"
        assert state(data_dir) == [b]

    def test_invalid_edit_abandoned(self, invoke, data_dir, files):
        invoke("add", files[0])
        with patch("hooks_cli.commands.menu.click.edit", return_value="oops\n"):
            result = invoke("menu", input="n\n")
        assert result.exit_code == 1
        assert state(data_dir) == files[:1]


def test_git_context_is_default(runner, data_dir, files):
    with patch("hooks_cli.context.subprocess.run") as run:
        run.return_value.returncode = 0
        run.return_value.stdout = "/home/me/project\n"
        result = runner.invoke(cli, ["--data-dir", str(data_dir), "add", files[0]])

    assert result.exit_code == 0, result.output
    assert json.loads((data_dir / "%2Fhome%2Fme%2Fproject").read_text()) == [files[0]]


def test_corrupt_state_is_reported(invoke, data_dir):
    data_dir.mkdir(parents=True)
    (data_dir / "global").write_text("{ corrupt")

    result = invoke("list")

    assert result.exit_code == 1
    assert "Hooks error" in result.output


def test_undecodable_state_is_reported(invoke, data_dir):
    data_dir.mkdir(parents=True)
    (data_dir / "global").write_bytes(b'["\xff\xfe"]')

    result = invoke("next")

    assert result.exit_code == 1
    assert "Hooks error" in result.output


def test_unusable_data_dir_is_reported(runner, tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")

    result = runner.invoke(cli, ["--data-dir", str(blocker / "data"), "--global", "list"])

    assert result.exit_code == 1
    assert "Hooks error" in result.output


def test_unwritable_state_is_reported(invoke, files, monkeypatch):
    def read_only(*args, **kwargs):
        raise PermissionError("read-only data dir")

    monkeypatch.setattr("hooks_cli.store.tempfile.NamedTemporaryFile", read_only)
    result = invoke("add", files[0])

    assert result.exit_code == 1
    assert "read-only data dir" in result.output
