"""Tests for mob.cli module."""

from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from mob import __version__
from mob.cli import app, build_coordinator, handle_review
from mob.errors import StorageError, UsageError
from mob.git import GitError
from mob.tracking import TrackingStore
from mob.user_config import ConflictStrategy
from mob.workflow import PartialSuccess, RolledBack, UpdateState


runner = CliRunner()


def record_fork_point(store, issue="42", fork_point="F"):
    document = store.load()
    document.set_fork_point(issue, fork_point)
    store.save(document)


class TestVersion:
    """Tests for the --version option."""

    def test_prints_version(self):
        """Test that --version prints the package version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"mob {__version__}" in result.output


class TestInitCommand:
    """Tests for mob init command."""

    def test_creates_branch(self, mocker, coordinator, fake_repo, store):
        """Test creating a wip branch for an explicit issue."""
        mocker.patch("mob.cli.init.build_coordinator", return_value=coordinator)
        fake_repo.head = "main"

        result = runner.invoke(app, ["init", "77"])

        assert result.exit_code == 0
        assert "Created and switched to branch 'wip/77'" in result.output
        assert store.load().get_fork_point("77") == "F"

    def test_prompts_for_issue(self, mocker, coordinator, fake_repo, store):
        """Test that a missing issue is prompted for."""
        mocker.patch("mob.cli.init.build_coordinator", return_value=coordinator)
        fake_repo.head = "main"

        result = runner.invoke(app, ["init"], input="login bug\n")

        assert result.exit_code == 0
        assert "wip/login-bug" in result.output
        assert "wip/login-bug" in fake_repo.branches

    def test_base_branch_option(self, mocker, coordinator, fake_repo):
        """Test that --base-branch is checked out and pulled."""
        mocker.patch("mob.cli.init.build_coordinator", return_value=coordinator)

        result = runner.invoke(app, ["init", "77", "-b", "main"])

        assert result.exit_code == 0
        assert ("checkout", "main") in fake_repo.calls
        assert ("pull",) in fake_repo.calls

    def test_git_error(self, mocker, coordinator, fake_repo):
        """Test that an existing branch is reported as a git error."""
        mocker.patch("mob.cli.init.build_coordinator", return_value=coordinator)

        result = runner.invoke(app, ["init", "42"])

        assert result.exit_code == 1
        assert "Git error" in result.output

    def test_not_a_repository(self, mocker):
        """Test error outside a git repository."""
        mocker.patch("mob.cli.init.build_coordinator", side_effect=GitError("Not in a git repository."))

        result = runner.invoke(app, ["init", "42"])

        assert result.exit_code == 1
        assert "Not in a git repository" in result.output


class TestUpdateCommand:
    """Tests for mob update command."""

    def test_requires_message_option(self):
        """Test that --message is mandatory."""
        result = runner.invoke(app, ["update"])
        assert result.exit_code != 0

    def test_full_success(self, mocker, coordinator, fake_repo, store):
        """Test reporting a successful first update."""
        mocker.patch("mob.cli.update.build_coordinator", return_value=coordinator)
        record_fork_point(store)

        result = runner.invoke(app, ["update", "-m", "Add feature"])

        assert result.exit_code == 0
        assert "Successfully merged 3 commit(s) into 'pr/42' (new branch)" in result.output
        assert fake_repo.head == "wip/42"

    def test_nothing_to_merge(self, mocker, coordinator, fake_repo, store):
        """Test that an empty branch is not an error."""
        mocker.patch("mob.cli.update.build_coordinator", return_value=coordinator)
        record_fork_point(store)
        fake_repo.wip_commits = []

        result = runner.invoke(app, ["update", "-m", "Add feature"])

        assert result.exit_code == 0
        assert "No commits to merge" in result.output

    def test_rolled_back(self, mocker, coordinator, fake_repo, store):
        """Test that a rolled back update exits with an error."""
        mocker.patch("mob.cli.update.build_coordinator", return_value=coordinator)
        record_fork_point(store)
        fake_repo.fail("commit_squash")

        result = runner.invoke(app, ["update", "-m", "Add feature"])

        assert result.exit_code == 1
        assert "error creating squash commit" in result.output
        assert "changes rolled back" in result.output

    def test_partial_success(self, mocker):
        """Test that a partial success warns and exits with an error."""
        coordinator = MagicMock()
        coordinator.update.return_value = PartialSuccess(
            issue="42",
            pr_branch="pr/42",
            merged_commits=["c1"],
            details="error switching back to wip branch: boom (but merge was successful)",
        )
        mocker.patch("mob.cli.update.build_coordinator", return_value=coordinator)

        result = runner.invoke(app, ["update", "-m", "msg"])

        assert result.exit_code == 1
        assert "Merged 1 commit(s) into 'pr/42'" in result.output
        assert "Warning: error switching back" in result.output

    def test_rolled_back_message_from_result(self, mocker):
        """Test that the rolled back reason is printed."""
        coordinator = MagicMock()
        coordinator.update.return_value = RolledBack(
            issue="42",
            reason="error pushing to remote: rejected",
            failed_at=UpdateState.TRACKING_PERSISTED,
        )
        mocker.patch("mob.cli.update.build_coordinator", return_value=coordinator)

        result = runner.invoke(app, ["update", "-m", "msg"])

        assert result.exit_code == 1
        assert "Error: error pushing to remote: rejected (changes rolled back)" in result.output

    def test_not_on_wip_branch(self, mocker, coordinator, fake_repo):
        """Test the usage error for a non-wip branch."""
        mocker.patch("mob.cli.update.build_coordinator", return_value=coordinator)
        fake_repo.head = "main"

        result = runner.invoke(app, ["update", "-m", "msg"])

        assert result.exit_code == 1
        assert "Not on a wip branch" in result.output

    def test_storage_error(self, mocker):
        """Test that storage errors are reported."""
        coordinator = MagicMock()
        coordinator.update.side_effect = StorageError("Corrupt tracking data")
        mocker.patch("mob.cli.update.build_coordinator", return_value=coordinator)

        result = runner.invoke(app, ["update", "-m", "msg"])

        assert result.exit_code == 1
        assert "Storage error: Corrupt tracking data" in result.output


class TestReviewCommand:
    """Tests for mob review command."""

    def test_no_changes(self, mocker, coordinator, store):
        """Test the message when there is nothing to review."""
        mocker.patch("mob.cli.review.build_coordinator", return_value=coordinator)
        record_fork_point(store)

        result = runner.invoke(app, ["review"])

        assert result.exit_code == 0
        assert "No changes to review" in result.output

    def test_complete_review(self, mocker, coordinator, fake_repo, store):
        """Test a review with every default item checked."""
        mocker.patch("mob.cli.review.build_coordinator", return_value=coordinator)
        record_fork_point(store)
        fake_repo.diff_text = "diff --git a/x b/x\n+added"
        fake_repo.diff_stat_text = "x | 1 +"

        result = runner.invoke(app, ["review", "--no-color"], input="n\ny\ny\ny\ny\n")

        assert result.exit_code == 0
        assert "x | 1 +" in result.output
        assert "Review complete" in result.output

    def test_incomplete_review(self, mocker, coordinator, fake_repo, store):
        """Test that an unchecked item leaves the review incomplete."""
        mocker.patch("mob.cli.review.build_coordinator", return_value=coordinator)
        record_fork_point(store)
        fake_repo.diff_text = "diff --git a/x b/x\n+added"

        result = runner.invoke(app, ["review"], input="n\ny\nn\ny\ny\n")

        assert result.exit_code == 0
        assert "Review incomplete" in result.output

    def test_handle_review_uses_repository_checklist(self, coordinator, fake_repo, store, capsys):
        """Test that the checklist file of the repository is used."""
        record_fork_point(store)
        fake_repo.diff_text = "+added"
        (fake_repo.root / ".mob" / "checklist.yaml").write_text(
            "items:\n  - id: perf\n    description: Benchmarks checked\n"
        )
        surface = MagicMock()
        surface.run.return_value = True

        handle_review(coordinator, surface)

        items = surface.run.call_args[0][1]
        assert [item.id for item in items] == ["perf"]
        assert "Review complete" in capsys.readouterr().out


class TestStatusCommand:
    """Tests for mob status command."""

    def test_shows_state(self, mocker, coordinator, fake_repo, store):
        """Test the status report."""
        mocker.patch("mob.cli.status.build_coordinator", return_value=coordinator)
        record_fork_point(store)

        result = runner.invoke(app, ["status"])

        assert result.exit_code == 0
        assert "Issue: 42" in result.output
        assert "pr/42 (not created yet)" in result.output
        assert "Last merged commit: (none)" in result.output
        assert "Unmerged commits: 3" in result.output

    def test_merge_in_progress_warning(self, mocker, coordinator, fake_repo, store):
        """Test the warning for an unfinished merge."""
        mocker.patch("mob.cli.status.build_coordinator", return_value=coordinator)
        record_fork_point(store)
        fake_repo.merge_in_progress = True

        result = runner.invoke(app, ["status"])

        assert "merge is in progress" in result.output

    def test_missing_fork_point(self, mocker, coordinator):
        """Test the usage error when init was never run."""
        mocker.patch("mob.cli.status.build_coordinator", return_value=coordinator)

        result = runner.invoke(app, ["status"])

        assert result.exit_code == 1
        assert "No fork point found" in result.output


class TestConfigCommands:
    """Tests for mob config commands."""

    def test_show_defaults(self, mocker, temp_dir):
        """Test showing the default configuration."""
        mocker.patch("mob.cli.config.get_repo_root", return_value=temp_dir)

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "remote: origin" in result.output
        assert "conflict_strategy: theirs" in result.output
        assert "reinit: allow" in result.output

    def test_set_value(self, mocker, temp_dir):
        """Test setting a value."""
        mocker.patch("mob.cli.config.get_repo_root", return_value=temp_dir)

        result = runner.invoke(app, ["config", "set", "conflict_strategy", "FAIL"])

        assert result.exit_code == 0
        assert "Set conflict_strategy = fail" in result.output
        assert (temp_dir / ".mob" / "config.yaml").exists()

    def test_set_invalid_value(self, mocker, temp_dir):
        """Test that invalid values are rejected."""
        mocker.patch("mob.cli.config.get_repo_root", return_value=temp_dir)

        result = runner.invoke(app, ["config", "set", "reinit", "sometimes"])

        assert result.exit_code == 1
        assert "Invalid value for 'reinit'" in result.output

    def test_show_outside_repository(self, mocker):
        """Test handling of git error."""
        mocker.patch("mob.cli.config.get_repo_root", side_effect=GitError("not a repo"))

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
        assert "error" in result.output.lower()


class TestChecklistCommands:
    """Tests for mob checklist commands."""

    def test_list_default(self, mocker, temp_dir):
        """Test listing the built-in checklist."""
        mocker.patch("mob.cli.checklist.get_repo_root", return_value=temp_dir)

        result = runner.invoke(app, ["checklist", "list"])

        assert result.exit_code == 0
        assert "built-in default" in result.output
        assert "[tests] All tests pass" in result.output
        assert "Total: 4 item(s)" in result.output

    def test_init_writes_file(self, mocker, temp_dir):
        """Test writing the initial checklist."""
        mocker.patch("mob.cli.checklist.get_repo_root", return_value=temp_dir)

        result = runner.invoke(app, ["checklist", "init"])

        assert result.exit_code == 0
        assert "5 item(s) saved" in result.output
        assert (temp_dir / ".mob" / "checklist.yaml").exists()

    def test_init_keeps_existing(self, mocker, temp_dir):
        """Test declining to overwrite an existing checklist."""
        mocker.patch("mob.cli.checklist.get_repo_root", return_value=temp_dir)
        (temp_dir / ".mob").mkdir()
        checklist_file = temp_dir / ".mob" / "checklist.yaml"
        checklist_file.write_text("items: []\n")

        result = runner.invoke(app, ["checklist", "init"], input="n\n")

        assert result.exit_code == 0
        assert "Keeping existing checklist" in result.output
        assert checklist_file.read_text() == "items: []\n"

    def test_list_corrupt_file(self, mocker, temp_dir):
        """Test that a broken checklist is reported."""
        mocker.patch("mob.cli.checklist.get_repo_root", return_value=temp_dir)
        (temp_dir / ".mob").mkdir()
        (temp_dir / ".mob" / "checklist.yaml").write_text("items: [unclosed\n")

        result = runner.invoke(app, ["checklist", "list"])

        assert result.exit_code == 1
        assert "Failed to load checklist" in result.output


class TestBuildCoordinator:
    """Tests for build_coordinator."""

    def test_wires_repository_settings(self, fake_repo):
        """Test that settings come from the repository config."""
        (fake_repo.root / ".mob").mkdir()
        (fake_repo.root / ".mob" / "config.yaml").write_text("remote: upstream\nconflict_strategy: fail\n")

        coordinator = build_coordinator(fake_repo)

        assert coordinator.repo is fake_repo
        assert isinstance(coordinator.store, TrackingStore)
        assert coordinator.store.path == fake_repo.root / ".mob" / "tracking.json"
        assert coordinator.settings.remote == "upstream"
        assert coordinator.settings.conflict_strategy is ConflictStrategy.FAIL

    def test_invalid_config_is_usage_error(self, fake_repo):
        """Test that an invalid config value surfaces as UsageError."""
        (fake_repo.root / ".mob").mkdir()
        (fake_repo.root / ".mob" / "config.yaml").write_text("reinit: sometimes\n")

        with pytest.raises(UsageError) as exc_info:
            build_coordinator(fake_repo)

        assert "reinit" in str(exc_info.value)
