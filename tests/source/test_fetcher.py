"""
Tests for tailwindkit.source.fetcher.
"""

import tempfile

import pytest
from pathlib import Path

from tailwindkit.core.exceptions import CloneFailedError, Stage
from tailwindkit.source.fetcher import (
    TAILWIND_REPOSITORY,
    SourceFetcher,
    source_ref,
)


def test_source_ref():
    assert source_ref("4.1.12") == "v4.1.12"


class TestWorkingDirectory:
    def test_deterministic_path(self, temp_root):
        fetcher = SourceFetcher(temp_root=temp_root)

        assert fetcher.working_directory("4.1.12") == temp_root / "tailwind-source-4.1.12"
        assert fetcher.working_directory("4.1.12") == fetcher.working_directory("4.1.12")

    def test_suffix(self, temp_root):
        fetcher = SourceFetcher(temp_root=temp_root)

        assert (
            fetcher.working_directory("4.1.12", "123-abcd0123").name
            == "tailwind-source-4.1.12-123-abcd0123"
        )

    def test_defaults_to_system_temp(self):
        assert SourceFetcher().temp_root == Path(tempfile.gettempdir())


class TestFetch:
    """Tests for SourceFetcher.fetch()."""

    def test_clone_command(self, fake_runner, temp_root):
        """Test a shallow clone of the version tag is requested."""
        fetcher = SourceFetcher(temp_root=temp_root, runner=fake_runner)

        workdir = fetcher.fetch("4.1.12")

        assert fake_runner.calls[0].args == [
            "git",
            "clone",
            "--depth",
            "1",
            "--branch",
            "v4.1.12",
            TAILWIND_REPOSITORY,
            str(workdir),
        ]
        assert (workdir / "Cargo.toml").exists()

    def test_clone_does_not_use_cwd(self, fake_runner, temp_root):
        fetcher = SourceFetcher(temp_root=temp_root, runner=fake_runner)
        fetcher.fetch("4.1.12")

        assert fake_runner.calls[0].cwd is None

    def test_fetch_twice_is_idempotent(self, fake_runner, temp_root):
        """Test a second fetch replaces the first checkout."""
        fetcher = SourceFetcher(temp_root=temp_root, runner=fake_runner)

        first = fetcher.fetch("4.1.12")
        (first / "stale.txt").write_text("left over")
        second = fetcher.fetch("4.1.12")

        assert first == second
        assert not (second / "stale.txt").exists()
        assert (second / "Cargo.toml").exists()
        assert [p.name for p in temp_root.iterdir()] == ["tailwind-source-4.1.12"]

    def test_removes_stale_directory_before_clone(self, fake_runner, temp_root):
        """Test a partial checkout from an earlier run is discarded."""
        stale = temp_root / "tailwind-source-4.1.12"
        (stale / "crates").mkdir(parents=True)

        def assert_clean(args, cwd):
            assert not stale.exists()
            stale.mkdir()

        fake_runner.on("clone", assert_clean)
        fetcher = SourceFetcher(temp_root=temp_root, runner=fake_runner)

        assert fetcher.fetch("4.1.12") == stale
        assert not (stale / "crates").exists()

    def test_clone_failure(self, fake_runner, temp_root):
        """Test git's error text is carried in CloneFailedError."""
        fake_runner.fail(
            "clone",
            "fatal: Remote branch v9.9.9 not found in upstream origin\n",
            returncode=128,
        )
        fetcher = SourceFetcher(temp_root=temp_root, runner=fake_runner)

        with pytest.raises(CloneFailedError) as exc_info:
            fetcher.fetch("9.9.9")

        assert exc_info.value.stage is Stage.FETCHING
        assert "Remote branch v9.9.9 not found" in exc_info.value.reason
        assert "Remote branch v9.9.9 not found" in exc_info.value.message

    def test_git_missing(self, fake_runner, temp_root):
        fake_runner.fail("clone", "No such file or directory: 'git'", returncode=None)
        fetcher = SourceFetcher(temp_root=temp_root, runner=fake_runner)

        with pytest.raises(CloneFailedError):
            fetcher.fetch("4.1.12")

    def test_custom_repository_and_timeout(self, fake_runner, temp_root):
        fetcher = SourceFetcher(
            repository="https://mirror.example.org/tailwindcss.git",
            temp_root=temp_root,
            runner=fake_runner,
            timeout=120,
        )
        fetcher.fetch("4.1.12")

        assert "https://mirror.example.org/tailwindcss.git" in fake_runner.calls[0].args
        assert fake_runner.calls[0].timeout == 120

    def test_creates_temp_root(self, fake_runner, tmp_path):
        root = tmp_path / "not" / "yet"
        fetcher = SourceFetcher(temp_root=root, runner=fake_runner)

        assert fetcher.fetch("4.1.12").parent == root


class TestIsolation:
    """Tests for per-invocation working directories."""

    def test_isolated_fetches_get_distinct_directories(self, fake_runner, temp_root):
        fetcher = SourceFetcher(temp_root=temp_root, runner=fake_runner, isolate=True)

        first = fetcher.fetch("4.1.12")
        second = fetcher.fetch("4.1.12")

        assert first != second
        assert first.exists() and second.exists()
        assert first.name.startswith("tailwind-source-4.1.12-")

    def test_existing_directories(self, fake_runner, temp_root):
        shared = SourceFetcher(temp_root=temp_root, runner=fake_runner)
        isolated = SourceFetcher(temp_root=temp_root, runner=fake_runner, isolate=True)

        base = shared.fetch("4.1.12")
        unique = isolated.fetch("4.1.12")
        shared.fetch("4.1.12-beta.1")

        assert shared.existing_directories("4.1.12") == [base, unique]

    def test_existing_directories_none(self, temp_root):
        assert SourceFetcher(temp_root=temp_root).existing_directories("4.1.12") == []
