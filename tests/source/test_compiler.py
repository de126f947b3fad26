"""
Tests for tailwindkit.source.compiler.
"""

import os

import pytest

from tailwindkit.core.exceptions import CompileFailedError, Stage
from tailwindkit.source.compiler import Compiler


class TestCompiler:
    def test_build_command(self):
        assert Compiler().build_command() == ["cargo", "build", "--release"]

    def test_runs_in_working_directory(self, fake_runner, tmp_path):
        """Test the build is scoped to the checkout, not our cwd."""
        before = os.getcwd()

        Compiler(runner=fake_runner).compile(tmp_path, "freebsd-arm64")

        call = fake_runner.calls[0]
        assert call.args == ["cargo", "build", "--release"]
        assert call.cwd == tmp_path
        assert os.getcwd() == before

    def test_populates_release_directory(self, fake_runner, tmp_path):
        Compiler(runner=fake_runner).compile(tmp_path, "freebsd-arm64")

        assert (tmp_path / "target" / "release" / "tailwindcss").exists()

    def test_target_is_not_passed_to_cargo(self, fake_runner, tmp_path):
        """Test builds are host-only: no --target flag is added."""
        Compiler(runner=fake_runner).compile(tmp_path, "openbsd-x64")

        assert "--target" not in fake_runner.calls[0].args
        assert "openbsd-x64" not in fake_runner.calls[0].args

    def test_failure_carries_output(self, fake_runner, tmp_path):
        fake_runner.fail("build", "error[E0432]: unresolved import `lightningcss`", 101)

        with pytest.raises(CompileFailedError) as exc_info:
            Compiler(runner=fake_runner).compile(tmp_path, "freebsd-arm64")

        assert exc_info.value.stage is Stage.COMPILING
        assert "unresolved import" in exc_info.value.reason

    def test_custom_command_and_timeout(self, fake_runner, tmp_path):
        Compiler(command="/opt/cargo", runner=fake_runner, timeout=900).compile(
            tmp_path, "netbsd-x64"
        )

        assert fake_runner.calls[0].args[0] == "/opt/cargo"
        assert fake_runner.calls[0].timeout == 900
