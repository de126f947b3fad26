"""
Pytest configuration and shared fixtures for TailwindKit tests.

External tools are never run by the unit tests: cargo and git calls go through
FakeRunner, which records invocations and can simulate a clone or a build by
writing files.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest

from tailwindkit.core.platform import clear_platform_cache
from tailwindkit.core.process import ProcessResult
from tailwindkit.source.compiler import Compiler
from tailwindkit.source.fetcher import SourceFetcher
from tailwindkit.source.locator import ArtifactLocator, PosixExecutableRule
from tailwindkit.source.pipeline import PipelineCoordinator
from tailwindkit.source.probe import ToolchainProbe


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that clone and build Tailwind (needs network and cargo)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


# ============================================================================
# Fake process runner
# ============================================================================


@dataclass
class FakeCall:
    """One recorded command invocation."""

    args: List[str]
    cwd: Optional[Path]
    timeout: Optional[float]


class FakeRunner:
    """
    Stand-in for run_command.

    Commands are keyed by their first argument after the executable
    ('--version', 'clone', 'build'). Unconfigured commands succeed with no
    output.
    """

    def __init__(self):
        self.calls: List[FakeCall] = []
        self.results: Dict[str, ProcessResult] = {}
        self.effects: Dict[str, Callable[[List[str], Optional[Path]], None]] = {}

    def fail(self, key: str, output: str = "", returncode: Optional[int] = 1):
        """Make the command fail with the given output."""
        self.results[key] = ProcessResult(args=[], returncode=returncode, output=output)

    def succeed(self, key: str, output: str = ""):
        """Make the command succeed with the given output."""
        self.results[key] = ProcessResult(args=[], returncode=0, output=output)

    def on(self, key: str, effect: Callable[[List[str], Optional[Path]], None]):
        """Run effect(args, cwd) whenever the command is invoked."""
        self.effects[key] = effect

    def __call__(self, args, cwd=None, timeout=None) -> ProcessResult:
        args = [str(a) for a in args]
        cwd = Path(cwd) if cwd is not None else None
        self.calls.append(FakeCall(args=args, cwd=cwd, timeout=timeout))

        key = args[1] if len(args) > 1 else ""
        result = self.results.get(key, ProcessResult(args=[], returncode=0))
        if key in self.effects and result.ok:
            self.effects[key](args, cwd)
        return ProcessResult(
            args=args, returncode=result.returncode, output=result.output
        )

    @property
    def commands(self) -> List[str]:
        """Keys of the invoked commands, in order."""
        return [c.args[1] if len(c.args) > 1 else "" for c in self.calls]


def simulate_clone(args, cwd):
    """Create a minimal checkout at the clone destination."""
    destination = Path(args[-1])
    destination.mkdir(parents=True)
    (destination / "Cargo.toml").write_text('[workspace]\nmembers = ["crates/*"]\n')


def simulate_build(*names: str):
    """Return an effect that writes the given files to target/release."""

    def effect(args, cwd):
        release = Path(cwd) / "target" / "release"
        release.mkdir(parents=True, exist_ok=True)
        (release / "deps").mkdir(exist_ok=True)
        for name in names:
            (release / name).write_text("binary")

    return effect


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_platform_cache():
    """Make platform detection patches visible to every test."""
    clear_platform_cache()
    yield
    clear_platform_cache()


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Fake process runner with clone and build simulated."""
    runner = FakeRunner()
    runner.succeed("--version", "cargo 1.80.0 (376290515 2024-07-16)\n")
    runner.on("clone", simulate_clone)
    runner.on("build", simulate_build("tailwindcss", "tailwindcss.d"))
    return runner


@pytest.fixture
def cargo_on_path():
    """Executable lookup that finds cargo."""
    return lambda name: Path("/usr/local/bin") / name


@pytest.fixture
def cargo_missing():
    """Executable lookup that finds nothing."""
    return lambda name: None


@pytest.fixture
def temp_root(tmp_path: Path) -> Path:
    """Temp root for working directories."""
    root = tmp_path / "tmp"
    root.mkdir()
    return root


@pytest.fixture
def make_coordinator(fake_runner, cargo_on_path, temp_root):
    """Factory for a PipelineCoordinator wired to fakes."""

    def factory(which=None, runner=None, **kwargs):
        runner = runner or fake_runner
        return PipelineCoordinator(
            probe=ToolchainProbe(runner=runner, which=which or cargo_on_path),
            fetcher=SourceFetcher(temp_root=temp_root, runner=runner),
            compiler=Compiler(runner=runner),
            locator=ArtifactLocator(rule=PosixExecutableRule()),
            **kwargs,
        )

    return factory
