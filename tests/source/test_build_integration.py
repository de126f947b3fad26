"""
Integration test: real clone and cargo build of Tailwind CSS.

Needs network access, git and a Rust toolchain. Run with --integration.
"""

import pytest

from tailwindkit.core.platform import detect_platform
from tailwindkit.source.pipeline import PipelineCoordinator, cleanup


@pytest.mark.integration
@pytest.mark.slow
def test_build_from_source():
    target = detect_platform().platform_string()

    result = PipelineCoordinator().build(target, "4.1.12")

    assert result.success, str(result)
    try:
        assert result.artifact_path.exists()
        assert result.artifact_path.parent.name == "release"
    finally:
        cleanup(result.working_directory)

    assert not result.working_directory.exists()
