"""Integration tests against a real docker-compose installation.

Usage:
    pytest tests/integration/test_docker_compose.py -v -m docker
"""

from pathlib import Path

import pytest

from compose_manager import (
    ComposeCommandError,
    ComposeFileNotFoundError,
    ComposeManager,
    DockerInstallationMissingError,
)

pytestmark = pytest.mark.docker

COMPOSE_YAML = """\
services:
  web:
    image: nginx:alpine
"""


def test_config_renders_compose_file(docker_compose, tmp_path: Path):
    (tmp_path / "docker-compose.yml").write_text(COMPOSE_YAML)

    output = ComposeManager(cwd=str(tmp_path)).config("docker-compose.yml")

    assert "nginx:alpine" in output


def test_missing_default_compose_file(docker_compose, tmp_path: Path):
    # Older releases mention docker-compose.yml; newer ones only say "no configuration file provided"
    with pytest.raises((ComposeFileNotFoundError, ComposeCommandError)):
        ComposeManager(cwd=str(tmp_path)).config()


def test_missing_program_is_tool_not_installed(tmp_path: Path):
    manager = ComposeManager(cwd=str(tmp_path), compose_binary="docker-compose-does-not-exist")

    with pytest.raises(DockerInstallationMissingError):
        manager.ps()
