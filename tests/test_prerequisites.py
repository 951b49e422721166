from __future__ import annotations

import subprocess
from unittest import mock

import docker
import pytest

from mkimage.managers import prerequisite_manager
from mkimage.managers.base_manager import DockerNotFoundError
from mkimage.managers.prerequisite_manager import (
    BaseImageNotFoundError,
    DockerVersionError,
    PrerequisiteChecker,
    parse_docker_version_output,
    parse_engine_version,
    supports_multi_stage,
)


def _checker(client=None) -> PrerequisiteChecker:
    return PrerequisiteChecker("base/alpine:3.5.0", "base/golang:1.8", docker_client=client)


@pytest.mark.parametrize(
    "version, supported",
    [
        ("17.4.0", False),
        ("17.5.0", True),
        ("16.9.9", False),
        ("18.0.0", True),
        ("17.05.0-ce", True),
        ("17.03.1-ce", False),
        ("27.3.1", True),
    ],
)
def test_supports_multi_stage(version, supported) -> None:
    assert supports_multi_stage(parse_engine_version(version)) is supported


def test_parse_engine_version_rejects_non_numeric() -> None:
    with pytest.raises(DockerVersionError):
        parse_engine_version("dev")


def test_parse_docker_version_output() -> None:
    assert parse_docker_version_output("Docker version 17.05.0-ce, build 89658be\n") == "17.05.0-ce"
    assert parse_docker_version_output("garbage") == ""


def test_check_docker_missing_binary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(prerequisite_manager, "command_exists", lambda command: False)
    run = mock.Mock()
    monkeypatch.setattr(prerequisite_manager, "run_command", run)

    with pytest.raises(DockerNotFoundError):
        _checker().check_docker()
    run.assert_not_called()


def test_check_docker_command_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(prerequisite_manager, "command_exists", lambda command: True)

    def fail(args, check=True):
        raise subprocess.CalledProcessError(1, args)

    monkeypatch.setattr(prerequisite_manager, "run_command", fail)
    with pytest.raises(DockerNotFoundError):
        _checker().check_docker()


@pytest.mark.parametrize(
    "output, supported",
    [
        ("Docker version 17.04.0-ce, build 4845c56\n", False),
        ("Docker version 17.05.0-ce, build 89658be\n", True),
        ("Docker version 1.13.1, build 092cba3\n", False),
        ("Docker version 27.3.1, build ce12230\n", True),
    ],
)
def test_check_docker_version_gate(monkeypatch: pytest.MonkeyPatch, output, supported) -> None:
    monkeypatch.setattr(prerequisite_manager, "command_exists", lambda command: True)
    monkeypatch.setattr(prerequisite_manager, "run_command", lambda args, check=True: (0, output, ""))

    if supported:
        engine_version = _checker().check_docker()
        assert engine_version["major"] >= 17
    else:
        with pytest.raises(DockerVersionError):
            _checker().check_docker()


def test_check_images_passes_when_both_present(docker_client) -> None:
    _checker(docker_client).check_images()

    names = [c.kwargs["name"] for c in docker_client.images.list.call_args_list]
    assert names == ["base/alpine", "base/golang"]


def test_check_images_missing_base_image(docker_client) -> None:
    docker_client.images.list.side_effect = lambda name: [] if name == "base/alpine" else [object()]

    with pytest.raises(BaseImageNotFoundError, match="base/alpine:3.5.0"):
        _checker(docker_client).check_images()


def test_check_images_missing_golang_image(docker_client) -> None:
    docker_client.images.list.side_effect = lambda name: [] if name == "base/golang" else [object()]

    with pytest.raises(BaseImageNotFoundError, match="base/golang:1.8"):
        _checker(docker_client).check_images()


def test_check_images_unreachable_daemon(docker_client) -> None:
    docker_client.ping.side_effect = docker.errors.APIError("daemon down")

    with pytest.raises(DockerNotFoundError):
        _checker(docker_client).check_images()
    docker_client.images.list.assert_not_called()


def test_docker_client_created_lazily(monkeypatch: pytest.MonkeyPatch, docker_client) -> None:
    from_env = mock.Mock(return_value=docker_client)
    monkeypatch.setattr(docker, "from_env", from_env)

    checker = _checker()
    from_env.assert_not_called()
    assert checker.docker_client is docker_client
    assert checker.docker_client is docker_client
    from_env.assert_called_once_with()


def test_docker_client_creation_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(docker, "from_env", mock.Mock(side_effect=docker.errors.DockerException("no socket")))

    with pytest.raises(DockerNotFoundError):
        _checker().check_images()


def test_check_all_runs_version_check_before_images(monkeypatch: pytest.MonkeyPatch, docker_client) -> None:
    monkeypatch.setattr(prerequisite_manager, "command_exists", lambda command: True)
    monkeypatch.setattr(
        prerequisite_manager, "run_command", lambda args, check=True: (0, "Docker version 16.9.9, build x\n", "")
    )

    with pytest.raises(DockerVersionError):
        _checker(docker_client).check_all()
    docker_client.images.list.assert_not_called()
