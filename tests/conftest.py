from __future__ import annotations

import tempfile
from pathlib import Path
from unittest import mock

import pytest

CHECKSUM_LINE = "a" * 64 + "  traefik-3.2.8.tar.gz"

TEMPLATE = """FROM ${golang_image} AS build
RUN echo "${checksum}" | sha256sum -c -
ENV TRAEFIK_VERSION ${version}
FROM ${base_image}
ENV PATH /usr/local/bin:$PATH
"""


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    """A resource directory holding a minimal template, manifest and entrypoint."""
    root = tmp_path / "resources"
    root.mkdir()
    (root / "Dockerfile").write_text(TEMPLATE, encoding="utf-8")
    (root / "SHASUMS256.txt").write_text(
        "# comment line\n\n" + "b" * 64 + "  traefik-3.2.7.tar.gz\n" + CHECKSUM_LINE + "\n",
        encoding="utf-8",
    )
    (root / "docker-entrypoint.sh").write_text("#!/bin/sh\nexec \"$@\"\n", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def isolated_tempdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep build contexts created by the tool inside the test's tmp_path."""
    build_tmp = tmp_path / "tmp"
    build_tmp.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(build_tmp))
    return build_tmp


@pytest.fixture
def docker_client() -> mock.MagicMock:
    """A fake Docker SDK client where every image exists and every build succeeds."""
    client = mock.MagicMock()
    client.ping.return_value = True
    client.images.list.return_value = [mock.MagicMock()]
    client.api.build.return_value = iter(
        [
            {"stream": "Step 1/5 : FROM base/golang:1.8\n"},
            {"status": "Downloading"},
            {"stream": "Successfully built 0123456789ab\n"},
        ]
    )
    client.images.get.return_value.tag.return_value = True
    return client
