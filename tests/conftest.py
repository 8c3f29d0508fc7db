"""Global test fixtures and configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from commitlint.utils.config_loader import ConfigLoader

if TYPE_CHECKING:
	from collections.abc import Iterator


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
	"""
	Keep user and repository configuration out of tests.

	Each test runs in an empty working directory with an empty XDG config
	home, no COMMITLINT_* environment variables and a fresh ConfigLoader
	singleton.

	"""
	config_home = tmp_path_factory.mktemp("xdg")
	monkeypatch.setattr("commitlint.utils.config_loader.xdg_config_home", str(config_home))
	for name in list(os.environ):
		if name.startswith("COMMITLINT_"):
			monkeypatch.delenv(name)
	monkeypatch.setattr(ConfigLoader, "_instance", None)
	monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
	yield
