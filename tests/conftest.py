"""Fixtures compartidas para la suite de pytest."""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Aísla la configuración: sin .env del proyecto ni del usuario real."""
    for key in list(os.environ):
        if key.upper().startswith("RD_DOCS_"):
            monkeypatch.delenv(key, raising=False)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return tmp_path


@pytest.fixture
def batch_file(tmp_path):
    path = tmp_path / "documents.csv"
    path.write_text(
        "# type,number\n"
        "dni,00113918205\n"
        "\n"
        "passport,AB1234567\n"
        "rnc,101010632\n"
        "dni,00113918206\n",
        encoding="utf-8",
    )
    return path
