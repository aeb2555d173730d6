"""Tests for javaprobe home and Java installation paths."""

from __future__ import annotations

from pathlib import Path

import pytest

from javaprobe.bootstrap.paths import (
    DEFAULT_HOME_DIR_NAME,
    JAVAPROBE_HOME_ENV,
    JavaInstallPaths,
    JavaProbePaths,
    get_javaprobe_home,
)
from javaprobe.core.models import HostOS


class TestGetJavaprobeHome:
    """Tests for home directory resolution."""

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(JAVAPROBE_HOME_ENV, str(tmp_path))
        assert get_javaprobe_home() == tmp_path

    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(JAVAPROBE_HOME_ENV, raising=False)
        assert get_javaprobe_home() == Path.home() / DEFAULT_HOME_DIR_NAME


class TestJavaProbePaths:
    """Tests for JavaProbePaths."""

    def test_global_config(self, tmp_path: Path) -> None:
        paths = JavaProbePaths(tmp_path)
        assert paths.config_dir == tmp_path / "config"
        assert paths.global_config == tmp_path / "config" / "config.yml"

    def test_default_uses_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(JAVAPROBE_HOME_ENV, str(tmp_path))
        assert JavaProbePaths.default().home == tmp_path


class TestJavaInstallPaths:
    """Tests for executable layout inside a Java bin directory."""

    def test_unix_layout(self, tmp_path: Path) -> None:
        paths = JavaInstallPaths(tmp_path, HostOS.LINUX)
        assert paths.java_exe == tmp_path / "java"
        assert paths.javaw_exe == paths.java_exe
        assert paths.javac_exe == tmp_path / "javac"

    def test_macos_javaw_is_java(self, tmp_path: Path) -> None:
        paths = JavaInstallPaths(tmp_path, HostOS.MACOS)
        assert paths.javaw_exe == tmp_path / "java"

    def test_windows_layout(self, tmp_path: Path) -> None:
        paths = JavaInstallPaths(tmp_path, HostOS.WINDOWS)
        assert paths.java_exe == tmp_path / "java.exe"
        assert paths.javaw_exe == tmp_path / "javaw.exe"
        assert paths.javac_exe == tmp_path / "javac.exe"

    def test_jre_without_javac(self, tmp_path: Path) -> None:
        assert JavaInstallPaths(tmp_path, HostOS.LINUX).is_jre() is True

    def test_jdk_with_javac(self, tmp_path: Path) -> None:
        (tmp_path / "javac").write_text("")
        assert JavaInstallPaths(tmp_path, HostOS.LINUX).is_jre() is False

    def test_windows_jdk_needs_exe_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "javac").write_text("")
        assert JavaInstallPaths(tmp_path, HostOS.WINDOWS).is_jre() is True
        (tmp_path / "javac.exe").write_text("")
        assert JavaInstallPaths(tmp_path, HostOS.WINDOWS).is_jre() is False
