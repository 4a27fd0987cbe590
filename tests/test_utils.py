"""Tests for the persistence and clipboard helpers."""

import subprocess
from pathlib import Path

import pytest
from pydantic import BaseModel, Field, ValidationError

from kiianigen.utils import PydanticPersistence, clipboard
from kiianigen.utils.clipboard import copy_file_to_clipboard


class SampleModel(BaseModel):
    """Simple model for testing."""

    name: str = "test"
    value: int = Field(default=42, alias="someValue")


class TestPydanticPersistence:
    """Test PydanticPersistence."""

    @pytest.mark.unit
    def test_save_creates_parents(self, tmp_path: Path):
        """Parent directories are created."""
        path = tmp_path / "a" / "b" / "model.json"
        PydanticPersistence.save_json(SampleModel(name="x"), path)
        assert PydanticPersistence.load_json(path, SampleModel).name == "x"

    @pytest.mark.unit
    def test_save_by_alias_and_unset(self, tmp_path: Path):
        """Aliases and exclude_unset are passed through."""
        path = tmp_path / "model.json"
        PydanticPersistence.save_json(
            SampleModel(someValue=7), path, indent=4, by_alias=True, exclude_unset=True
        )
        assert path.read_text() == '{\n    "someValue": 7\n}'

    @pytest.mark.unit
    def test_load_missing_file(self, tmp_path: Path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "missing.json", SampleModel)

    @pytest.mark.unit
    def test_load_empty_file(self, tmp_path: Path):
        """Empty files raise ValueError."""
        path = tmp_path / "empty.json"
        path.write_text("  \n")
        with pytest.raises(ValueError, match="empty"):
            PydanticPersistence.load_json(path, SampleModel)

    @pytest.mark.unit
    def test_load_invalid_json(self, tmp_path: Path):
        """Broken JSON raises a ValidationError."""
        path = tmp_path / "broken.json"
        path.write_text("{nope")
        with pytest.raises(ValidationError):
            PydanticPersistence.load_json(path, SampleModel)

    @pytest.mark.unit
    def test_load_json_or_default_missing_file(self, tmp_path: Path):
        """Missing files give the default."""
        model = PydanticPersistence.load_json_or_default(tmp_path / "missing.json", SampleModel)
        assert model == SampleModel()
        assert not (tmp_path / "missing.json").exists()

    @pytest.mark.unit
    def test_load_json_or_default_factory(self, tmp_path: Path):
        """The default factory is used when given."""
        model = PydanticPersistence.load_json_or_default(
            tmp_path / "missing.json", SampleModel, lambda: SampleModel(name="factory")
        )
        assert model.name == "factory"

    @pytest.mark.unit
    def test_load_json_or_default_corrupted_file_raises(self, tmp_path: Path):
        """Corrupted files are never silently replaced."""
        path = tmp_path / "broken.json"
        path.write_text('{"name": 5}')
        with pytest.raises(ValidationError):
            PydanticPersistence.load_json_or_default(path, SampleModel)


class TestClipboard:
    """Test copy_file_to_clipboard."""

    @pytest.fixture
    def output_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "out.json"
        path.write_text('{"a": 1}')
        return path

    @pytest.mark.unit
    def test_unsupported_platform(self, monkeypatch, output_file):
        """Nothing happens outside macOS."""
        monkeypatch.setattr(clipboard.sys, "platform", "linux")
        assert copy_file_to_clipboard(output_file) is False

    @pytest.mark.unit
    def test_copies_with_pbcopy(self, monkeypatch, output_file):
        """The file contents are piped to pbcopy."""
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs["input"]))
            return subprocess.CompletedProcess(cmd, 0)

        monkeypatch.setattr(clipboard.sys, "platform", "darwin")
        monkeypatch.setattr(clipboard.subprocess, "run", fake_run)
        assert copy_file_to_clipboard(output_file) is True
        assert calls == [(["pbcopy"], b'{"a": 1}')]

    @pytest.mark.unit
    def test_failure_is_a_warning(self, monkeypatch, output_file, caplog):
        """A failing pbcopy is reported, not raised."""
        def fake_run(cmd, **kwargs):
            raise subprocess.CalledProcessError(1, cmd)

        monkeypatch.setattr(clipboard.sys, "platform", "darwin")
        monkeypatch.setattr(clipboard.subprocess, "run", fake_run)
        assert copy_file_to_clipboard(output_file) is False
        assert "Could not copy" in caplog.text
