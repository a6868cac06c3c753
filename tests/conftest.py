"""Shared pytest fixtures for Bundle License tests."""

import json

import pytest

from bundle_license.core.engine import LicenseEngine


class RecordingEngine(LicenseEngine):
    """License engine double that records every call it receives."""

    def __init__(self, options):
        super().__init__(options)
        self.scanned = []
        self.source_map = True
        self.banner_calls = []
        self.exports = 0

    @property
    def name(self) -> str:
        return self.options.get("name") or "recording-engine"

    def scan_dependency(self, module_id: str) -> None:
        self.scanned.append(module_id)

    def disable_source_map(self) -> None:
        self.source_map = False

    def prepend_banner(self, code: str, source_map: bool):
        self.banner_calls.append((code, source_map))
        return f"/* licenses */\n{code}"

    def export_third_parties(self) -> None:
        self.exports += 1


class FailingEngine(RecordingEngine):
    """Engine whose operations all raise."""

    def scan_dependency(self, module_id: str) -> None:
        raise FileNotFoundError(module_id)

    def prepend_banner(self, code: str, source_map: bool):
        raise RuntimeError("banner template missing")

    def export_third_parties(self) -> None:
        raise PermissionError("report destination is read-only")


@pytest.fixture
def recording_engine_class():
    """Engine class recording all forwarded calls."""
    return RecordingEngine


@pytest.fixture
def failing_engine_class():
    """Engine class raising from every operation."""
    return FailingEngine


@pytest.fixture
def engine_module(tmp_path, monkeypatch):
    """Importable module exposing ENGINE_CLASS and a named factory."""
    module_dir = tmp_path / "engines"
    module_dir.mkdir()
    (module_dir / "sample_engine.py").write_text(
        "from bundle_license.core.engine import LicenseEngine\n"
        "\n"
        "class SampleEngine(LicenseEngine):\n"
        "    name = 'sample-engine'\n"
        "\n"
        "    def scan_dependency(self, module_id):\n"
        "        pass\n"
        "\n"
        "    def disable_source_map(self):\n"
        "        pass\n"
        "\n"
        "    def prepend_banner(self, code, source_map):\n"
        "        return code\n"
        "\n"
        "    def export_third_parties(self):\n"
        "        pass\n"
        "\n"
        "ENGINE_CLASS = SampleEngine\n"
        "\n"
        "def build(options):\n"
        "    return SampleEngine(options)\n"
        "\n"
        "NOT_CALLABLE = 42\n"
    )
    monkeypatch.syspath_prepend(str(module_dir))
    return "sample_engine"


@pytest.fixture
def yaml_options_file(tmp_path):
    """YAML options file with an explicit source map setting."""
    options_file = tmp_path / "license.yaml"
    options_file.write_text(
        "name: yaml-plugin\n"
        "sourceMap: true\n"
        "banner:\n"
        "  file: LICENSE\n"
        "thirdParty:\n"
        "  output: dist/dependencies.txt\n"
    )
    return options_file


@pytest.fixture
def json_options_file(tmp_path):
    """JSON options file without any source map setting."""
    options_file = tmp_path / "license.json"
    options_file.write_text(
        json.dumps({
            "name": "json-plugin",
            "thirdParty": {"output": "dist/dependencies.txt"},
        })
    )
    return options_file
