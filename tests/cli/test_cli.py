"""Tests for the snapshot CLI commands."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = pytest.mark.integration

REPO_ROOT = Path(__file__).resolve().parents[2]


def run_cli(*args: str) -> subprocess.CompletedProcess:
    env = {**os.environ, "PYTHONIOENCODING": "utf-8"}
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=REPO_ROOT,
        env=env,
        timeout=60,
    )


@pytest.fixture
def snapshot_file(tmp_path, button_snapshot) -> Path:
    path = tmp_path / "button.json"
    path.write_text(json.dumps(button_snapshot, ensure_ascii=False), encoding="utf-8")
    return path


class TestExtractCommand:
    """Tests for `python . extract`."""

    def test_extract_json(self, snapshot_file):
        """extract prints the camelCase record."""
        result = run_cli("extract", str(snapshot_file))

        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["name"] == "Button/Primary"
        assert data["usageNotes"] == []

    def test_extract_tree_to_file(self, snapshot_file, tmp_path):
        """extract --format tree writes the text tree."""
        output = tmp_path / "button.txt"
        result = run_cli(
            "extract", str(snapshot_file), "--format", "tree", "--output", str(output)
        )

        assert result.returncode == 0
        assert output.read_text(encoding="utf-8").startswith("Button/Primary [Primary]")

    def test_extract_unsupported_selection(self, tmp_path):
        """Unsupported selections exit 1 with the user-facing message."""
        path = tmp_path / "frame.json"
        path.write_text(json.dumps({"selection": [{"type": "FRAME", "name": "Card"}]}))

        result = run_cli("extract", str(path))

        assert result.returncode == 1
        assert "Component 또는 Component Set만 지원합니다." in result.stderr

    def test_extract_malformed_snapshot(self, tmp_path):
        """Malformed snapshots exit 1."""
        path = tmp_path / "broken.json"
        path.write_text('{"selection": "nope"}')

        assert run_cli("extract", str(path)).returncode == 1

    def test_extract_missing_file(self, tmp_path):
        """Missing files exit 1."""
        assert run_cli("extract", str(tmp_path / "missing.json")).returncode == 1


class TestMessageCommand:
    """Tests for `python . message`."""

    def test_copy_guide_with_clipboard(self, snapshot_file):
        """copy-guide succeeds with an in-memory clipboard."""
        result = run_cli(
            "message", str(snapshot_file), "copy-guide", "--payload", "# Guide", "--clipboard"
        )

        assert result.returncode == 0
        first = json.loads(result.stdout.splitlines()[0])
        assert first["type"] == "copy-result"
        assert first["payload"]["success"] is True
        assert "# Guide" in result.stdout

    def test_copy_guide_without_clipboard(self, snapshot_file):
        """copy-guide without clipboard reports the failure."""
        result = run_cli("message", str(snapshot_file), "copy-guide")

        message = json.loads(result.stdout.splitlines()[0])
        assert message["payload"] == {
            "success": False,
            "message": "copyText API를 사용할 수 없습니다.",
        }

    def test_request_metadata(self, snapshot_file):
        """request-metadata prints the metadata message."""
        result = run_cli("message", str(snapshot_file), "request-metadata")

        message = json.loads(result.stdout.splitlines()[0])
        assert message["type"] == "metadata"
        assert message["payload"]["data"]["semanticRole"] == "Primary"


class TestEnvCommand:
    """Tests for `python . env`."""

    def test_env_lists_panel_variables(self):
        """env --category panel lists only panel variables."""
        result = run_cli("env", "--category", "panel")

        assert result.returncode == 0
        assert "PANEL_WIDTH" in result.stdout
        assert "MCP_PORT" not in result.stdout

    def test_env_describes_service_variables(self):
        """env --category service shows each variable's description and default."""
        result = run_cli("env", "--category", "service")

        assert result.returncode == 0
        assert "MCP_VERBOSE" in result.stdout
        assert "Enable debug logging for the MCP server (default: False)" in result.stdout
        assert "PANEL_WIDTH" not in result.stdout
