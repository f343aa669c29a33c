from pathlib import Path
import json
import sys

from click.testing import CliRunner

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from subdir_order import cli


def _write_description(tmp_path: Path, app_refs: str = '["Core"]') -> Path:
    """Create a minimal TOML description with two projects."""
    text = f"""
[context]
enabled_configurations = ["Debug"]

[solution]
name = "Main"
configurations = ["Debug", "Release"]

[[solution.children]]
kind = "project"
name = "App"
directory = "app"
references = {app_refs}

[[solution.children]]
kind = "project"
name = "Core"
directory = "src/core"
references = []
"""
    path = tmp_path / "solution.toml"
    path.write_text(text)
    return path


def test_cli_json_plan(tmp_path: Path):
    desc = _write_description(tmp_path)
    result = CliRunner().invoke(cli.main, [str(desc), "--format", "json", "--quiet"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["solution"] == "Main"
    assert data["skipped"] == ["Release"]
    assert data["configurations"] == [
        {"name": "Debug", "order": ["Core", "App"], "subdirs": ["src/core", "app"]}
    ]


def test_cli_configuration_option_overrides_context(tmp_path: Path):
    desc = _write_description(tmp_path)
    result = CliRunner().invoke(
        cli.main, [str(desc), "-c", "Release", "--format", "json", "--quiet"]
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [c["name"] for c in data["configurations"]] == ["Release"]
    assert data["skipped"] == ["Debug"]


def test_cli_text_with_closures(tmp_path: Path):
    desc = _write_description(tmp_path)
    result = CliRunner().invoke(cli.main, [str(desc), "--closures", "--quiet"])
    assert result.exit_code == 0
    assert "subdirs  = src/core app" in result.stdout
    assert "provides App; requires Core" in result.stdout


def test_cli_cycle_fails(tmp_path: Path):
    desc = _write_description(tmp_path, app_refs='["App"]')
    result = CliRunner().invoke(cli.main, [str(desc), "--quiet"])
    assert result.exit_code == 1


def test_cli_invalid_description(tmp_path: Path):
    bad = tmp_path / "bad.toml"
    bad.write_text("[solution]\nconfigurations = 3\n")
    result = CliRunner().invoke(cli.main, [str(bad), "--quiet"])
    assert result.exit_code == 2


def test_run_description_writes_log(tmp_path: Path):
    desc = _write_description(tmp_path)
    log = tmp_path / "plan.log"
    result = CliRunner().invoke(cli.main, [str(desc), "--quiet", "--log-file", str(log)])
    assert result.exit_code == 0
    assert "Planned Main [Debug]: src/core app" in log.read_text()


def test_example_description():
    example = Path(__file__).resolve().parents[1] / "config" / "example_solution.toml"
    result = CliRunner().invoke(cli.main, [str(example), "--format", "json", "--quiet"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    debug, release = data["configurations"]
    assert debug["order"] == ["Libs", "App", "Tests", "Launcher"]
    assert debug["subdirs"] == ["libs", "src/app", "tests"]
    assert release["subdirs"] == ["libs", "src/app"]
    assert data["included"] == "Launcher"
    assert data["skipped"] == ["Profile"]
    libs = data["subplans"][0]
    assert libs["configurations"][0]["subdirs"] == ["core", "json"]
