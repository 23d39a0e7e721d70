import json
from pathlib import Path

from typer.testing import CliRunner

from tests.utils import AI_SAMPLE, HUMAN_SAMPLE
from writing_signals.calibration import JsonProfileStore, calibrate
from writing_signals.cli import app

runner = CliRunner()


def test_cli_analyze_outputs_report_per_document(tmp_path: Path):
    """analyze emits one report per text file with the calibration verdict."""
    corpus_dir = _create_sample_corpus(tmp_path)
    store_path = tmp_path / "profiles.json"
    result = runner.invoke(
        app,
        [
            "analyze",
            "--input-path",
            str(corpus_dir),
            "--profile-store",
            str(store_path),
        ],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    doc_ids = [doc["doc_id"] for doc in payload["documents"]]
    assert doc_ids == ["essay.txt", "generated.txt"]
    for doc in payload["documents"]:
        assert doc["plagiarism"] == []
        assert doc["calibration"]["label"] == "uncertain"


def test_cli_analyze_uses_saved_profiles(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    store_path = tmp_path / "profiles.json"
    store = JsonProfileStore(store_path)
    calibrate(store, "human", HUMAN_SAMPLE)
    calibrate(store, "ai", AI_SAMPLE)

    result = runner.invoke(
        app,
        [
            "analyze",
            "--input-path",
            str(corpus_dir / "generated.txt"),
            "--profile-store",
            str(store_path),
            "--threshold",
            "0.9",
        ],
    )
    assert result.exit_code == 0, result.output
    doc = json.loads(result.stdout)["documents"][0]
    assert doc["calibration"]["label"] == "ai"
    assert doc["aiModel"]["threshold"] == 0.9
    assert doc["aiSentenceSignals"] == []


def test_cli_check_reads_request_from_stdin(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"profile_store_path: {tmp_path / 'profiles.json'}\n", encoding="utf-8"
    )
    result = runner.invoke(
        app,
        ["check", "-", "--config", str(config_path)],
        input=json.dumps({"text": AI_SAMPLE}),
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["overall"]["aiLikelihood"] == "high"
    assert payload["calibration"]["label"] == "uncertain"


def test_cli_check_rejects_blank_text(tmp_path: Path):
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"text": "   "}), encoding="utf-8")
    result = runner.invoke(app, ["check", str(request), "--without-calibration"])
    assert result.exit_code == 1
    assert "No text provided" in result.output


def test_cli_print_config():
    """print-config dumps the default configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "threshold: 0.35" in result.stdout
    assert "profile_store_path" in result.stdout


def test_cli_log_level_is_case_insensitive():
    result = runner.invoke(app, ["--log-level", "debug", "print-config"])
    assert result.exit_code == 0, result.output


def test_cli_rejects_unknown_log_level():
    result = runner.invoke(app, ["--log-level", "verbose", "print-config"])
    assert result.exit_code == 2
    assert "Unknown log level" in result.output


def test_cli_rejects_out_of_range_config(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("threshold: 2.0\n", encoding="utf-8")
    result = runner.invoke(
        app,
        ["check", "-", "--config", str(config_path)],
        input=json.dumps({"text": AI_SAMPLE}),
    )
    assert result.exit_code == 2
    assert "threshold must lie in" in result.output


def _create_sample_corpus(tmp_path: Path) -> Path:
    corpus_dir = tmp_path / "corpus"
    corpus_dir.mkdir()
    (corpus_dir / "essay.txt").write_text(HUMAN_SAMPLE, encoding="utf-8")
    (corpus_dir / "generated.txt").write_text(AI_SAMPLE, encoding="utf-8")
    (corpus_dir / "notes.bin").write_bytes(b"\x00\x01")
    return corpus_dir
