"""Integration tests for the command-line interface."""

import json

import pytest
from prompt_refiner.cli import main
from prompt_refiner.utils.logger import setup_logging


DELIVERY_APP = (
    "I want to build a mobile app for delivery tracking. "
    "Drivers can update their location. "
    "The app should work on iOS and Android."
)


@pytest.fixture(autouse=True)
def quiet_logging():
    yield
    setup_logging(level="WARNING", console=False)


class TestRefineCommand:
    """Tests for 'refine'."""

    def test_prints_document(self, capsys):
        assert main(["refine", "--text", DELIVERY_APP]) == 0
        document = json.loads(capsys.readouterr().out)
        assert document["coreIntent"]["purpose"].startswith("build a mobile app")
        assert document["metadata"]["sourceTypes"] == ["text"]

    def test_writes_output_file(self, tmp_path, capsys):
        output = tmp_path / "refined.json"
        assert main(["refine", "--text", DELIVERY_APP, "-o", str(output)]) == 0
        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["technicalConstraints"]["platform"] == "android"
        assert "Document saved to" in capsys.readouterr().out

    def test_text_file(self, tmp_path, capsys):
        request = tmp_path / "request.txt"
        request.write_text(DELIVERY_APP, encoding="utf-8")
        assert main(["refine", "--text-file", str(request)]) == 0
        assert json.loads(capsys.readouterr().out)["functionalRequirements"]["userInteractions"] == [
            "update their location",
        ]

    def test_payloads_keep_argument_order(self, tmp_path, capsys):
        brief = tmp_path / "brief.json"
        brief.write_text(json.dumps({"content": "Phase 1: design the checkout."}), encoding="utf-8")
        screen = tmp_path / "screen.json"
        screen.write_text(json.dumps({"ocrText": "Modern grid", "path": "home.png"}), encoding="utf-8")

        code = main([
            "refine", "--pdf-json", str(brief), "--image-json", str(screen), "--text", DELIVERY_APP,
        ])
        assert code == 0
        document = json.loads(capsys.readouterr().out)
        assert document["metadata"]["sourceTypes"] == ["pdf", "image", "text"]
        assert document["sourceInputs"]["imagePaths"] == ["home.png"]
        assert document["sourceInputs"]["documentPaths"] == [str(brief)]
        assert document["sourceInputs"]["textContent"].startswith("[PDF Content]:")

    def test_sample(self, capsys):
        assert main(["refine", "--sample", "2"]) == 0
        document = json.loads(capsys.readouterr().out)
        assert document["technicalConstraints"]["technologies"] == ["react", "node"]

    def test_unknown_sample(self, capsys):
        assert main(["refine", "--sample", "99"]) == 1
        assert "Unknown sample" in capsys.readouterr().err

    def test_rejected_input(self, capsys):
        assert main(["refine", "--text", "hi"]) == 1
        assert "Rejected" in capsys.readouterr().err

    def test_decoding_failure(self, tmp_path, capsys):
        screen = tmp_path / "screen.json"
        screen.write_text(json.dumps({"dominantColors": []}), encoding="utf-8")
        assert main(["refine", "--image-json", str(screen), "--text", DELIVERY_APP]) == 1
        assert "image processing error" in capsys.readouterr().err

    def test_no_input(self, capsys):
        assert main(["refine"]) == 1
        assert "No input given" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys):
        assert main(["refine", "--text", DELIVERY_APP, "-c", str(tmp_path / "missing.yaml")]) == 1
        assert "Failed to load config" in capsys.readouterr().err

    def test_config_applied(self, tmp_path, capsys):
        config = tmp_path / "config.yaml"
        config.write_text("gate:\n  min_length: 500\n", encoding="utf-8")
        assert main(["refine", "--text", DELIVERY_APP, "-c", str(config)]) == 1


class TestOtherCommands:
    """Tests for 'validate', 'samples' and the bare invocation."""

    def test_validate_valid_document(self, tmp_path):
        output = tmp_path / "refined.json"
        assert main(["refine", "--text", DELIVERY_APP, "-o", str(output)]) == 0
        assert main(["validate", str(output)]) == 0

    def test_validate_invalid_document(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text(json.dumps({"coreIntent": {"purpose": ""}}), encoding="utf-8")
        assert main(["validate", str(path)]) == 1
        assert "MISSING_SECTION" in capsys.readouterr().out

    def test_validate_bad_json(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert main(["validate", str(path)]) == 1
        assert "Invalid JSON syntax" in capsys.readouterr().err

    def test_samples(self, capsys):
        assert main(["samples"]) == 0
        out = capsys.readouterr().out
        assert "E-Commerce Mobile App" in out
        assert "Restaurant Booking System" in out

    def test_no_command(self, capsys):
        assert main([]) == 1
