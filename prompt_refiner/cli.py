"""
CLI - Command-line interface for prompt refinement.

Commands:
1. refine   - Decode, combine and refine inputs into a JSON document
2. validate - Check a stored document against its invariants
3. samples  - List the bundled sample requests
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from dotenv import load_dotenv

from .core.config import AppConfig, load_config
from .errors import DecodingFailure, InvalidInput, InvariantViolation
from .ingest import RawInput
from .refiner import PromptRefiner, RefinedPrompt
from .samples import SAMPLES, get_sample
from .utils.logger import setup_logging, get_logger, log_exception
from .validator import ValidationResult, ValidationSeverity, validate_document

logger = get_logger(__name__)


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    DIM = "\033[2m"


def color(text: str, color_code: str) -> str:
    """Apply color to text."""
    return f"{color_code}{text}{Colors.RESET}"


def print_header(title: str) -> None:
    print()
    print(color("=" * 60, Colors.CYAN))
    print(color(f"  {title}", Colors.BOLD + Colors.CYAN))
    print(color("=" * 60, Colors.CYAN))


def print_success(message: str) -> None:
    print(color(f"[SUCCESS] {message}", Colors.GREEN))


def print_error(message: str) -> None:
    print(color(f"[ERROR] {message}", Colors.RED), file=sys.stderr)


def print_step(message: str) -> None:
    print(color(f"  -> {message}", Colors.DIM))


def print_validation_report(result: ValidationResult, verbose: bool = False) -> None:
    """
    Print a formatted validation report.

    Args:
        result: ValidationResult from the document validator
        verbose: Also list warnings
    """
    if result.valid and not result.warnings:
        print_success("Document validation passed")
        return

    for issue in result.issues:
        if issue.severity == ValidationSeverity.ERROR:
            marker, code = "-", Colors.RED
        elif verbose:
            marker, code = "~", Colors.YELLOW
        else:
            continue
        location = f" {color(issue.path, Colors.DIM)}" if issue.path else ""
        print(f"  {color(marker, code)}{location}")
        print(f"    [{issue.code}] {issue.message}")

    print()
    if result.errors:
        print(color(
            f"Found {len(result.errors)} error(s) and {len(result.warnings)} warning(s)",
            Colors.RED
        ))
    else:
        print(color(f"Validation passed with {len(result.warnings)} warning(s)", Colors.YELLOW))


class _AppendPayload(argparse.Action):
    """Collect payload files of every kind into one ordered list."""

    def __call__(self, parser, namespace, values, option_string=None):
        payloads = list(getattr(namespace, self.dest, None) or [])
        payloads.append((self.const, values))
        setattr(namespace, self.dest, payloads)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="prompt-refiner",
        description="Prompt Refiner - Turn free-form requests into structured prompt documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Refine typed text and print the document
  %(prog)s refine --text "I want to build a mobile app for delivery tracking."

  # Combine a decoded screenshot with typed text
  %(prog)s refine --image-json screen.json --text-file request.txt -o refined.json

  # Refine a bundled sample
  %(prog)s refine --sample 2

  # Validate a stored document
  %(prog)s validate refined.json
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    refine_parser = subparsers.add_parser("refine", help="Refine inputs into a JSON document")
    refine_parser.add_argument("--text", help="Typed request text")
    refine_parser.add_argument("--text-file", type=Path, help="File holding the typed request text")
    refine_parser.add_argument(
        "--sample",
        type=int,
        help="Use the typed text of a bundled sample (see 'samples')",
    )
    for kind in ("image", "pdf", "word"):
        refine_parser.add_argument(
            f"--{kind}-json",
            dest="payloads",
            action=_AppendPayload,
            const=kind,
            metavar="FILE",
            help=f"Decoded {kind} payload (JSON); may be repeated",
        )
    refine_parser.add_argument("-o", "--output", type=Path, help="Output JSON file (default: stdout)")
    refine_parser.add_argument("-c", "--config", type=Path, help="Configuration file (YAML)")
    refine_parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")

    validate_parser = subparsers.add_parser("validate", help="Validate a stored document JSON file")
    validate_parser.add_argument("json_file", type=Path, help="Path to document JSON file")
    validate_parser.add_argument("-v", "--verbose", action="store_true", help="Show warnings too")

    subparsers.add_parser("samples", help="List bundled sample requests")

    return parser


def load_payload(kind: str, path: Path) -> RawInput:
    """
    Read a decoded payload file.

    Image payloads hold ``ocrText`` and optionally ``dominantColors``;
    PDF and Word payloads hold ``content``. ``path`` defaults to the
    payload file's own path.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Payload {path} must be a JSON object")
    data.setdefault("path", str(path))
    data["type"] = kind
    return RawInput.from_dict(data)


def build_raw_inputs(
    text: Optional[str] = None,
    payloads: Sequence[Tuple[str, Path]] = (),
) -> List[RawInput]:
    """
    Assemble raw inputs: payload files in argument order, typed text last.

    Args:
        text: Typed request text
        payloads: (kind, payload file) pairs

    Returns:
        List of RawInput
    """
    raw_inputs = [load_payload(kind, path) for kind, path in payloads]
    if text is not None:
        raw_inputs.append(RawInput(type="text", content=text))
    return raw_inputs


def format_document(document: Dict[str, Any], config: AppConfig) -> str:
    """Serialize a document with the configured output options."""
    return json.dumps(
        document,
        indent=config.output.indent if config.output.pretty_print else None,
        sort_keys=config.output.sort_keys,
        ensure_ascii=config.output.ensure_ascii,
    )


def run_pipeline(
    text: Optional[str] = None,
    payloads: Sequence[Tuple[str, Path]] = (),
    output_path: Optional[str | Path] = None,
    config: Optional[AppConfig] = None,
) -> dict:
    """
    Programmatic interface to run the full pipeline.

    Args:
        text: Typed request text
        payloads: (kind, payload file) pairs for decoded image/pdf/word inputs
        output_path: Optional path to write the document to
        config: Optional configuration

    Returns:
        Refined document as a camelCase dict

    Raises:
        InvalidInput / IrrelevantInput: Rejected by the relevance gate
        DecodingFailure: A payload could not be decoded
    """
    config = config or AppConfig()
    refiner = PromptRefiner(config)
    prompt = refiner.refine_inputs(build_raw_inputs(text, payloads))
    document = prompt.to_dict()

    if output_path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(format_document(document, config), encoding="utf-8")

    return document


def _resolve_text(args: argparse.Namespace) -> Optional[str]:
    if args.sample is not None:
        return get_sample(args.sample).text
    if args.text_file is not None:
        return args.text_file.read_text(encoding="utf-8")
    return args.text


def refine_command(args: argparse.Namespace) -> int:
    """
    Refine inputs given on the command line.

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print_error(f"Failed to load config: {e}")
        return 1

    setup_logging(
        level="DEBUG" if args.verbose else config.logging.level,
        format_string=config.logging.format,
        log_file=config.logging.file,
    )

    try:
        text = _resolve_text(args)
        raw_inputs = build_raw_inputs(text, args.payloads or [])
    except KeyError as e:
        print_error(str(e.args[0]))
        return 1
    except (OSError, ValueError) as e:
        print_error(f"Failed to read input: {e}")
        return 1

    if not raw_inputs:
        print_error("No input given. Use --text, --text-file, --sample or a payload file.")
        return 1

    try:
        prompt: RefinedPrompt = PromptRefiner(config).refine_inputs(raw_inputs)
    except InvalidInput as e:
        print_error(f"Rejected: {e}")
        return 1
    except (DecodingFailure, InvariantViolation) as e:
        print_error(str(e))
        return 1
    except Exception as e:
        log_exception(logger, "Unexpected error", e)
        print_error(f"Unexpected error: {e}")
        return 1

    json_str = format_document(prompt.to_dict(), config)

    if args.output is None:
        print(json_str)
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(json_str, encoding="utf-8")

    print_header("Prompt Refined")
    for line in prompt.summary().splitlines():
        print_step(line.strip())
    print()
    print_success(f"Document saved to: {args.output}")
    return 0


def validate_command(args: argparse.Namespace) -> int:
    """
    Validate a stored document.

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    print_header("Refined Prompt Validator")
    print_step(f"File: {args.json_file}")

    try:
        document = json.loads(args.json_file.read_text(encoding="utf-8"))
    except OSError as e:
        print_error(f"Failed to read file: {e}")
        return 1
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON syntax: {e}")
        return 1

    result = validate_document(document)
    print()
    print_validation_report(result, args.verbose)
    return 0 if result.valid else 1


def samples_command(args: argparse.Namespace) -> int:
    """List bundled samples."""
    print_header("Sample Requests")
    for sample in SAMPLES:
        print()
        print(color(f"{sample.id}. {sample.title}", Colors.BOLD))
        print(f"   {sample.text}")
    print()
    return 0


COMMANDS = {
    "refine": refine_command,
    "validate": validate_command,
    "samples": samples_command,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
