"""
Configuration management for the prompt refiner.

Provides dataclasses for all configuration options with sensible defaults,
YAML file loading, and validation.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any
from pathlib import Path
import os
import yaml

from ..refiner.patterns import DEFAULT_ACTORS, DEFAULT_TABLES, PatternTables


@dataclass
class GateConfig:
    """Configuration for the relevance gate."""
    min_length: int = 10
    placeholder_tokens: List[str] = field(
        default_factory=lambda: ["test", "hello", "hi", "lorem ipsum"]
    )
    whole_word_placeholders: bool = False

    def __post_init__(self):
        if self.min_length < 0:
            raise ValueError(f"min_length must be >= 0, got {self.min_length}")


@dataclass
class ExtractionConfig:
    """Configuration for the field extractors."""
    extra_technologies: List[str] = field(default_factory=list)
    actors: List[str] = field(default_factory=lambda: list(DEFAULT_ACTORS))

    def build_tables(self) -> PatternTables:
        """Pattern tables with this configuration applied."""
        return DEFAULT_TABLES.with_overrides(
            extra_technologies=self.extra_technologies,
            actors=self.actors,
        )


@dataclass
class ScoringConfig:
    """Configuration for confidence/completeness scoring."""
    base_confidence: float = 0.5
    base_completeness: float = 0.5
    min_description_length: int = 50

    def __post_init__(self):
        for name in ("base_confidence", "base_completeness"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")


@dataclass
class OutputConfig:
    """Configuration for output formatting."""
    pretty_print: bool = True
    indent: int = 2
    sort_keys: bool = False
    ensure_ascii: bool = False


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = field(default_factory=lambda: os.getenv("PROMPT_REFINER_LOG_LEVEL", "INFO"))
    format: str = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"
    file: Optional[Path] = None

    def __post_init__(self):
        if self.file and isinstance(self.file, str):
            self.file = Path(self.file)


@dataclass
class AppConfig:
    """
    Root configuration object containing all settings.

    Can be loaded from YAML file or constructed programmatically.
    """
    gate: GateConfig = field(default_factory=GateConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> 'AppConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Invalid config file {path}: top level must be a mapping")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            AppConfig instance
        """
        try:
            return cls(
                gate=GateConfig(**data.get('gate', {})),
                extraction=ExtractionConfig(**data.get('extraction', {})),
                scoring=ScoringConfig(**data.get('scoring', {})),
                output=OutputConfig(**data.get('output', {})),
                logging=LoggingConfig(**data.get('logging', {})),
            )
        except TypeError as e:
            raise ValueError(f"Unknown configuration option: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to a dictionary.

        Returns:
            Configuration as dictionary
        """
        return {
            'gate': {
                'min_length': self.gate.min_length,
                'placeholder_tokens': list(self.gate.placeholder_tokens),
                'whole_word_placeholders': self.gate.whole_word_placeholders,
            },
            'extraction': {
                'extra_technologies': list(self.extraction.extra_technologies),
                'actors': list(self.extraction.actors),
            },
            'scoring': {
                'base_confidence': self.scoring.base_confidence,
                'base_completeness': self.scoring.base_completeness,
                'min_description_length': self.scoring.min_description_length,
            },
            'output': {
                'pretty_print': self.output.pretty_print,
                'indent': self.output.indent,
                'sort_keys': self.output.sort_keys,
                'ensure_ascii': self.output.ensure_ascii,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file': str(self.logging.file) if self.logging.file else None,
            },
        }

    def save_yaml(self, path: Path | str) -> None:
        """
        Save configuration to a YAML file.

        Args:
            path: Path to output YAML file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def get_default_config() -> AppConfig:
    """
    Get the default application configuration.

    Returns:
        AppConfig with all default values
    """
    return AppConfig()


def load_config(config_path: Optional[Path | str] = None) -> AppConfig:
    """
    Load configuration from file or return defaults.

    Looks for config in this order:
    1. Provided path
    2. ./config/default.yaml
    3. ./config.yaml
    4. ~/.prompt_refiner/config.yaml
    5. Default values

    Args:
        config_path: Optional path to config file

    Returns:
        AppConfig instance
    """
    if config_path:
        return AppConfig.from_yaml(config_path)

    default_paths = [
        Path("config/default.yaml"),
        Path("config.yaml"),
        Path.home() / ".prompt_refiner" / "config.yaml",
    ]

    for path in default_paths:
        if path.exists():
            return AppConfig.from_yaml(path)

    return get_default_config()
