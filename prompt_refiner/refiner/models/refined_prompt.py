"""
Refined Prompt Models - Structured representation of a refined request.

A RefinedPrompt is built once per refinement request from the combined
input text and is never mutated afterwards, so every entity here is a
frozen dataclass holding tuples rather than lists.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Optional, Tuple

from ...utils.text import to_camel_case


EXTRACTION_METHOD = "pattern-matching-and-keyword-extraction"
UNSPECIFIED_PURPOSE = "Unspecified purpose"


class _ValueEnum(Enum):
    """Enum parsed from its lowercase string value."""

    @classmethod
    def from_string(cls, value: Optional[str], default=None):
        """Parse a member from its value, case-insensitively."""
        if value is None:
            return default
        if isinstance(value, cls):
            return value
        value_lower = str(value).lower().strip()
        for member in cls:
            if member.value == value_lower:
                return member
        return default


class Priority(_ValueEnum):
    """Feature priority."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Complexity(_ValueEnum):
    """Estimated milestone complexity."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class OutputType(_ValueEnum):
    """Kinds of expected deliverables."""
    CODE = "code"
    DESIGN = "design"
    DOCUMENTATION = "documentation"
    PROTOTYPE = "prototype"
    OTHER = "other"


class Platform(_ValueEnum):
    """Target platforms recognized in free text."""
    WEB = "web"
    MOBILE = "mobile"
    DESKTOP = "desktop"
    IOS = "ios"
    ANDROID = "android"
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    CLOUD = "cloud"


class DesignStyle(_ValueEnum):
    """Design style hinted at by image text."""
    MINIMALIST = "minimalist"
    MODERN = "modern"
    CLASSIC = "classic"


class Layout(_ValueEnum):
    """Layout hinted at by image text."""
    GRID = "grid"
    SIDEBAR = "sidebar"


class SourceType(_ValueEnum):
    """Kinds of input a request was assembled from."""
    TEXT = "text"
    IMAGE = "image"
    PDF = "pdf"
    WORD = "word"
    COMBINED = "combined"


def _freeze(instance, name: str) -> None:
    """Store a list-valued field as a tuple on a frozen instance."""
    value = getattr(instance, name)
    if not isinstance(value, tuple):
        object.__setattr__(instance, name, tuple(value or ()))


def _coerce(instance, name: str, enum_cls, default=None) -> None:
    """Parse a string-valued enum field on a frozen instance."""
    value = getattr(instance, name)
    if value is not None and not isinstance(value, enum_cls):
        object.__setattr__(instance, name, enum_cls.from_string(value, default))


def _serialize(value: Any) -> Any:
    """Render models as the camelCase document shape."""
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value):
        return {
            to_camel_case(f.name): _serialize(getattr(value, f.name))
            for f in fields(value)
        }
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _serialize(item) for key, item in value.items()}
    return value


@dataclass(frozen=True)
class CoreIntent:
    """What the requester wants built, and for whom."""
    purpose: str
    description: str
    target_audience: Optional[str] = None

    @property
    def has_purpose(self) -> bool:
        return bool(self.purpose) and self.purpose != UNSPECIFIED_PURPOSE


@dataclass(frozen=True)
class Feature:
    """A primary feature candidate with its classified priority."""
    feature: str
    description: str = ""
    priority: Priority = Priority.MEDIUM

    def __post_init__(self):
        _coerce(self, "priority", Priority, Priority.MEDIUM)


@dataclass(frozen=True)
class FunctionalRequirements:
    primary_features: Tuple[Feature, ...] = ()
    user_interactions: Tuple[str, ...] = ()
    expected_behaviors: Tuple[str, ...] = ()

    def __post_init__(self):
        for name in ("primary_features", "user_interactions", "expected_behaviors"):
            _freeze(self, name)


@dataclass(frozen=True)
class TechnicalConstraints:
    platform: Optional[Platform] = None
    technologies: Tuple[str, ...] = ()
    performance: Optional[str] = None
    compatibility: Tuple[str, ...] = ()
    limitations: Tuple[str, ...] = ()

    def __post_init__(self):
        _coerce(self, "platform", Platform)
        for name in ("technologies", "compatibility", "limitations"):
            _freeze(self, name)

    @property
    def is_specified(self) -> bool:
        return self.platform is not None or bool(self.technologies)


@dataclass(frozen=True)
class Output:
    """One expected deliverable."""
    type: OutputType
    description: str
    format: str = "standard"

    def __post_init__(self):
        _coerce(self, "type", OutputType, OutputType.OTHER)


@dataclass(frozen=True)
class Milestone:
    name: str
    description: str
    estimated_complexity: Complexity = Complexity.MEDIUM

    def __post_init__(self):
        _coerce(self, "estimated_complexity", Complexity, Complexity.MEDIUM)


@dataclass(frozen=True)
class Deliverables:
    outputs: Tuple[Output, ...] = ()
    milestones: Tuple[Milestone, ...] = ()

    def __post_init__(self):
        _freeze(self, "outputs")
        _freeze(self, "milestones")

    def output_types(self) -> Tuple[OutputType, ...]:
        """Distinct output types in first-seen order."""
        return tuple(dict.fromkeys(o.type for o in self.outputs))


@dataclass(frozen=True)
class VisualElements:
    """Visual hints taken from the first image input."""
    colors: Tuple[str, ...] = ()
    design_style: Optional[DesignStyle] = None
    layout: Optional[Layout] = None
    components: Tuple[str, ...] = ()

    def __post_init__(self):
        _coerce(self, "design_style", DesignStyle)
        _coerce(self, "layout", Layout)
        _freeze(self, "colors")
        _freeze(self, "components")


@dataclass(frozen=True)
class Metadata:
    """Quality scores and provenance of a refined prompt."""
    confidence_score: float = 0.5
    completeness_score: float = 0.5
    source_types: Tuple[SourceType, ...] = (SourceType.TEXT,)
    extraction_method: str = EXTRACTION_METHOD
    missing_information: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "source_types", tuple(
            SourceType.from_string(s, SourceType.COMBINED) for s in self.source_types
        ))
        _freeze(self, "missing_information")


@dataclass(frozen=True)
class SourceInputs:
    """Traceability record of what the document was built from."""
    text_content: str = ""
    image_paths: Tuple[str, ...] = ()
    document_paths: Tuple[str, ...] = ()
    original_format: str = ""

    def __post_init__(self):
        _freeze(self, "image_paths")
        _freeze(self, "document_paths")


@dataclass(frozen=True)
class RefinedPrompt:
    """
    Complete refined prompt document.

    This is the single output of a refinement request. Ownership passes
    to the caller (typically a storage layer) as soon as it is returned.
    """
    core_intent: CoreIntent
    functional_requirements: FunctionalRequirements = field(default_factory=FunctionalRequirements)
    technical_constraints: TechnicalConstraints = field(default_factory=TechnicalConstraints)
    deliverables: Deliverables = field(default_factory=Deliverables)
    visual_elements: VisualElements = field(default_factory=VisualElements)
    metadata: Metadata = field(default_factory=Metadata)
    source_inputs: SourceInputs = field(default_factory=SourceInputs)
    custom_fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "custom_fields", MappingProxyType(dict(self.custom_fields or {})))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase document shape used for storage."""
        return _serialize(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RefinedPrompt':
        """
        Rebuild a document from its camelCase dictionary form.

        Args:
            data: Dictionary as produced by ``to_dict`` (or read from storage)

        Returns:
            RefinedPrompt instance
        """
        intent = data.get('coreIntent', {})
        functional = data.get('functionalRequirements', {})
        technical = data.get('technicalConstraints', {})
        deliverables = data.get('deliverables', {})
        visual = data.get('visualElements', {})
        metadata = data.get('metadata', {})
        sources = data.get('sourceInputs', {})

        return cls(
            core_intent=CoreIntent(
                purpose=intent.get('purpose', ''),
                description=intent.get('description', ''),
                target_audience=intent.get('targetAudience'),
            ),
            functional_requirements=FunctionalRequirements(
                primary_features=[
                    Feature(
                        feature=f.get('feature', ''),
                        description=f.get('description', ''),
                        priority=f.get('priority', 'medium'),
                    )
                    for f in functional.get('primaryFeatures', [])
                ],
                user_interactions=functional.get('userInteractions', []),
                expected_behaviors=functional.get('expectedBehaviors', []),
            ),
            technical_constraints=TechnicalConstraints(
                platform=technical.get('platform'),
                technologies=technical.get('technologies', []),
                performance=technical.get('performance'),
                compatibility=technical.get('compatibility', []),
                limitations=technical.get('limitations', []),
            ),
            deliverables=Deliverables(
                outputs=[
                    Output(
                        type=o.get('type', 'other'),
                        description=o.get('description', ''),
                        format=o.get('format', 'standard'),
                    )
                    for o in deliverables.get('outputs', [])
                ],
                milestones=[
                    Milestone(
                        name=m.get('name', ''),
                        description=m.get('description', ''),
                        estimated_complexity=m.get('estimatedComplexity', 'medium'),
                    )
                    for m in deliverables.get('milestones', [])
                ],
            ),
            visual_elements=VisualElements(
                colors=visual.get('colors', []),
                design_style=visual.get('designStyle'),
                layout=visual.get('layout'),
                components=visual.get('components', []),
            ),
            metadata=Metadata(
                confidence_score=metadata.get('confidenceScore', 0.5),
                completeness_score=metadata.get('completenessScore', 0.5),
                source_types=metadata.get('sourceTypes') or ['text'],
                extraction_method=metadata.get('extractionMethod', EXTRACTION_METHOD),
                missing_information=metadata.get('missingInformation', []),
            ),
            source_inputs=SourceInputs(
                text_content=sources.get('textContent') or '',
                image_paths=sources.get('imagePaths', []),
                document_paths=sources.get('documentPaths', []),
                original_format=sources.get('originalFormat', ''),
            ),
            custom_fields=dict(data.get('customFields') or {}),
        )

    def summary(self) -> str:
        """Get a summary string of the refined prompt."""
        platform = self.technical_constraints.platform
        return (
            f"Purpose: {self.core_intent.purpose}\n"
            f"  Features: {len(self.functional_requirements.primary_features)}\n"
            f"  Interactions: {len(self.functional_requirements.user_interactions)}\n"
            f"  Platform: {platform.value if platform else '-'}\n"
            f"  Technologies: {', '.join(self.technical_constraints.technologies) or '-'}\n"
            f"  Outputs: {len(self.deliverables.outputs)}\n"
            f"  Confidence: {self.metadata.confidence_score:.2f}\n"
            f"  Completeness: {self.metadata.completeness_score:.2f}\n"
            f"  Missing: {', '.join(self.metadata.missing_information) or 'none'}"
        )
