"""
Refinement Engine - Orchestrates the complete refinement pipeline.

The pipeline:
1. Decode each raw input (optional, via refine_inputs)
2. Combine decoded inputs into one text blob
3. Pass the combined text through the relevance gate
4. Run the five field extractors
5. Score the assembled document and attach the result to its metadata
6. Check the finished document against its invariants

Every step is synchronous and holds no shared mutable state, so one
PromptRefiner can serve any number of requests concurrently.
"""

from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from .extractors import (
    IntentExtractor,
    FunctionalExtractor,
    TechnicalExtractor,
    DeliverablesExtractor,
    VisualExtractor,
)
from .gate import RelevanceGate
from .models import Metadata, RefinedPrompt, SourceInputs, SourceType
from .scoring import ScoringEngine
from ..core.config import AppConfig, get_default_config
from ..errors import InvariantViolation
from ..ingest import CombinedInput, DecoderRegistry, RawInput, combine_inputs, create_registry
from ..utils.logger import get_logger, LogContext, log_json
from ..utils.text import generate_request_id, truncate
from ..validator import DocumentValidator

logger = get_logger(__name__)

TEXT_CONTENT_LIMIT = 1000


class PromptRefiner:
    """
    Main refiner that turns combined input into a RefinedPrompt.

    Usage:
        refiner = PromptRefiner()
        prompt = refiner.refine(CombinedInput.from_text("I want to build a ..."))
        print(prompt.to_dict())
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        registry: Optional[DecoderRegistry] = None,
    ):
        """
        Initialize the refiner.

        Args:
            config: Application configuration (uses defaults if None)
            registry: Decoders used by refine_inputs (default registry if None)
        """
        self.config = config or get_default_config()
        self.registry = registry or create_registry()

        tables = self.config.extraction.build_tables()
        self.gate = RelevanceGate(self.config.gate)
        self.intent_extractor = IntentExtractor(tables)
        self.functional_extractor = FunctionalExtractor(tables)
        self.technical_extractor = TechnicalExtractor(tables)
        self.deliverables_extractor = DeliverablesExtractor(tables)
        self.visual_extractor = VisualExtractor(tables)
        self.scoring = ScoringEngine(self.config.scoring)
        self.validator = DocumentValidator()

        logger.debug("PromptRefiner initialized")

    def refine(
        self,
        processed: CombinedInput,
        source_types: Optional[Sequence[str]] = None,
    ) -> RefinedPrompt:
        """
        Refine combined input into a structured document.

        Args:
            processed: Output of the input combiner
            source_types: Source kinds to record; defaults to the kinds seen
                by the combiner, or ["text"] when there are none

        Returns:
            Completed RefinedPrompt

        Raises:
            InvalidInput: Combined text is too short
            IrrelevantInput: Combined text looks like junk
            InvariantViolation: Assembled document failed its checks
        """
        resolved = self._resolve_source_types(processed, source_types)
        request_id = generate_request_id()

        with LogContext(logger, "Refining prompt", request_id=request_id, sources="+".join(resolved)):
            text = self.gate.check(processed.combined_text)

            core_intent = self.intent_extractor.extract(text)
            functional = self.functional_extractor.extract(text)
            technical = self.technical_extractor.extract(text)
            deliverables = self.deliverables_extractor.extract(text)
            visual = self.visual_extractor.extract(text, image=processed.first_image)

            prompt = RefinedPrompt(
                core_intent=core_intent,
                functional_requirements=functional,
                technical_constraints=technical,
                deliverables=deliverables,
                visual_elements=visual,
                metadata=Metadata(source_types=resolved),
                source_inputs=SourceInputs(
                    text_content=truncate(processed.combined_text, TEXT_CONTENT_LIMIT),
                    image_paths=processed.image_paths,
                    document_paths=processed.document_paths,
                    original_format="+".join(resolved),
                ),
            )

            scores = self.scoring.score(core_intent, functional, technical, deliverables)
            prompt = replace(prompt, metadata=replace(
                prompt.metadata,
                confidence_score=scores.confidence_score,
                completeness_score=scores.completeness_score,
                missing_information=scores.missing_information,
            ))

            document = prompt.to_dict()
            result = self.validator.validate(document)
            if not result.valid:
                raise InvariantViolation(result.errors)

            log_json(logger, f"Refined prompt {request_id}", document)

        return prompt

    def refine_inputs(self, raw_inputs: Iterable[RawInput]) -> RefinedPrompt:
        """
        Decode, combine and refine a list of raw inputs.

        Args:
            raw_inputs: Inputs in arrival order

        Returns:
            Completed RefinedPrompt

        Raises:
            DecodingFailure: An input could not be decoded (aborts the request)
            InvalidInput / IrrelevantInput: Rejected by the relevance gate
        """
        decoded = [self.registry.decode(raw) for raw in raw_inputs]
        processed = combine_inputs(decoded)
        return self.refine(processed, processed.source_types)

    def _resolve_source_types(
        self,
        processed: CombinedInput,
        source_types: Optional[Sequence[str]],
    ) -> List[str]:
        # Unknown labels are recorded as "combined" in both metadata and originalFormat
        candidates = list(source_types or processed.source_types or [SourceType.TEXT.value])
        resolved = []
        for source in candidates:
            value = SourceType.from_string(source, SourceType.COMBINED).value
            if value not in resolved:
                resolved.append(value)
        return resolved


def refine(
    processed: CombinedInput,
    source_types: Optional[Sequence[str]] = None,
    config: Optional[AppConfig] = None,
) -> RefinedPrompt:
    """
    Convenience function to refine combined input.

    Args:
        processed: Output of the input combiner
        source_types: Source kinds to record
        config: Optional configuration

    Returns:
        Completed RefinedPrompt
    """
    return PromptRefiner(config).refine(processed, source_types)
