"""
Pattern tables - Regular expressions and vocabularies used by the extractors.

All tables are immutable. Extractors receive a PatternTables instance
and never read module globals directly, so a configured variant (for
example with extra technologies) can be built with ``with_overrides``
without touching ``DEFAULT_TABLES``.

Clauses are captured up to the next sentence terminator (``.``, ``!``
or ``?``), which is what ``CLAUSE`` expresses.
"""

import re
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Iterable, Optional, Pattern, Tuple


CLAUSE = r'([^.!?]+)'

FLAGS = re.IGNORECASE


def _compile(*patterns: str) -> Tuple[Pattern, ...]:
    return tuple(re.compile(p, FLAGS) for p in patterns)


@lru_cache(maxsize=512)
def word_pattern(word: str) -> Pattern:
    """Case-insensitive whole-word pattern for a vocabulary entry."""
    return re.compile(rf'\b{re.escape(word)}\b', FLAGS)


# Core intent (first pattern that matches wins)
PURPOSE_PATTERNS = _compile(
    rf'(?:I want|I need|build|create|develop|design|make)\s+(?:a|an|to)\s+{CLAUSE}',
    rf'(?:goal|objective|aim|purpose)\s*:?\s*{CLAUSE}',
    rf'(?:should|must|will)\s+{CLAUSE}',
)

AUDIENCE_PATTERNS = _compile(
    rf'(?:for|target|audience|users?)\s+(?:are|is|will be|should be)\s+{CLAUSE}',
    rf'(?:end\s+)?users?\s+(?:are|will|should)\s+{CLAUSE}',
)

# Functional requirements (every match is a candidate)
FEATURE_PATTERNS = _compile(
    rf'(?:feature|function|functionality|capability)\s*:?\s*{CLAUSE}',
    rf'(?:should|must|needs? to|has to)\s+(?:have|include|support|provide)\s+{CLAUSE}',
    rf'(?:supports?|includes?|provides?)\s+{CLAUSE}',
)

ACTION_VERB_PATTERN = rf'(?:click|tap|press|select|choose|input|enter|submit)\s+{CLAUSE}'

BEHAVIOR_PATTERNS = _compile(
    r'(?:when|if|upon)\s+([^.!?]+?)\s+(?:then|should|will|must)\s+([^.!?]+)',
    rf'(?:system|application|app)\s+(?:should|will|must)\s+{CLAUSE}',
)

DEFAULT_ACTORS = (
    'user', 'customer', 'driver', 'admin', 'administrator', 'visitor',
    'member', 'client', 'buyer', 'seller', 'owner', 'manager',
    'employee', 'staff', 'student', 'patient', 'guest', 'player',
)

HIGH_PRIORITY_KEYWORDS = ('must', 'critical', 'essential', 'required', 'important')
LOW_PRIORITY_KEYWORDS = ('nice to have', 'optional', 'future', 'later')

# Technical constraints
PLATFORMS = ('web', 'mobile', 'desktop', 'ios', 'android', 'windows', 'macos', 'linux', 'cloud')

TECHNOLOGIES = (
    'react', 'vue', 'angular', 'node', 'python', 'java', 'javascript', 'typescript',
    'mongodb', 'mysql', 'postgresql', 'redis', 'docker', 'kubernetes', 'aws', 'azure',
    'django', 'graphql',
)

# Later matches overwrite earlier ones
PERFORMANCE_PATTERNS = _compile(
    rf'(?:performance|speed|fast|quick|responsive|load time)\s*:?\s*{CLAUSE}',
    rf'(?:should|must)\s+(?:be|run|load)\s+(?:fast|quick|within|under)\s+{CLAUSE}',
)

LIMITATION_PATTERNS = _compile(
    rf"(?:cannot|can't|must not|should not|limitation|constraint|restriction)\s+{CLAUSE}",
    rf'(?:not\s+)?(?:support|supports?|allow|allows?)\s+{CLAUSE}',
)

# Deliverables
OUTPUT_KEYWORDS = (
    ('code', ('code', 'source code', 'implementation', 'program')),
    ('design', ('design', 'ui', 'ux', 'mockup', 'wireframe', 'prototype')),
    ('documentation', ('documentation', 'docs', 'readme', 'guide', 'manual')),
    ('prototype', ('prototype', 'demo', 'mvp', 'proof of concept')),
)

MILESTONE_PATTERNS = _compile(
    rf'(?:milestone|phase|stage|step)\s+(?:1|2|3|one|two|three|first|second|third)\s*:?\s*{CLAUSE}',
    rf'(?:first|second|third|next)\s+(?:step|phase|milestone)\s*:?\s*{CLAUSE}',
)

# Visual elements (substring checks on lowercased OCR text, first category wins)
STYLE_KEYWORDS = (
    ('minimalist', ('minimal', 'simple')),
    ('modern', ('modern', 'contemporary')),
    ('classic', ('classic', 'traditional')),
)

LAYOUT_KEYWORDS = (
    ('grid', ('grid', 'column')),
    ('sidebar', ('sidebar', 'navigation')),
)


def build_interaction_patterns(actors: Iterable[str]) -> Tuple[Pattern, ...]:
    """
    Build the user-interaction pattern family for an actor vocabulary.

    The first pattern matches "<actor>(s) can/should/will/must <clause>",
    where the actor may end a longer word ("superusers can ..." counts),
    the second a leading action verb followed by a clause.
    """
    alternation = '|'.join(re.escape(a) for a in actors)
    return _compile(
        rf'(?:{alternation})s?\s+(?:can|should|will|must)\s+{CLAUSE}',
        ACTION_VERB_PATTERN,
    )


@dataclass(frozen=True)
class PatternTables:
    """Complete, immutable configuration of every extractor."""
    purpose_patterns: Tuple[Pattern, ...] = PURPOSE_PATTERNS
    audience_patterns: Tuple[Pattern, ...] = AUDIENCE_PATTERNS
    feature_patterns: Tuple[Pattern, ...] = FEATURE_PATTERNS
    actors: Tuple[str, ...] = DEFAULT_ACTORS
    interaction_patterns: Tuple[Pattern, ...] = build_interaction_patterns(DEFAULT_ACTORS)
    behavior_patterns: Tuple[Pattern, ...] = BEHAVIOR_PATTERNS
    high_priority_keywords: Tuple[str, ...] = HIGH_PRIORITY_KEYWORDS
    low_priority_keywords: Tuple[str, ...] = LOW_PRIORITY_KEYWORDS
    platforms: Tuple[str, ...] = PLATFORMS
    technologies: Tuple[str, ...] = TECHNOLOGIES
    performance_patterns: Tuple[Pattern, ...] = PERFORMANCE_PATTERNS
    limitation_patterns: Tuple[Pattern, ...] = LIMITATION_PATTERNS
    output_keywords: Tuple[Tuple[str, Tuple[str, ...]], ...] = OUTPUT_KEYWORDS
    milestone_patterns: Tuple[Pattern, ...] = MILESTONE_PATTERNS
    style_keywords: Tuple[Tuple[str, Tuple[str, ...]], ...] = STYLE_KEYWORDS
    layout_keywords: Tuple[Tuple[str, Tuple[str, ...]], ...] = LAYOUT_KEYWORDS

    def with_overrides(
        self,
        extra_technologies: Optional[Iterable[str]] = None,
        actors: Optional[Iterable[str]] = None,
    ) -> 'PatternTables':
        """
        Return a copy with an extended technology vocabulary and/or a
        different actor vocabulary.

        Extra technologies are appended after the built-in ones (skipping
        entries already present) so vocabulary iteration order is stable.
        """
        tables = self
        if extra_technologies:
            known = {t.lower() for t in tables.technologies}
            added = []
            for tech in extra_technologies:
                tech = tech.strip().lower()
                if tech and tech not in known:
                    known.add(tech)
                    added.append(tech)
            tables = replace(tables, technologies=tables.technologies + tuple(added))
        if actors:
            actor_tuple = tuple(a.strip().lower() for a in actors if a.strip())
            if actor_tuple:
                tables = replace(
                    tables,
                    actors=actor_tuple,
                    interaction_patterns=build_interaction_patterns(actor_tuple),
                )
        return tables


DEFAULT_TABLES = PatternTables()
