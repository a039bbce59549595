"""
Weighted field scoring for duplicate detection.

Each entity kind declares which fields matter and how much. Every field
contributes its similarity (0-100) multiplied by its weight, and the sum
is normalized by the total weight into an overall score.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .dates import compare_dates, compare_dates_by_timezone
from .similarity import calculate_string_similarity

# Overall similarity at or above which two records are duplicates
DUPLICATE_THRESHOLD = 90


class FieldKind(Enum):
    """How a field's two values are compared."""
    STRING = "string"
    EXACT = "exact"
    DATE = "date"
    DATE_TIMEZONE = "date_timezone"


@dataclass(frozen=True)
class FieldRule:
    """One compared field of an entity and its weight."""
    name: str
    kind: FieldKind
    weight: float
    # Field of the existing record holding the IANA zone (DATE_TIMEZONE only)
    timezone_field: Optional[str] = None


@dataclass
class MatchResult:
    """Results of scoring one imported record against one existing record."""

    # Weighted contribution per field (0-100 * weight)
    field_scores: Dict[str, float] = field(default_factory=dict)

    total_weight: float = 0.0

    # Overall similarity (0-100)
    overall_score: float = 0.0

    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_duplicate(self) -> bool:
        return self.overall_score >= DUPLICATE_THRESHOLD

    def __str__(self) -> str:
        lines = [f"Match Score: {self.overall_score:.1f}%"]
        for name, score in self.field_scores.items():
            lines.append(f"  {name}: {score:.2f}")
        return "\n".join(lines)


def calculate_weighted_similarity(field1: Any, field2: Any, weight: float = 1) -> float:
    """
    Weighted similarity of two raw field values.

    Two missing values count as a full match, one missing value as no
    match. Strings are compared fuzzily, anything else must be equal
    ignoring case.

    Returns:
        Contribution between 0 and 100 * weight
    """
    if not field1 and not field2:
        return 100 * weight
    if not field1 or not field2:
        return 0

    if isinstance(field1, str) and isinstance(field2, str):
        return calculate_string_similarity(field1, field2) * weight

    return (100 if str(field1).lower() == str(field2).lower() else 0) * weight


def calculate_exact_similarity(field1: Any, field2: Any, weight: float = 1) -> float:
    """Weighted all-or-nothing comparison, ignoring case and surrounding whitespace."""
    if not field1 and not field2:
        return 100 * weight
    if not field1 or not field2:
        return 0
    same = str(field1).strip().lower() == str(field2).strip().lower()
    return (100 if same else 0) * weight


def combine_weighted_scores(scores: Sequence[float], weights: Sequence[float]) -> float:
    """
    Normalize weighted contributions into an overall 0-100 score.

    Dividing by the total weight tolerates tables whose weights drift
    from summing to exactly 1.0.
    """
    total_weight = sum(weights)
    if total_weight <= 0:
        return 0.0
    return sum(scores) / total_weight


class DuplicateScorer:
    """
    Scores record pairs against a list of field rules.

    The scorer holds no state between calls, so one instance can be shared
    freely.
    """

    def score_field(
        self,
        rule: FieldRule,
        imported: Mapping[str, Any],
        existing: Mapping[str, Any],
    ) -> float:
        """Weighted contribution of one field."""
        value1 = imported.get(rule.name)
        value2 = existing.get(rule.name)

        if rule.kind is FieldKind.DATE:
            return (100 if compare_dates(value1, value2) else 0) * rule.weight

        if rule.kind is FieldKind.DATE_TIMEZONE:
            timezone = existing.get(rule.timezone_field or 'timezone') or 'UTC'
            matched = compare_dates_by_timezone(value1, value2, timezone)
            return (100 if matched else 0) * rule.weight

        if rule.kind is FieldKind.EXACT:
            return calculate_exact_similarity(value1, value2, rule.weight)

        return calculate_weighted_similarity(value1, value2, rule.weight)

    def calculate_match_score(
        self,
        imported: Mapping[str, Any],
        existing: Mapping[str, Any],
        rules: List[FieldRule],
    ) -> MatchResult:
        """
        Calculate the overall match score between two record snapshots.

        Args:
            imported: Snapshot of the imported record
            existing: Snapshot of the existing record
            rules: Field rules of the entity kind

        Returns:
            MatchResult with per-field contributions and overall score
        """
        result = MatchResult()

        for rule in rules:
            result.field_scores[rule.name] = self.score_field(rule, imported, existing)

        weights = [rule.weight for rule in rules]
        result.total_weight = sum(weights)
        result.overall_score = combine_weighted_scores(
            list(result.field_scores.values()), weights
        )
        return result
