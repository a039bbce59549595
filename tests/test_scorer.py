"""Tests for weighted field scoring."""

import pytest
from tripmerge.matching.scorer import (
    DUPLICATE_THRESHOLD,
    DuplicateScorer,
    FieldKind,
    FieldRule,
    MatchResult,
    calculate_exact_similarity,
    calculate_weighted_similarity,
    combine_weighted_scores,
)
from tripmerge.matching.profiles import PROFILES


class TestWeightedSimilarity:
    """Tests for the per-field contribution rule."""

    def test_both_missing_is_full_match(self):
        assert calculate_weighted_similarity(None, None, 0.5) == pytest.approx(50)
        assert calculate_weighted_similarity('', None, 0.5) == pytest.approx(50)

    def test_one_missing_is_no_match(self):
        assert calculate_weighted_similarity('Paris', None, 0.5) == 0
        assert calculate_weighted_similarity(None, 'Paris', 0.5) == 0

    def test_strings_use_fuzzy_similarity(self):
        assert calculate_weighted_similarity('abc', 'abc', 0.3) == pytest.approx(30)
        assert calculate_weighted_similarity('abcd', 'abce', 1) == pytest.approx(75)

    def test_non_strings_use_exact_match(self):
        assert calculate_weighted_similarity(5, 5, 0.2) == pytest.approx(20)
        assert calculate_weighted_similarity(5, '5', 1) == pytest.approx(100)
        assert calculate_weighted_similarity(5, 6, 1) == 0
        assert calculate_weighted_similarity(True, 'true', 1) == pytest.approx(100)

    def test_exact_similarity(self):
        assert calculate_exact_similarity('UA100', 'ua100 ', 0.3) == pytest.approx(30)
        assert calculate_exact_similarity('UA100', 'UA101', 0.3) == 0
        assert calculate_exact_similarity(None, None, 0.3) == pytest.approx(30)
        assert calculate_exact_similarity('UA100', None, 0.3) == 0


class TestCombineWeightedScores:
    """Tests for score normalization."""

    def test_normalizes_by_total_weight(self):
        assert combine_weighted_scores([50, 25], [0.5, 0.5]) == pytest.approx(75)

    def test_tolerates_weights_not_summing_to_one(self):
        assert combine_weighted_scores([45, 45], [0.45, 0.45]) == pytest.approx(100)

    def test_zero_weight(self):
        assert combine_weighted_scores([], []) == 0.0


class TestDuplicateScorer:
    """Tests for DuplicateScorer."""

    RULES = [
        FieldRule('name', FieldKind.STRING, 0.5),
        FieldRule('code', FieldKind.EXACT, 0.25),
        FieldRule('date', FieldKind.DATE, 0.25),
    ]

    def test_identical_records(self):
        record = {'name': 'Paris', 'code': 'X1', 'date': '2025-12-15T10:00:00Z'}
        result = DuplicateScorer().calculate_match_score(record, dict(record), self.RULES)

        assert result.overall_score == pytest.approx(100)
        assert result.is_duplicate
        assert set(result.field_scores) == {'name', 'code', 'date'}

    def test_missing_dates_never_match(self):
        """Absent dates on both sides contribute nothing."""
        record = {'name': 'Paris', 'code': 'X1'}
        result = DuplicateScorer().calculate_match_score(record, dict(record), self.RULES)

        assert result.field_scores['date'] == 0
        assert result.overall_score == pytest.approx(75)
        assert not result.is_duplicate

    def test_timezone_field_read_from_existing(self):
        rules = [FieldRule('start', FieldKind.DATE_TIMEZONE, 1.0, timezone_field='tz')]
        imported = {'start': '2025-07-05T03:00:00Z', 'tz': 'UTC'}
        existing = {'start': '2025-07-04T20:00:00Z', 'tz': 'America/New_York'}

        result = DuplicateScorer().calculate_match_score(imported, existing, rules)
        assert result.overall_score == pytest.approx(100)

        existing_utc = {'start': '2025-07-04T20:00:00Z'}
        result = DuplicateScorer().calculate_match_score(imported, existing_utc, rules)
        assert result.overall_score == 0

    def test_match_result_str(self):
        result = MatchResult(field_scores={'name': 50.0}, overall_score=50.0)
        assert 'Match Score: 50.0%' in str(result)
        assert 'name' in str(result)

    def test_threshold_boundary(self):
        assert MatchResult(overall_score=DUPLICATE_THRESHOLD).is_duplicate
        assert not MatchResult(overall_score=DUPLICATE_THRESHOLD - 0.01).is_duplicate


class TestProfiles:
    """Tests for the per-entity weight tables."""

    def test_eight_entity_kinds(self):
        assert len(PROFILES) == 8

    @pytest.mark.parametrize('kind', list(PROFILES))
    def test_weights_sum_to_one(self, kind):
        assert sum(PROFILES[kind].weights.values()) == pytest.approx(1.0)

    def test_event_end_date_not_scored(self):
        from tripmerge.core.record import EntityKind
        assert 'endDateTime' not in PROFILES[EntityKind.EVENT].weights
