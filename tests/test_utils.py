"""Tests for utility functions in models/utils.py"""

import pytest
from models.utils import find_similar_strings, percent_to_position, position_to_percent, similarity_score


class TestPositionConversion:
    """Tests for raw position <-> percentage conversion."""

    def test_extremes(self):
        assert position_to_percent(0) == 0
        assert position_to_percent(65535) == 100
        assert percent_to_position(0) == 0
        assert percent_to_position(100) == 65535

    def test_midpoint(self):
        assert percent_to_position(50) == 32768
        assert position_to_percent(32768) == 50

    def test_round_trip_of_whole_percentages(self):
        assert all(position_to_percent(percent_to_position(p)) == p for p in range(101))

    @pytest.mark.parametrize('percent', [-1, 101])
    def test_percent_out_of_range(self, percent):
        with pytest.raises(ValueError):
            percent_to_position(percent)


class TestSimilarityScore:
    """Tests for similarity_score function."""

    def test_exact_match_ignores_case(self):
        assert similarity_score('Kitchen', 'kitchen') == 100

    def test_prefix_match(self):
        assert similarity_score('Kit', 'Kitchen') == 80

    def test_contains_match(self):
        assert similarity_score('room', 'Living Room') == 60

    def test_no_match(self):
        assert similarity_score('xyz', 'Bedtime') == 0


class TestFindSimilarStrings:
    """Tests for find_similar_strings function."""

    def test_empty_candidates(self):
        """Empty candidates should return empty list."""
        assert find_similar_strings('Kitchen', []) == []

    def test_exact_match(self):
        """Exact match should score 100 and be first."""
        candidates = ['Bedroom', 'Kitchen', 'Study']
        assert find_similar_strings('kitchen', candidates)[0] == 'Kitchen'

    def test_prefix_match(self):
        """Prefix match should outrank contains match."""
        candidates = ['Master Bedroom', 'Master', 'Guest Master']
        result = find_similar_strings('Master', candidates, limit=3)
        assert 'Master' in result[:2]
        assert 'Master Bedroom' in result[:2]

    def test_limit_parameter(self):
        """Limit parameter should restrict results."""
        candidates = ['Shade 1', 'Shade 2', 'Shade 3', 'Shade 4', 'Shade 5']
        assert len(find_similar_strings('Shade', candidates, limit=3)) == 3

    def test_case_insensitive(self):
        """Matching should be case insensitive."""
        candidates = ['Office', 'OFFICE', 'office']
        assert len(find_similar_strings('office', candidates)) == 3
