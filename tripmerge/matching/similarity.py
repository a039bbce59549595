"""
String similarity for fuzzy field matching.

Similarity is the share of the longer string left untouched by the
Levenshtein edit distance, expressed as a percentage.
"""

from typing import Any
from rapidfuzz.distance import Levenshtein


def get_edit_distance(s1: str, s2: str) -> int:
    """
    Levenshtein distance between two strings.

    Substitution, insertion and deletion each cost 1.
    """
    return Levenshtein.distance(s1, s2, weights=(1, 1, 1))


def calculate_string_similarity(str1: Any, str2: Any) -> float:
    """
    Calculate similarity between two strings as a percentage.

    Comparison is case-insensitive and ignores leading/trailing whitespace.

    Args:
        str1: First string (None or empty scores 0)
        str2: Second string (None or empty scores 0)

    Returns:
        Similarity score 0-100
    """
    if not str1 or not str2:
        # Two empty strings are identical
        if str1 == '' and str2 == '':
            return 100.0
        return 0.0

    s1 = str(str1).lower().strip()
    s2 = str(str2).lower().strip()

    if s1 == s2:
        return 100.0

    longer, shorter = (s1, s2) if len(s1) > len(s2) else (s2, s1)
    if len(longer) == 0:
        return 100.0

    edit_distance = get_edit_distance(longer, shorter)
    return ((len(longer) - edit_distance) / len(longer)) * 100
