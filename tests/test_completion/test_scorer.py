import pytest

from slashkit.completion.scorer import fuzzy_score, score_candidate


def test_empty_query_matches_everything():
    assert score_candidate("", "model") == 0
    assert score_candidate("", "") == 0


def test_prefix_match():
    assert score_candidate("mod", "model") == pytest.approx(10.02)


def test_prefix_match_is_case_insensitive():
    assert score_candidate("MOD", "Model") == score_candidate("mod", "model")


def test_shorter_prefix_candidate_wins():
    assert score_candidate("the", "theme") < score_candidate("the", "themes")


def test_substring_match():
    assert score_candidate("del", "model") == 32


def test_fuzzy_match():
    assert score_candidate("mdl", "model") == 52


def test_no_match_is_none():
    assert score_candidate("xyz", "model") is None
    assert score_candidate("lm", "model") is None


def test_fuzzy_score_gaps():
    assert fuzzy_score("", "abc") == 0
    assert fuzzy_score("ac", "abc") == 1
    assert fuzzy_score("bc", "abc") == 1
    assert fuzzy_score("abc", "abc") == 0
    assert fuzzy_score("ca", "abc") is None


def test_tiers_order_short_matches():
    prefix = score_candidate("cl", "claude")
    substring = score_candidate("cl", "uncle")
    fuzzy = score_candidate("cl", "cool")
    missing = score_candidate("cl", "gpt-4o")

    assert prefix is not None and substring is not None and fuzzy is not None
    assert prefix < substring < fuzzy
    assert missing is None


def test_late_matches_cross_tier_offsets():
    assert score_candidate("x", "a" * 25 + "x") == 55
    assert score_candidate("ab", "axb") == 51
    assert score_candidate("x", "a" * 25 + "x") > score_candidate("ab", "axb")

