# tests/test_ranker.py
from persian_word_guesser.core.ranker import rank_candidates, ranked_pairs


def test_highest_rank_first():
    out = rank_candidates({"ب": 0, "با": 5, "بد": 2})
    assert out == ["با", "بد", "ب"]


def test_truncates_to_limit():
    cands = {"ب" + chr(0x0627 + i): i for i in range(10)}
    assert len(rank_candidates(cands, limit=4)) == 4
    assert rank_candidates(cands, limit=0) == []


def test_default_limit_is_thirty():
    cands = {f"w{i}": i for i in range(50)}
    out = ranked_pairs(cands)
    assert len(out) == 30
    assert out[0] == ("w49", 49)


def test_equal_ranks_are_ordered_by_word():
    assert rank_candidates({"بد": 1, "با": 1}) == ["با", "بد"]
