import pytest

from seokeywords.ngrams import FrequencyEntry, NGramEngine, build_frequencies, ngram_counts


def test_unigram_ranking_by_count():
    ranked = build_frequencies(["a", "b", "a", "c", "b", "a"], 1)
    assert ranked == [("a", 3), ("b", 2), ("c", 1)]
    assert isinstance(ranked[0], FrequencyEntry)
    assert ranked[0].key == "a" and ranked[0].count == 3


def test_ties_keep_first_seen_order():
    ranked = build_frequencies(["zeta", "alpha", "mid", "alpha", "zeta", "omega"], 1)
    assert [e.key for e in ranked] == ["zeta", "alpha", "mid", "omega"]


def test_bigram_window_step_one():
    tokens = ["seo", "tool", "seo", "tool", "guide"]
    assert ngram_counts(tokens, 2) == {"seo tool": 2, "tool seo": 1, "tool guide": 1}
    assert build_frequencies(tokens, 2) == [("seo tool", 2), ("tool seo", 1), ("tool guide", 1)]


def test_trigram_keys_join_three_tokens():
    tokens = ["one", "two", "three", "four"]
    assert [e.key for e in build_frequencies(tokens, 3)] == ["one two three", "two three four"]


@pytest.mark.parametrize("n", [1, 2, 3])
def test_table_never_has_more_keys_than_windows(n):
    tokens = ["w%d" % (i % 7) for i in range(40)]
    assert len(ngram_counts(tokens, n)) <= len(tokens) - n + 1


@pytest.mark.parametrize("n,tokens", [(1, []), (2, ["solo"]), (3, ["only", "two"])])
def test_short_sequences_give_empty_tables(n, tokens):
    assert build_frequencies(tokens, n) == []


def test_invalid_window_size():
    with pytest.raises(ValueError):
        ngram_counts(["abc"], 0)


def test_engine_truncates_to_limits():
    tokens = ["tok%d" % i for i in range(50)]
    engine = NGramEngine(noise_phrases=())
    assert len(engine.unigrams(tokens)) == 20
    assert len(engine.bigrams(tokens)) == 10
    assert len(engine.trigrams(tokens)) == 10
    assert engine.unigrams(tokens)[0] == ("tok0", 1)


def test_noise_filter_runs_after_truncation():
    tokens = ["junk", "alpha", "stop"] * 3 + ["w%d" % i for i in range(20)]
    engine = NGramEngine(noise_phrases=("junk",))
    keys = [e.key for e in engine.bigrams(tokens)]
    assert keys == ["alpha stop", "stop w0", "w0 w1", "w1 w2", "w2 w3", "w3 w4", "w4 w5", "w5 w6"]
    assert "w6 w7" not in keys


def test_noise_filter_skips_unigrams():
    engine = NGramEngine(noise_phrases=("junk",))
    assert engine.unigrams(["junk", "junk", "page"]) == [("junk", 2), ("page", 1)]


def test_noise_substring_match_inside_key():
    tokens = ["accountdontmiss", "offer", "real", "content"]
    engine = NGramEngine()
    assert [e.key for e in engine.bigrams(tokens)] == ["offer real", "real content"]
    assert [e.key for e in engine.trigrams(tokens)] == ["offer real content"]


def test_custom_limits():
    engine = NGramEngine(noise_phrases=(), unigram_limit=2, ngram_limit=1)
    tokens = ["aaa", "bbb", "aaa", "ccc", "bbb", "aaa"]
    assert engine.unigrams(tokens) == [("aaa", 3), ("bbb", 2)]
    assert engine.bigrams(tokens) == [("bbb aaa", 2)]
