from hypothesis import given
from hypothesis import strategies as st

from cpnotebook.aho_corasick import AhoCorasick

binary = st.text(alphabet="01", min_size=1, max_size=6)


def occurrences(text, pattern):
    return sum(1 for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i))


@given(st.lists(binary, max_size=8), st.text(alphabet="01", max_size=40))
def test_binary_counts_match_naive(patterns, text):
    aho = AhoCorasick()
    for p in patterns:
        aho.add(p)
    aho.build()
    assert aho.count_matches(text) == sum(occurrences(text, p) for p in patterns)


def test_classic_example():
    aho = AhoCorasick()
    for p in ["he", "she", "his", "hers"]:
        aho.add(p)
    assert aho.count_matches("ushers") == 3


def test_add_after_build_and_rebuild():
    aho = AhoCorasick()
    aho.add("ab")
    aho.build()
    assert aho.count_matches("abab") == 2
    aho.add("b")
    aho.build()
    aho.build()
    assert aho.count_matches("abab") == 4


def test_reset_clears_patterns():
    aho = AhoCorasick()
    aho.add("a")
    aho.reset()
    assert aho.patterns == ()
    assert aho.count_matches("aaa") == 0


def test_patterns_recorded_in_order():
    aho = AhoCorasick()
    aho.add("10")
    aho.add("01")
    assert aho.patterns == ("10", "01")