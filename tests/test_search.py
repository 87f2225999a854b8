import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest
from collections import Counter
from itertools import islice

from index import build_index, signature
from search import AnagramEngine, query


def solutions(words, letters, **kwargs):
    return list(query(build_index(words), letters, **kwargs))


def test_single_word_group():
    result = solutions(['eat', 'tea', 'ate', 'tan'], 'eat', max_word_count=1)
    assert result == [(['eat', 'tea', 'ate'],)]


def test_leftover_letters_without_a_word():
    assert solutions(['a', 'tan'], 'tan', max_word_count=2) == [(['tan'],)]


def test_min_signature_length_excludes_short_words():
    assert solutions(['a', 'tan'], 'tan', min_signature_length=2) == [(['tan'],)]
    assert solutions(['a', 'at', 'n'], 'tan', min_signature_length=2) == []


def test_two_word_solution():
    result = solutions(['a', 'nt', 'tan'], 'tan')
    assert result == [(['a'], ['nt']), (['tan'],)]


def test_max_word_count_caps_solutions():
    words = ['a', 'n', 't', 'an', 'tan']
    assert Counter(len(s) for s in solutions(words, 'tan')) == {1: 1, 2: 1, 3: 1}
    assert all(len(s) <= 2 for s in solutions(words, 'tan', max_word_count=2))
    assert solutions(words, 'tan', max_word_count=1) == [(['tan'],)]


def test_repeated_letters_are_not_reported_twice():
    result = solutions(['a', 'aa'], 'aa')
    assert sorted(result) == sorted([(['a'], ['a']), (['aa'],)])
    assert len(solutions(['a'], 'aaaa')) == 1


def test_permutations_reported_once():
    result = solutions(['ab', 'cd', 'c', 'd'], 'abcd')
    assert sorted(result) == sorted([(['ab'], ['c'], ['d']), (['ab'], ['cd'])])


def test_groups_in_non_decreasing_signature_order():
    for sol in solutions(['no', 'on', 'a', 'at', 'ta', 'tan', 'n', 't'], 'tanon'):
        sigs = [sorted(g[0]) for g in sol]
        assert sigs == sorted(sigs)


def test_letter_that_starts_no_signature():
    # no signature starts with "b" or "c", but both are still reachable
    assert solutions(['ab'], 'ab') == [(['ab'],)]
    assert solutions(['ab', 'c'], 'abc') == [(['ab'], ['c'])]
    assert solutions(['ac', 'b'], 'abc') == [(['ac'], ['b'])]
    assert solutions(['ac'], 'abc') == []


def test_letter_absent_from_index():
    assert solutions(['eat', 'tea'], 'eatz') == []
    assert solutions(['eat', 'tea'], 'zeat') == []


def test_empty_query_and_empty_index():
    assert solutions(['a', 'b'], '') == []
    assert solutions([], 'abc') == []


def test_whitespace_is_a_key():
    # the engine does no normalization of its own
    assert solutions(['ab'], 'a b') == []


def test_generator_is_lazy_and_restartable():
    engine = AnagramEngine(build_index(['a', 'b', 'ab']))
    first = list(islice(engine.anagram('ab'), 1))
    assert len(first) == 1
    assert list(engine.anagram('ab')) == list(engine.anagram('ab'))
    assert first[0] == list(engine.anagram('ab'))[0]


def test_invalid_configuration():
    index = build_index(['a'])
    with pytest.raises(ValueError):
        AnagramEngine(index, min_signature_length=0)
    with pytest.raises(ValueError):
        AnagramEngine(index, max_word_count=0)


def test_rebuilt_index_gives_identical_results():
    words = ['stop', 'pots', 'tops', 'post', 'so', 'pt', 'o', 's', 't', 'p', 'top', 'spot']
    a = solutions(words, 'stopstop', max_word_count=3)
    b = solutions(list(words), 'stopstop', max_word_count=3)
    assert a == b and a


def test_long_query_stays_off_the_call_stack():
    # one word per letter, deeper than the default recursion limit
    result = solutions(['a'], 'a' * 1100)
    assert len(result) == 1
    assert len(result[0]) == 1100


def test_many_words_per_solution():
    # k single "a" words followed by m "aa" words, k + 2m == 20
    assert len(solutions(['a', 'aa'], 'a' * 20)) == 11
    capped = solutions(['a', 'aa'], 'a' * 20, max_word_count=12)
    assert sorted(len(s) for s in capped) == [10, 11, 12]


def test_groups_are_the_index_lists():
    index = build_index(['eat', 'tea'])
    (group,), = list(query(index, 'tea'))
    assert group is index.get_or_create_descendant(signature('eat')).value
