import itertools

import pytest

from cfsolve.words import (
    abbreviate,
    anton_or_danik,
    bit_plus_plus,
    boy_or_girl,
    can_have_good_pairs,
    can_reduce_to,
    capitalize_word,
    compare_ignoring_case,
    difficult_order,
    fix_case,
    is_dangerous,
    is_lucky,
    is_reverse,
    is_yes,
    read_column,
    rearrange_summands,
    say_hello,
    skibidus_plural,
    sort_letters,
    swap_first_letters,
    zeroes_to_erase,
)


@pytest.mark.parametrize(
    ("games", "winner"),
    [("AAD", "Anton"), ("ADD", "Danik"), ("ADAD", "Anton"), ("DDDDA", "Danik")],
)
def test_anton_or_danik(games, winner):
    assert anton_or_danik(games) == winner


@pytest.mark.parametrize(("plus", "minus"), [(0, 0), (3, 1), (1, 4), (5, 5)])
def test_bit_plus_plus_counts(plus, minus):
    statements = ["X++", "++X"] * plus + ["X--", "--X"] * minus
    assert bit_plus_plus(statements) == 2 * plus - 2 * minus


def test_bit_plus_plus_empty():
    assert bit_plus_plus([]) == 0


def test_boy_or_girl_even_and_odd():
    assert boy_or_girl("ab") == "CHAT WITH HER!"
    assert boy_or_girl("abc") == "IGNORE HIM!"


def test_boy_or_girl_ignores_repeats():
    assert boy_or_girl("abab") == boy_or_girl("ab")


@pytest.mark.parametrize(("prefix", "suffix"), [("", ""), ("xx", "yy"), ("h", "o")])
def test_say_hello_found(prefix, suffix):
    assert say_hello(prefix + "hello" + suffix) is True


def test_say_hello_spread_out():
    assert say_hello("-".join("hello")) is True


def test_say_hello_missing():
    assert say_hello("hell") is False
    assert say_hello("olleh") is False


def test_swap_first_letters_round_trip():
    a, b = "bit", "set"
    once = swap_first_letters(a, b)
    assert once[0][0] == b[0] and once[1][0] == a[0]
    assert once[0][1:] == a[1:] and once[1][1:] == b[1:]
    assert swap_first_letters(*once) == (a, b)


def test_swap_first_letters_empty_raises():
    with pytest.raises(ValueError):
        swap_first_letters("", "abc")


def test_can_reduce_to_even_positions():
    assert can_reduce_to("zab", "z") is True
    assert can_reduce_to("abz", "z") is True
    assert can_reduce_to("az", "z") is False
    assert can_reduce_to("abc", "q") is False


@pytest.mark.parametrize("s", ["NFT", "ABCTFN", "ZZTNNFA", "AAA", ""])
def test_difficult_order_is_permutation_with_tfn_first(s):
    result = difficult_order(s)
    assert sorted(result) == sorted(s)
    leading_length = sum(s.count(ch) for ch in "TFN")
    leading = result[:leading_length]
    assert leading == "T" * s.count("T") + "F" * s.count("F") + "N" * s.count("N")
    assert list(result[leading_length:]) == sorted(result[leading_length:])


def test_difficult_order_rejects_lowercase():
    with pytest.raises(ValueError):
        difficult_order("Tf")


@pytest.mark.parametrize("s", ["cba", "zzaab", "a", ""])
def test_sort_letters(s):
    result = sort_letters(s)
    assert sorted(result) == sorted(s)
    assert list(result) == sorted(result)


@pytest.mark.parametrize("k", [0, 1, 4])
def test_zeroes_to_erase_between_ones(k):
    assert zeroes_to_erase("00" + "1" + "0" * k + "1" + "000") == k


def test_zeroes_to_erase_without_ones():
    assert zeroes_to_erase("0000") == 0
    assert zeroes_to_erase("") == 0


def test_is_dangerous():
    assert is_dangerous("0" * 7) is True
    assert is_dangerous("01" + "1" * 7) is True
    assert is_dangerous("0" * 6 + "1" * 6) is False
    assert is_dangerous("") is False


def test_rearrange_summands_sorted():
    result = rearrange_summands("3+1+2+1")
    parts = result.split("+")
    assert parts == sorted(parts)
    assert sorted(parts) == sorted("3121")


def test_rearrange_summands_single():
    assert rearrange_summands("2") == "2"


def test_is_lucky():
    assert is_lucky("123321") is True
    assert is_lucky("000000") is True
    assert is_lucky("100000") is False


@pytest.mark.parametrize("ticket", ["12345", "12a456", "1234567"])
def test_is_lucky_rejects_bad_tickets(ticket):
    with pytest.raises(ValueError):
        is_lucky(ticket)


def test_compare_ignoring_case_equal():
    assert compare_ignoring_case("aaaa", "aaaA") == 0
    assert compare_ignoring_case("Word", "wORD") == 0


@pytest.mark.parametrize(("a", "b"), [("abs", "Abz"), ("abcdefg", "AbCdEfF")])
def test_compare_ignoring_case_antisymmetric(a, b):
    forward = compare_ignoring_case(a, b)
    assert forward in (-1, 1)
    assert compare_ignoring_case(b, a) == -forward


def test_compare_ignoring_case_order():
    assert compare_ignoring_case("abs", "Abz") == -1


@pytest.mark.parametrize(("word", "plural"), [("us", "i"), ("sus", "si"), ("amogus", "amogi")])
def test_skibidus_plural(word, plural):
    assert skibidus_plural(word) == plural


def test_skibidus_plural_other_words_unchanged():
    assert skibidus_plural("usa") == "usa"


def test_is_reverse():
    s = "code"
    assert is_reverse(s, s[::-1]) is True
    assert is_reverse(s, s) is False


def test_abbreviate_long_word():
    assert abbreviate("localization") == "l10n"


@pytest.mark.parametrize("word", ["word", "a" * 10])
def test_abbreviate_short_word_unchanged(word):
    assert abbreviate(word) == word


@pytest.mark.parametrize("word", ["HoUse", "ViP", "maTRIx", "AbCd"])
def test_fix_case_chooses_majority(word):
    result = fix_case(word)
    uppers = sum(ch.isupper() for ch in word)
    if uppers > len(word) - uppers:
        assert result == word.upper()
    else:
        assert result == word.lower()


def test_capitalize_word():
    assert capitalize_word("ApPLe") == "ApPLe"
    assert capitalize_word("konjac") == "Konjac"
    assert capitalize_word("") == ""


@pytest.mark.parametrize(
    "word", ["".join(p) for p in itertools.product("yY", "eE", "sS")]
)
def test_is_yes_every_case(word):
    assert is_yes(word) is True


@pytest.mark.parametrize("word", ["yas", "ye", "no", "sey"])
def test_is_yes_rejects(word):
    assert is_yes(word) is False


def test_can_have_good_pairs_all_zeros():
    n = 6
    s = "0" * n
    assert can_have_good_pairs(n, n // 2, s) is True
    assert can_have_good_pairs(n, 0, s) is False


def test_can_have_good_pairs_balanced():
    s = "0011"
    assert can_have_good_pairs(len(s), 0, s) is True
    assert can_have_good_pairs(len(s), 2, s) is True
    assert can_have_good_pairs(len(s), 1, s) is False


def test_read_column():
    word = "sea"
    rows = ["." * 8 for _ in range(8)]
    for index, letter in enumerate(word):
        row = list(rows[index + 2])
        row[4] = letter
        rows[index + 2] = "".join(row)
    assert read_column(rows) == word


def test_read_column_empty_grid():
    assert read_column(["........"] * 8) == ""