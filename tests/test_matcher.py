from clipmade.matcher import han_readings, matches


class TestLiteral:
    def test_empty_query_never_matches(self):
        assert not matches("", "anything")
        assert not matches("", "")

    def test_substring(self):
        assert matches("ell", "Hello")

    def test_case_insensitive(self):
        assert matches("HELLO", "hello world")
        assert matches("hello", "HELLO")

    def test_no_match(self):
        assert not matches("xyz", "Hello")

    def test_literal_han(self):
        assert matches("北", "北京")

    def test_literal_only_when_phonetic_disabled(self):
        assert not matches("bj", "Beijing", phonetic=False)
        assert matches("jing", "Beijing", phonetic=False)


class TestPinyinLatin:
    def test_initials_of_romanized_syllables(self):
        assert matches("bj", "Beijing")

    def test_initials_do_not_match_other_words(self):
        assert not matches("bj", "Shanghai")

    def test_mixed_full_and_initial(self):
        assert matches("beij", "Beijing")
        assert matches("bjing", "Beijing")

    def test_initials_of_shanghai(self):
        assert matches("sh", "Shanghai")
        assert not matches("bjsh", "Beijing Shanghai")
        assert matches("bj sh", "Beijing Shanghai")

    def test_word_in_sentence(self):
        assert matches("bj", "flights to Beijing today")


class TestEnglishWords:
    def test_words_that_are_not_pinyin_match_literally_only(self):
        for query, candidate in [("mat", "meat"), ("sat", "seat"),
                                 ("hat", "heat"), ("ma", "mean")]:
            assert not matches(query, candidate), (query, candidate)

    def test_literal_still_matches(self):
        assert matches("eat", "meat")
        assert matches("mea", "mean")

    def test_no_syllable_split_inside_word(self):
        # "xian" is one syllable, never xi + an
        assert matches("x", "Xian")
        assert not matches("xa", "Xian")

    def test_partial_pinyin_word_is_literal(self):
        assert not matches("bj", "Beijingx")


class TestPinyinHan:
    def test_readings(self):
        assert "bei" in han_readings("北")
        assert "jing" in han_readings("京")

    def test_full_spelling(self):
        assert matches("beijing", "北京")

    def test_initials(self):
        assert matches("bj", "北京")

    def test_partial_last_syllable(self):
        assert matches("beiji", "北京")

    def test_inside_longer_text(self):
        assert matches("bj", "我爱北京天安门")

    def test_non_consecutive_does_not_match(self):
        assert not matches("wbj", "我爱北京")

    def test_wrong_pinyin(self):
        assert not matches("sh", "北京")

    def test_mixed_han_and_literal(self):
        assert matches("bj2024", "北京2024")

    def test_uppercase_query(self):
        assert matches("BJ", "北京")
