"""Tests for the jyutping → kana mapping engine."""
import pytest
from zhengyu.nlp.cantonese.jyutping import Nucleus, Syllable, parse_syllable, split_syllables
from zhengyu.nlp.cantonese.kana import (
    KANA_ROWS,
    NASAL_CODA,
    NUCLEUS_RULES,
    STOP_CODA,
    row_kana,
    syllable_to_kana,
    to_kana,
    to_kana_many,
)
from zhengyu.nlp.cantonese.lexicon import CORE_LEXICON


class TestBasicScenarios:
    """Reference conversions."""

    def test_stop_coda_syllable(self):
        """sik6: s-row i-entry followed by the glottal stop."""
        assert to_kana("sik6") == "し" + STOP_CODA

    def test_ng_initial(self):
        """ngo5 is read as the zero-initial row."""
        assert to_kana("ngo5") == "お"

    @pytest.mark.parametrize("token", ["m4", "ng4", "m", "ng2"])
    def test_syllabic_nasal(self, token):
        assert to_kana(token) == "ん"

    def test_tone_is_ignored(self):
        assert to_kana("si1") == to_kana("si6") == to_kana("si") == "し"


class TestNucleusTable:
    """Every nucleus has its own composition rule."""

    @pytest.mark.parametrize("token,expected", [
        ("baa1", "ばあ"),
        ("gaai1", "があい"),
        ("gaau3", "があう"),
        ("ba1", "ば"),
        ("sai3", "さい"),
        ("zau6", "ざう"),
        ("se3", "せ"),
        ("sei3", "せい"),
        ("si1", "し"),
        ("siu2", "しう"),
        ("so2", "そ"),
        ("sou1", "そう"),
        ("soi1", "そい"),
        ("fu1", "ふ"),
        ("gui6", "ぐい"),
        ("goe1", "ごえ"),
        ("heoi3", "へおい"),
        ("keoi5", "けおい"),
    ])
    def test_open_syllables(self, token, expected):
        assert to_kana(token) == expected

    @pytest.mark.parametrize("token,expected", [
        ("soeng1", "そえん"),
        ("coek3", "つぉえっ"),
        ("seon3", "せおん"),
        ("ceot1", "つぇおっ"),
    ])
    def test_oe_and_eo_clusters(self, token, expected):
        assert to_kana(token) == expected

    def test_oeng_and_oek_entries_match_the_parsed_forms(self):
        """The oeng/oek table entries agree with oe + coda."""
        assert syllable_to_kana(Syllable(initial="s", nucleus="oeng")) == to_kana("soeng1")
        assert syllable_to_kana(Syllable(initial="c", nucleus="oek")) == to_kana("coek3")

    def test_long_a_keeps_length_mark_before_coda(self):
        """baa -> ばあ, baan -> ばあん, ban -> ばん."""
        assert to_kana("baa1") == "ばあ"
        assert to_kana("baan6") == "ばあん"
        assert to_kana("ban6") == "ばん"
        assert to_kana("haang4") == "はあん"
        assert to_kana("baat3") == "ばあっ"

    def test_every_named_nucleus_has_a_rule(self):
        named = {n for n in Nucleus if n not in (Nucleus.yu, Nucleus.other)}
        assert named == set(NUCLEUS_RULES)

    def test_unknown_nucleus_falls_back_to_a_column(self):
        """Unlisted vowel clusters use the initial's a-entry."""
        assert syllable_to_kana(Syllable(initial="d", nucleus="eu")) == "だ"
        assert syllable_to_kana(Syllable(initial="h", nucleus="", coda="m")) == "はん"


class TestIrregularInitials:
    """Initials whose rows differ from the plain gojuon."""

    @pytest.mark.parametrize("token,expected", [
        ("faan6", "ふぁあん"),
        ("fei1", "ふぇい"),
        ("fo2", "ふぉ"),
    ])
    def test_f_glide_series(self, token, expected):
        assert to_kana(token) == expected

    @pytest.mark.parametrize("token,expected", [
        ("ci5", "つぃ"),
        ("caa4", "つぁあ"),
        ("cung1", "つん"),
    ])
    def test_c_never_palatalizes(self, token, expected):
        assert to_kana(token) == expected

    @pytest.mark.parametrize("token,expected", [
        ("jat1", "やっ"),
        ("ji5", "い"),
        ("je5", "いぇ"),
        ("jau5", "やう"),
    ])
    def test_j_semivowel_row(self, token, expected):
        assert to_kana(token) == expected

    @pytest.mark.parametrize("token,expected", [
        ("wo4", "を"),
        ("wai6", "わい"),
        ("wing4", "うぃん"),
        ("gwo3", "ぐを"),
        ("gwong2", "ぐをん"),
        ("kwaa1", "くわあ"),
    ])
    def test_w_rows(self, token, expected):
        assert to_kana(token) == expected

    def test_unknown_initial_uses_zero_row(self):
        assert row_kana("x", "o") == KANA_ROWS[""][4]
        assert row_kana("s", "y") == ""


class TestYuNucleus:
    """yu depends on the initial class."""

    @pytest.mark.parametrize("token", ["jyu4", "jyu", "yu5"])
    def test_zero_and_semivowel_initials(self, token):
        assert to_kana(token) == "ゆ"

    def test_c_initial_compound(self):
        assert to_kana("cyu5") == "つゆ"
        assert to_kana("cyun4") == "つゆん"

    @pytest.mark.parametrize("token,expected", [
        ("zyu1", "じゅ"),
        ("syu1", "しゅ"),
        ("kyut3", "きゅっ"),
        ("dyun6", "ぢゅん"),
        ("lyun6", "りゅん"),
        ("hyut3", "ひゅっ"),
        ("nyu5", "にゅ"),
    ])
    def test_yoon_contraction(self, token, expected):
        assert to_kana(token) == expected

    def test_jyu_with_coda(self):
        assert to_kana("jyut6") == "ゆっ"


class TestCodaUniformity:
    """Codas only ever add a suffix."""

    @pytest.mark.parametrize("nucleus", ["a", "aa", "e", "i", "o", "u", "oe", "eo", "yu", "ou", "zz"])
    @pytest.mark.parametrize("initial", ["", "b", "f", "gw", "c", "j", "s"])
    def test_nasal_and_stop_codas_append_fixed_symbols(self, initial, nucleus):
        open_kana = syllable_to_kana(Syllable(initial=initial, nucleus=nucleus))
        assert syllable_to_kana(Syllable(initial=initial, nucleus=nucleus, coda="ng")) == open_kana + NASAL_CODA
        assert syllable_to_kana(Syllable(initial=initial, nucleus=nucleus, coda="m")) == open_kana + NASAL_CODA
        assert syllable_to_kana(Syllable(initial=initial, nucleus=nucleus, coda="t")) == open_kana + STOP_CODA


class TestPassThrough:
    """Non-jyutping input is echoed unchanged."""

    @pytest.mark.parametrize("token", ["しっ", "、", "Hello", "我", "sik9", "", "!"])
    def test_identity(self, token):
        assert to_kana(token) == token

    def test_mixed_sequence(self):
        assert to_kana_many(["ngo5", "、", "sik6"]) == "お、しっ"


class TestCoreLexicon:
    """Kana forms recorded in the core lexicon agree with the engine."""

    @pytest.mark.parametrize("cantonese", [
        "食", "去", "睇", "有", "做", "行", "讲", "听", "决定",
        "好", "大", "细", "少", "高", "唔", "热", "舒服",
        "咗", "紧", "因为", "所以", "或者", "只", "件", "间",
        "边個", "乜嘢",
    ])
    def test_lexicon_kana(self, cantonese):
        entry = next(e for e in CORE_LEXICON if e.cantonese == cantonese)
        assert to_kana_many(split_syllables(entry.jyutping)) == entry.zhengyu

    def test_every_lexicon_reading_parses(self):
        for entry in CORE_LEXICON:
            for token in split_syllables(entry.jyutping):
                assert parse_syllable(token) is not None, token
