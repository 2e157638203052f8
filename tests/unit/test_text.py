"""
Unit tests for the text primitives (itemscan/text/).

Tests:
- normalize_text
- fold_diacritics
- tokenize
- edit_distance
- token_overlap_score
"""

import pytest

from itemscan.text import (
    DIACRITIC_TABLE,
    edit_distance,
    fold_diacritics,
    normalize_text,
    token_overlap_score,
    tokenize,
)

SAMPLE_STRINGS = [
    "",
    "   ",
    "Kinh Bạch Ngọc Bội - Thổ (cấp 2)",
    "Thúy Lựu Thạch Giới Chỉ (cấp 5)",
    "  A -- B ((c)) [d] {e}  ",
    "Hello, World! 'quoted' \"double\"",
    "tab\tand\nnewline",
    "dash–en—em-hyphen",
    "..:;!?",
]

# =============================================================================
# normalize_text Tests
# =============================================================================


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_catalog_name(self):
        """Brackets and dashes go, diacritics stay."""
        assert normalize_text("Kinh Bạch Ngọc Bội - Thổ (cấp 2)") == "kinh bạch ngọc bội thổ cấp 2"

    def test_lowercases_vietnamese_capitals(self):
        """Upper-case accented letters are lower-cased."""
        assert normalize_text("THÚY LỰU") == "thúy lựu"

    def test_trims_and_collapses_whitespace(self):
        """Whitespace runs become single spaces; ends are trimmed."""
        assert normalize_text("  a \t b\n\nc  ") == "a b c"

    def test_removes_brackets(self):
        """All bracket kinds are removed without leaving spaces."""
        assert normalize_text("(a)[b]{c}") == "abc"

    def test_removes_sentence_punctuation(self):
        """Sentence punctuation and quotes are removed."""
        assert normalize_text("a.b,c;d:e!f?g'h\"i") == "abcdefghi"

    def test_dash_variants_become_spaces(self):
        """Hyphen, en dash and em dash all separate words."""
        assert normalize_text("a-b–c—d") == "a b c d"

    def test_spaced_dash_leaves_single_space(self):
        """A dash between spaces does not leave a double space."""
        assert normalize_text("Bội - Thổ") == "bội thổ"

    def test_empty_string(self):
        """Empty input gives empty output."""
        assert normalize_text("") == ""

    def test_punctuation_only(self):
        """Input made only of removable characters normalizes to empty."""
        assert normalize_text("-- () ..") == ""

    @pytest.mark.parametrize("text", SAMPLE_STRINGS)
    def test_idempotent(self, text):
        """Normalizing twice equals normalizing once."""
        once = normalize_text(text)
        assert normalize_text(once) == once


# =============================================================================
# fold_diacritics Tests
# =============================================================================


class TestFoldDiacritics:
    """Tests for fold_diacritics."""

    def test_catalog_name(self):
        """Tone marks and modified vowels fold to base letters."""
        folded = fold_diacritics("Kinh Bạch Ngọc Bội - Thổ (cấp 2)")
        assert folded == "kinh bach ngoc boi - tho (cap 2)"

    def test_d_with_stroke(self):
        """đ folds to d, including the capital."""
        assert fold_diacritics("Đồng đỏ") == "dong do"

    def test_keeps_punctuation(self):
        """Only letters are folded; punctuation and spacing are untouched."""
        assert fold_diacritics("Ngọc  (cấp 5)!") == "ngoc  (cap 5)!"

    @pytest.mark.parametrize(
        "letters,base",
        [
            ("àáảãạăằắẳẵặâầấẩẫậ", "a"),
            ("èéẻẽẹêềếểễệ", "e"),
            ("ìíỉĩị", "i"),
            ("òóỏõọôồốổỗộơờớởỡợ", "o"),
            ("ùúủũụưừứửữự", "u"),
            ("ỳýỷỹỵ", "y"),
        ],
    )
    def test_every_vowel_form(self, letters, base):
        """Every tone and modifier combination of each vowel folds to its base."""
        assert fold_diacritics(letters) == base * len(letters)
        assert fold_diacritics(letters.upper()) == base * len(letters)

    def test_table_size(self):
        """The table covers 66 accented vowels plus đ."""
        assert len(DIACRITIC_TABLE) == 67

    def test_other_scripts_pass_through(self):
        """Characters outside the table are only lower-cased."""
        assert fold_diacritics("Straße Ü") == "straße ü"


# =============================================================================
# tokenize Tests
# =============================================================================


class TestTokenize:
    """Tests for tokenize."""

    def test_catalog_name(self):
        """Single-character tokens such as tier digits are dropped."""
        assert tokenize("Kinh Bạch Ngọc Bội - Thổ (cấp 2)") == [
            "kinh",
            "bạch",
            "ngọc",
            "bội",
            "thổ",
            "cấp",
        ]

    def test_keeps_order_and_duplicates(self):
        """Tokens are neither reordered nor deduplicated."""
        assert tokenize("bội ngọc bội") == ["bội", "ngọc", "bội"]

    def test_empty(self):
        """Empty and trivial input yields no tokens."""
        assert tokenize("") == []
        assert tokenize("a - b") == []


# =============================================================================
# edit_distance Tests
# =============================================================================


class TestEditDistance:
    """Tests for edit_distance."""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("kitten", "sitting", 3),
            ("", "abc", 3),
            ("abc", "", 3),
            ("", "", 0),
            ("flaw", "lawn", 2),
            ("bach", "bạch", 1),
        ],
    )
    def test_known_distances(self, a, b, expected):
        """Standard Levenshtein results."""
        assert edit_distance(a, b) == expected

    def test_case_sensitive(self):
        """Case differences count as substitutions."""
        assert edit_distance("Abc", "abc") == 1

    def test_counts_code_points(self):
        """A precomposed accented letter is one character."""
        assert edit_distance("thổ", "tho") == 1

    @pytest.mark.parametrize("text", SAMPLE_STRINGS)
    def test_identity(self, text):
        """Distance to itself is zero."""
        assert edit_distance(text, text) == 0

    @pytest.mark.parametrize(
        "a,b",
        [
            ("thúy lựu thạch", "thuy luu thach"),
            ("random unrelated junk line", "kinh bạch ngọc bội thổ cấp 2"),
            ("", "ngọc"),
            ("abcdef", "azced"),
        ],
    )
    def test_symmetric_and_bounded(self, a, b):
        """Distance is symmetric and never exceeds the combined length."""
        assert edit_distance(a, b) == edit_distance(b, a)
        assert edit_distance(a, b) <= len(a) + len(b)

    def test_max_distance_cutoff(self):
        """Distances above the cutoff are reported as cutoff + 1."""
        assert edit_distance("kitten", "sitting", max_distance=1) == 2
        assert edit_distance("kitten", "sitting", max_distance=5) == 3


# =============================================================================
# token_overlap_score Tests
# =============================================================================


class TestTokenOverlapScore:
    """Tests for token_overlap_score."""

    def test_identical(self):
        """Identical strings score 1.0."""
        assert token_overlap_score("Thúy Lựu Thạch", "Thúy Lựu Thạch") == 1.0

    def test_one_edit_per_token_tolerated(self):
        """Tokens within one edit count as matched."""
        assert token_overlap_score("Thuy Luu Thach", "Thúy Lựu Thạch") == 1.0

    def test_two_edits_not_tolerated(self):
        """Tokens two edits apart do not match."""
        assert token_overlap_score("thuong", "thương phượng") == 0.0

    def test_divides_by_longer_side(self):
        """Score uses the larger token count as denominator."""
        assert token_overlap_score("ngọc bội", "ngọc bội thổ cấp") == pytest.approx(0.5)

    def test_tokens_of_b_are_reusable(self):
        """One token of b may satisfy several tokens of a."""
        assert token_overlap_score("bội bội", "bội ngọc") == 1.0

    def test_not_symmetric_in_general(self):
        """Reused tokens make the score direction-dependent."""
        assert token_overlap_score("bội bội", "bội ngọc") == 1.0
        assert token_overlap_score("bội ngọc", "bội bội") == pytest.approx(0.5)

    @pytest.mark.parametrize("a,b", [("", "ngọc bội"), ("ngọc bội", ""), ("a b", "ngọc")])
    def test_empty_side_scores_zero(self, a, b):
        """No tokens on either side gives 0."""
        assert token_overlap_score(a, b) == 0.0

    def test_range(self):
        """Scores stay within [0, 1]."""
        score = token_overlap_score("Random Unrelated Junk Line", "Kinh Bạch Ngọc Bội")
        assert 0.0 <= score <= 1.0
