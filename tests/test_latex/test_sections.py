"""Tests for section, list and banner rendering."""

import pytest

from rezzy.latex.sections import BANNER_RULE, latex_banner_comment, latex_list, latex_section


class TestBannerComment:
    def test_banner_shape(self):
        assert latex_banner_comment("Section: Skills") == [
            "",
            BANNER_RULE,
            "% SECTION: SKILLS",
            BANNER_RULE,
            "",
        ]

    def test_rule_width(self):
        assert BANNER_RULE == "%" + "-" * 88

    @pytest.mark.parametrize("comment", ["", None])
    def test_empty_comment_renders_nothing(self, comment):
        assert latex_banner_comment(comment) == []


class TestLatexSection:
    def test_wraps_lines(self):
        result = latex_section("Skills", ["a", "b"])
        assert result[:5] == latex_banner_comment("Section: Skills")
        assert result[5] == "\\begin{rSection}{Skills}"
        assert result[6:8] == ["a", "b"]
        assert result[-1] == "\\end{rSection}"

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_length(self, count):
        assert len(latex_section("T", ["x"] * count)) == count + 7

    def test_empty_section_renders_nothing(self):
        assert latex_section("Skills", []) == []


class TestLatexList:
    def test_items(self):
        assert latex_list(["one", "two"]) == [
            "\\begin{itemize}",
            "\\setlength{\\itemsep}{-3pt}",
            "\\item{one}",
            "\\item{two}",
            "\\end{itemize}",
        ]

    @pytest.mark.parametrize("count", [1, 3, 4])
    def test_length(self, count):
        assert len(latex_list(["x"] * count)) == count + 3

    def test_empty_list_renders_nothing(self):
        assert latex_list([]) == []
