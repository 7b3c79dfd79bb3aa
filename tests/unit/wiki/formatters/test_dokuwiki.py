"""
Tests for DokuWikiFormatter.
"""
import pytest

from infothek.core.exceptions import ArgumentNullError, ArgumentRangeError
from infothek.wiki.formatters import Alignment, DokuWikiFormatter


@pytest.fixture
def formatter():
    return DokuWikiFormatter()


class TestInline:
    def test_text_styles(self, formatter):
        assert formatter.as_bold("text") == "**text**"
        assert formatter.as_italic("text") == "//text//"
        assert formatter.as_underlined("text") == "__text__"
        assert formatter.as_subscript("text") == "<sub>text</sub>"
        assert formatter.as_superscript("text") == "<sup>text</sup>"
        assert formatter.as_deleted("text") == "<del>text</del>"

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_text_rejected(self, formatter, value):
        with pytest.raises(ArgumentNullError):
            formatter.as_bold(value)

    def test_email(self, formatter):
        assert formatter.as_email("info@example.org") == "<info@example.org>"


class TestLinks:
    """Tests for internal and external links."""

    def test_plain_link(self, formatter):
        assert formatter.as_internal_link("page") == "[[page]]"

    def test_full_link(self, formatter):
        link = formatter.as_internal_link("page", path=["a", "b"], section="sect", text="text")
        assert link == "[[a:b:page#sect|text]]"

    def test_empty_path_segments_skipped(self, formatter):
        assert formatter.as_internal_link("page", path=["de", None, "", "info"]) == "[[de:info:page]]"

    def test_empty_optional_text_rejected(self, formatter):
        with pytest.raises(ArgumentNullError):
            formatter.as_internal_link("page", text="")

    def test_external_link(self, formatter):
        assert formatter.as_external_link("https://example.org") == "[[https://example.org]]"
        assert formatter.as_external_link("https://example.org", "Example") == (
            "[[https://example.org|Example]]"
        )


class TestHeadings:
    def test_levels(self, formatter):
        assert formatter.as_heading1("Title") == "====== Title ======"
        assert formatter.as_heading2("Title") == "===== Title ====="
        assert formatter.as_heading3("Title") == "==== Title ===="
        assert formatter.as_heading4("Title") == "=== Title ==="
        assert formatter.as_heading5("Title") == "== Title =="


class TestImages:
    """Tests for images and alignment."""

    def test_full_image(self, formatter):
        image = formatter.as_image("f.jpg", path=["p1", "p2"], width=50, height=100, text="cap")
        assert image == "{{p1:p2:f.jpg?50x100|cap}}"

    def test_width_only(self, formatter):
        assert formatter.as_image("f.jpg", path=["certification"], width=75) == (
            "{{certification:f.jpg?75}}"
        )

    def test_plain_image(self, formatter):
        assert formatter.as_image("f.jpg") == "{{f.jpg}}"

    def test_height_without_width_rejected(self, formatter):
        with pytest.raises(ArgumentRangeError):
            formatter.as_image("f.jpg", height=100)

    @pytest.mark.parametrize("width", [0, -5])
    def test_non_positive_width_rejected(self, formatter, width):
        with pytest.raises(ArgumentRangeError):
            formatter.as_image("f.jpg", width=width)

    def test_image_box(self, formatter):
        assert formatter.as_image_box("x") == "[x]"

    def test_align(self, formatter):
        assert formatter.align("text", Alignment.LEFT) == "text  "
        assert formatter.align("text", Alignment.CENTERED) == "  text  "
        assert formatter.align("text", Alignment.RIGHT) == "  text"

    def test_align_image(self, formatter):
        assert formatter.align_image("[[link]]", Alignment.LEFT) == "[[link ]]"
        assert formatter.align_image("[[link]]", Alignment.CENTERED) == "[[ link ]]"
        assert formatter.align_image("{{image}}", Alignment.RIGHT) == "{{ image}}"


class TestPageDirectives:
    def test_lists_and_lines(self, formatter):
        assert formatter.force_new_line() == "\\\\"
        assert formatter.list_item_unsorted() == "* "
        assert formatter.list_item_sorted() == "- "
        assert formatter.list_item_indent() == "  "

    def test_insert_page(self, formatter):
        assert formatter.as_insert_page("_cn2", path=["de", "navigation"]) == "{{page>de:navigation:_cn2}}"

    def test_directives(self, formatter):
        assert formatter.disable_toc() == "~~NOTOC~~"
        assert formatter.disable_cache() == "~~NOCACHE~~"
        assert formatter.begin_comment() == "/* "
        assert formatter.end_comment() == " */"


class TestTables:
    """Tests for table markup."""

    def test_define_table(self, formatter):
        assert formatter.define_table(445, [30, 70]) == "|<   445px   30%   70%   >|"

    def test_define_table_rejects_zero_width(self, formatter):
        with pytest.raises(ArgumentRangeError):
            formatter.define_table(445, [30, 0])

    def test_define_table_rejects_missing_widths(self, formatter):
        with pytest.raises(ArgumentNullError):
            formatter.define_table(445, None)

    def test_table_title(self, formatter):
        assert formatter.as_table_title(["a", None, "b"]) == "^ a ^^ b ^"
        assert formatter.as_table_title([None, None]) == "^^^"

    def test_table_row(self, formatter):
        assert formatter.as_table_row(["a", "b"]) == "| a | b |"
        assert formatter.as_table_row(["a", "b", ""]) == "| a | b ||"

    def test_table_row_requires_data(self, formatter):
        with pytest.raises(ArgumentNullError):
            formatter.as_table_row(None)

    def test_cell_span(self, formatter):
        assert formatter.as_table_row([formatter.cell_span_vertically(), "x"]) == "| ::: | x |"


class TestBoxes:
    def test_box(self, formatter):
        assert formatter.begin_box(475, Alignment.RIGHT) == "<WRAP box 475px Right>"
        assert formatter.end_box() == "</WRAP>"

    def test_box_size_checked(self, formatter):
        with pytest.raises(ArgumentRangeError):
            formatter.begin_box(0, Alignment.LEFT)

    def test_data_entry(self, formatter):
        assert formatter.begin_data_entry("movie") == "---- dataentry movie ----"
        assert formatter.end_data_entry() == "----"


class TestFilename:
    def test_title_with_year(self, formatter):
        assert formatter.as_filename("Alien (1979)") == "alien_1979.txt"

    def test_umlauts_and_punctuation(self, formatter):
        assert formatter.as_filename("Die Hölle: Teil 2?") == "die_holle_teil_2_.txt"

    def test_missing_text_rejected(self, formatter):
        with pytest.raises(ArgumentNullError):
            formatter.as_filename(None)


# calls taking the formatter and the missing value
MISSING_ARGUMENT_CALLS = [
    pytest.param(lambda f, v: f.as_internal_link(v), id="as_internal_link"),
    pytest.param(lambda f, v: f.as_external_link(v), id="as_external_link"),
    pytest.param(lambda f, v: f.as_image(v), id="as_image"),
    pytest.param(lambda f, v: f.as_heading1(v), id="as_heading1"),
    pytest.param(lambda f, v: f.as_heading2(v), id="as_heading2"),
    pytest.param(lambda f, v: f.as_heading3(v), id="as_heading3"),
    pytest.param(lambda f, v: f.as_email(v), id="as_email"),
    pytest.param(lambda f, v: f.align(v, Alignment.LEFT), id="align"),
    pytest.param(lambda f, v: f.align_image(v, Alignment.LEFT), id="align_image"),
    pytest.param(lambda f, v: f.begin_data_entry(v), id="begin_data_entry"),
    pytest.param(lambda f, v: f.as_insert_page(v, path=["de", "navigation"]), id="as_insert_page"),
    pytest.param(lambda f, v: f.as_image_box(v), id="as_image_box"),
    pytest.param(lambda f, v: f.as_italic(v), id="as_italic"),
    pytest.param(lambda f, v: f.as_deleted(v), id="as_deleted"),
]


class TestMissingArguments:
    """Every text argument rejects None and the empty string."""

    @pytest.mark.parametrize("value", [None, ""])
    @pytest.mark.parametrize("call", MISSING_ARGUMENT_CALLS)
    def test_missing_text(self, formatter, call, value):
        with pytest.raises(ArgumentNullError):
            call(formatter, value)

    def test_empty_optional_text(self, formatter):
        with pytest.raises(ArgumentNullError):
            formatter.as_internal_link("page", path=["a"], section="")
        with pytest.raises(ArgumentNullError):
            formatter.as_external_link("https://example.org", "")
        with pytest.raises(ArgumentNullError):
            formatter.as_image("f.jpg", width=50, text="")

    def test_missing_table_data(self, formatter):
        with pytest.raises(ArgumentNullError):
            formatter.as_table_title(None)

    def test_missing_alignment(self, formatter):
        with pytest.raises(ArgumentNullError, match="alignment"):
            formatter.align("text", None)
        with pytest.raises(ArgumentNullError, match="alignment"):
            formatter.align_image("[[link]]", None)
        with pytest.raises(ArgumentNullError, match="alignment"):
            formatter.begin_box(475, None)


def test_filename_with_special_and_german_characters(formatter):
    filename = formatter.as_filename(
        "THIS IS A TEST+ FOR A FILE/NAME WITH% DIFFERENT* SPECIAL& CHARACTERS! "
        "ESPECIALLY# GERMAN= ONES: Ä, Ö, Ü, ß?"
    )
    assert filename == (
        "this_is_a_test__for_a_file_name_with__different__special__characters__"
        "especially__german__ones_a_o_u_s_.txt"
    )
