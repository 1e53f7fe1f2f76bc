import pytest

from tinydom.text import (
    Cursor,
    ParsingData,
    escape,
    get_char,
    get_entity,
    is_whitespace,
    is_whitespace_condensed,
    read_name,
    read_text,
    set_condense_whitespace,
    skip_whitespace,
    string_equal,
)


@pytest.fixture
def no_condense():
    previous = is_whitespace_condensed()
    set_condense_whitespace(False)
    yield
    set_condense_whitespace(previous)


def test_escape_markup_characters():
    assert escape("&<>\"'") == "&amp;&lt;&gt;&quot;&apos;"


def test_escape_leaves_plain_text():
    assert escape("hello world") == "hello world"


def test_escape_control_character():
    assert escape("\n") == "&#x000A;"


def test_escape_passes_hex_reference_through():
    assert escape("&#xA9;") == "&#xA9;"


@pytest.mark.parametrize("value", ["a<b", "x & y", "say \"hi\" 'there'", "tab\there", "line\nbreak", "caf\u00e9"])
def test_escape_round_trip(value):
    decoded, _ = read_text(escape(value) + "<", 0, False, "<", False)
    assert decoded == value


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\r", "\v", "\f"])
def test_is_whitespace_true(ch):
    assert is_whitespace(ch) is True


@pytest.mark.parametrize("ch", ["a", "<", "", "_"])
def test_is_whitespace_false(ch):
    assert is_whitespace(ch) is False


def test_skip_whitespace_moves_to_content():
    text = "  \n\t x"
    assert skip_whitespace(text, 0) == text.index("x")


def test_skip_whitespace_at_end_is_none():
    assert skip_whitespace("abc", len("abc")) is None
    assert skip_whitespace("abc", None) is None


def test_skip_whitespace_all_blank_reaches_end():
    text = "   "
    assert skip_whitespace(text, 0) == len(text)


def test_read_name_reads_allowed_characters():
    text = "ns:tag-1.x_y rest"
    name, pos = read_name(text, 0)
    assert name == "ns:tag-1.x_y"
    assert pos == len(name)


def test_read_name_underscore_start():
    assert read_name("_a=", 0) == ("_a", len("_a"))


@pytest.mark.parametrize("text", ["1abc", "-a", "", " a"])
def test_read_name_rejects_bad_start(text):
    assert read_name(text, 0) is None


def test_get_entity_named():
    for reference, char in [("&amp;", "&"), ("&lt;", "<"), ("&gt;", ">"), ("&quot;", '"'), ("&apos;", "'")]:
        assert get_entity(reference + "tail", 0) == (char, len(reference))


def test_get_entity_hex():
    assert get_entity("&#x41;", 0) == ("A", len("&#x41;"))


def test_get_entity_hex_too_long_is_literal():
    assert get_entity("&#x00041;", 0) == ("&", len("&"))


def test_get_entity_unknown_is_literal():
    assert get_entity("&foo;", 0) == ("&", len("&"))


def test_get_char_plain_and_entity():
    text = "x&lt;"
    ch, pos = get_char(text, 0)
    assert (ch, pos) == (text[0], len(text[0]))
    ch, pos = get_char(text, pos)
    assert (ch, pos) == ("<", len(text))


def test_string_equal_flag_false_ignores_case():
    assert string_equal("</ROOT>", 0, "</root>", False) is True


def test_string_equal_flag_true_is_exact():
    assert string_equal("</ROOT>", 0, "</root>", True) is False
    assert string_equal("<?xml v", 0, "<?xml", True) is True


def test_string_equal_short_or_empty():
    assert string_equal("<?x", 0, "<?xml", True) is False
    assert string_equal("abc", len("abc"), "a", False) is False
    assert string_equal("abc", 0, "", False) is False


def test_read_text_keeps_whitespace_and_decodes():
    text = 'a &amp; b"rest'
    value, pos = read_text(text, 0, False, '"', False)
    assert value == "a & b"
    assert pos == text.index('"') + 1


def test_read_text_condenses_whitespace():
    raw = "  one \n two\t\tthree "
    value, pos = read_text(raw + "<", 0, True, "<", False)
    assert value == " ".join(raw.split())
    assert pos == len(raw) + 1


def test_read_text_without_condensing(no_condense):
    text = "  one \n two <"
    value, _ = read_text(text, 0, True, "<", False)
    assert value == text[: text.index("<")]


def test_read_text_missing_end_tag_runs_past_end():
    text = "no terminator"
    value, pos = read_text(text, 0, False, "-->", False)
    assert value == text
    assert pos == len(text) + len("-->")


def test_condense_setting_round_trip(no_condense):
    assert is_whitespace_condensed() is False
    set_condense_whitespace(True)
    assert is_whitespace_condensed() is True


def test_cursor_clear():
    cursor = Cursor(3, 4)
    cursor.clear()
    assert cursor == Cursor()
    assert (cursor.row, cursor.col) == (-1, -1)


def test_stamp_counts_lines_and_columns():
    text = "ab\ncd\nxyz"
    data = ParsingData(text, 0, 4, 0, 0)
    data.stamp(len(text))
    assert data.cursor.row == text.count("\n")
    assert data.cursor.col == len("xyz")


@pytest.mark.parametrize("pair", ["\r\n", "\n\r"])
def test_stamp_line_pairs_count_once(pair):
    single = ParsingData("\nx", 0, 4, 0, 0)
    single.stamp(len("\nx"))
    double = ParsingData(pair + "x", 0, 4, 0, 0)
    double.stamp(len(pair + "x"))
    assert double.cursor == single.cursor


@pytest.mark.parametrize("prefix", ["", "a", "abc"])
def test_stamp_tab_goes_to_next_stop(prefix):
    tabsize = 4
    text = prefix + "\t"
    data = ParsingData(text, 0, tabsize, 0, 0)
    data.stamp(len(text))
    assert data.cursor.col == tabsize


def test_stamp_disabled_with_zero_tabsize():
    data = ParsingData("a\nb", 0, 0, 5, 6)
    data.stamp(len("a\nb"))
    assert data.cursor == Cursor(5, 6)


def test_stamp_incremental_matches_single_pass():
    text = "<a>\n  <b x='1'/>\n\t</a>"
    whole = ParsingData(text, 0, 4, 0, 0)
    whole.stamp(len(text))
    steps = ParsingData(text, 0, 4, 0, 0)
    for pos in range(len(text) + 1):
        steps.stamp(pos)
    assert steps.cursor == whole.cursor


def test_stamp_past_end_leaves_cursor():
    data = ParsingData("ab", 0, 4, 0, 0)
    data.stamp(len("ab") + 5)
    assert data.cursor == Cursor(0, 0)


def test_stamp_starts_from_given_offset():
    text = "xx\nyy"
    data = ParsingData(text, text.index("\n") + 1, 4, 0, 0)
    data.stamp(len(text))
    assert data.cursor == Cursor(0, len("yy"))