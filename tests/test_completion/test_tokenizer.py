import pytest

from slashkit.completion.tokenizer import Token, get_cursor_token_info, tokenize


def test_tokenize_simple():
    assert tokenize("/model cla") == [
        Token("/model", 0, 6, False),
        Token("cla", 7, 10, False),
    ]


def test_tokenize_empty_and_blank():
    assert tokenize("") == []
    assert tokenize("   \t ") == []


def test_tokenize_double_quoted():
    tokens = tokenize('/export "my file.md"')
    assert len(tokens) == 2
    assert tokens[1] == Token("my file.md", 8, 20, True)


def test_tokenize_single_quoted():
    tokens = tokenize("/remember 'a b' c")
    assert [token.text for token in tokens] == ["/remember", "a b", "c"]
    assert tokens[1].quoted is True
    assert tokens[2].quoted is False


def test_quote_boundary_does_not_split_token():
    tokens = tokenize('"foo"bar baz')
    assert tokens[0] == Token("foobar", 0, 8, True)
    assert tokens[1].text == "baz"


def test_backslash_escapes_only_inside_quotes():
    assert tokenize('"a\\"b"')[0].text == 'a"b'
    assert tokenize("a\\b")[0].text == "a\\b"


def test_unterminated_quote_runs_to_end():
    tokens = tokenize('/model "cla')
    assert tokens[1] == Token("cla", 7, 11, True)


def test_lone_open_quote_is_a_token():
    tokens = tokenize('/model "')
    assert tokens[1] == Token("", 7, 8, True)


def test_unicode_whitespace_separates():
    assert [token.text for token in tokenize("/model\u3000x\u00a0y")] == [
        "/model",
        "x",
        "y",
    ]


def test_token_ranges_are_ordered_and_disjoint():
    tokens = tokenize('  /memory   list "--type" fact  --limit 5 ')
    for left, right in zip(tokens, tokens[1:]):
        assert left.start < left.end <= right.start < right.end


@pytest.mark.parametrize(
    "line",
    [
        "/memory list --type fact --limit 5",
        "/remember   spaced    out   text",
        "  /daemon add prod https://example.com ",
    ],
)
def test_rejoined_tokens_reconstruct_line(line):
    assert " ".join(token.text for token in tokenize(line)) == " ".join(line.split())


def test_cursor_at_end_of_token_is_inside():
    info = get_cursor_token_info("/model cla", 10)
    assert info.active_token_index == 1
    assert info.active_prefix == "cla"
    assert (info.replace_start, info.replace_end) == (7, 10)


def test_cursor_mid_token_prefix_stops_at_cursor():
    info = get_cursor_token_info("/model claude", 9)
    assert info.active_token_index == 1
    assert info.active_prefix == "cl"
    assert (info.replace_start, info.replace_end) == (7, 13)


def test_cursor_at_token_start_is_gap():
    info = get_cursor_token_info("/model cla", 7)
    assert info.in_gap
    assert info.active_prefix == ""
    assert (info.replace_start, info.replace_end) == (7, 7)


def test_cursor_after_trailing_space_is_gap():
    info = get_cursor_token_info("/model ", 7)
    assert info.active_token_index == -1
    assert len(info.tokens) == 1
    assert (info.replace_start, info.replace_end) == (7, 7)


def test_cursor_in_command_token():
    info = get_cursor_token_info("/model", 6)
    assert info.active_token_index == 0
    assert info.active_prefix == "/model"


def test_cursor_is_clamped():
    high = get_cursor_token_info("/mod", 100)
    assert high.active_token_index == 0
    assert high.active_prefix == "/mod"

    low = get_cursor_token_info("/mod", -5)
    assert low.in_gap
    assert (low.replace_start, low.replace_end) == (0, 0)


def test_leading_quote_stripped_from_prefix():
    info = get_cursor_token_info('/model "cla', 11)
    assert info.active_prefix == "cla"
    assert info.replace_start == 7


def test_empty_input_cursor_info():
    info = get_cursor_token_info("", 0)
    assert info.tokens == ()
    assert info.in_gap
