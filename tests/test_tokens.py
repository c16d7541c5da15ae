from estruturas.tokens import split_args


def test_splits_on_spaces():
    assert split_args("push_back 1 2 3") == ["push_back", "1", "2", "3"]


def test_trailing_newline_dropped():
    assert split_args("show\n") == ["show"]


def test_repeated_spaces_collapse():
    assert split_args("  push_front   7  ") == ["push_front", "7"]


def test_text_after_newline_ignored():
    assert split_args("size\nclear") == ["size"]


def test_tabs_are_not_separators():
    assert split_args("a\tb c") == ["a\tb", "c"]


def test_blank_line_gives_no_words():
    assert split_args("\n") == []
    assert split_args("") == []