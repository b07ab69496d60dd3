from unmask.scanner import find_non_printable, iter_positions, line_starts, locate, scan, utf16_offset


def positions_of(text):
    return [(item.code_point, item.line, item.column) for item in scan(text)]


def test_zero_width_space_between_letters():
    result = scan("A\u200bB")

    assert len(result) == 1
    item = result[0]
    assert item.index == 1
    assert item.code_point == 0x200B
    assert item.character == "\u200b"
    assert item.name == "ZERO WIDTH SPACE"
    assert item.category == "Cf"
    assert (item.line, item.column) == (1, 2)


def test_nbsp_after_crlf_is_on_second_line():
    result = scan("caf\u00e9\r\n\u00a0word")

    nbsp = next(item for item in result if item.code_point == 0xA0)
    assert (nbsp.line, nbsp.column) == (2, 1)
    assert nbsp.index == 6


def test_crlf_is_one_break_and_lf_is_not_reported():
    assert positions_of("ab\r\ncd\x00") == [
        (0x0D, 1, 3),
        (0x00, 2, 3),
    ]
    assert positions_of("a\r\nb") == [(0x0D, 1, 2)]
    assert [pos.index for pos in iter_positions("a\r\nb")] == [0, 1, 3]


def test_lone_lf_after_crlf_is_reported():
    assert positions_of("\r\n\n") == [(0x0D, 1, 1), (0x0A, 2, 1)]
    assert line_starts("\r\n\n") == [0, 2, 3]


def test_each_line_terminator_advances_line():
    text = "a\rb\nc\u2028d\u2029e\x01"
    assert positions_of(text)[-1] == (0x01, 5, 2)
    lines = [pos.line for pos in iter_positions(text) if pos.char == "e"]
    assert lines == [5]


def test_lone_trailing_cr_is_a_line_break():
    result = scan("x\r")
    assert positions_of("x\r") == [(0x0D, 1, 2)]
    assert line_starts("x\r") == [0, 2]
    assert result[0].index == 1


def test_cr_cr_lf_counts_two_breaks():
    assert positions_of("\r\r\n\x00") == [
        (0x0D, 1, 1),
        (0x0D, 2, 1),
        (0x00, 3, 1),
    ]


def test_columns_count_code_points_not_utf16_units():
    text = "\U0001F600\U0001F600\u200b"
    item = scan(text)[0]
    assert item.index == 2
    assert item.column == 3
    assert item.utf16_index == 4
    assert item.utf16_length == 1


def test_astral_hidden_character_has_utf16_length_two():
    item = scan("a\U000E0001")[0]
    assert item.code_point == 0xE0001
    assert item.utf16_index == 1
    assert item.utf16_length == 2
    assert item.to_dict()["code"] == "U+E0001"


def test_empty_text():
    assert scan("") == []
    assert find_non_printable("") == []
    assert list(iter_positions("")) == []


def test_flat_list_drops_positions():
    flat = find_non_printable("x\ty\u200d")
    assert [item.code_point for item in flat] == [0x09, 0x200D]
    assert not hasattr(flat[0], "line")
    assert flat[0].to_dict()["name"] == "TAB"


def test_to_dict_shape():
    data = scan("\u202e")[0].to_dict()
    assert data == {
        "index": 0,
        "utf16_index": 0,
        "utf16_length": 1,
        "char": "\u202e",
        "code_point": 0x202E,
        "code": "U+202E",
        "name": "RIGHT-TO-LEFT OVERRIDE",
        "category": "Cf",
        "line": 1,
        "column": 1,
    }


def test_locate_inside_text():
    text = "ab\r\ncd"
    assert locate(text, 1, 1) == 0
    assert locate(text, 1, 3) == 2
    # The LF of the pair is not addressable; the column clamps to the CR.
    assert locate(text, 1, 4) == 2
    assert locate(text, 2, 1) == 4
    assert locate(text, 2, 2) == 5


def test_locate_clamps_out_of_range_requests():
    text = "ab\r\ncd"
    assert locate(text, 0, 0) == 0
    assert locate(text, -3, 2) == 1
    assert locate(text, 1, 99) == 2
    assert locate(text, 2, 99) == len(text)
    assert locate(text, 99, 1) == len(text)
    assert locate("", 5, 5) == 0


def test_locate_round_trips_scan_positions():
    text = "one\u200b\r\ntwo\u2028\u00a0three\rfour\x00"
    for item in scan(text):
        assert locate(text, item.line, item.column) == item.index


def test_utf16_offset():
    text = "a\U0001F600b"
    assert utf16_offset(text, 0) == 0
    assert utf16_offset(text, 2) == 3
    assert utf16_offset(text, 10) == 4
    assert utf16_offset(text, -1) == 0
