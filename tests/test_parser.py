"""
Tests for WhatsApp parser
"""

import pytest
from datetime import datetime
from chatlens.exceptions import EmptyInputError, NoMessagesParsedError, ParseError, UnrecognizedFormatError
from chatlens.parser import (
    WhatsAppParser,
    _looks_like_system,
    _strip_weird_unicode,
    parse,
    repair_encoding,
    validate_format,
)


def test_strip_unicode():
    """Test Unicode normalization."""
    assert _strip_weird_unicode("hello\u200eworld") == "helloworld"
    assert _strip_weird_unicode("test\u00a0space") == "test space"
    assert _strip_weird_unicode("\ufeff[01.01.23") == "[01.01.23"


def test_system_message_detection():
    """Test system message detection."""
    assert _looks_like_system("Alice added Bob")
    assert _looks_like_system("Bob left")
    assert not _looks_like_system("merhaba nasılsın")


def test_parse_simple_chat(scenario_text):
    """Test parsing simple chat."""
    df = parse(scenario_text)

    assert len(df) == 3
    assert df.iloc[0]["sender"] == "Alice"
    assert df.iloc[1]["content"] == "selam canım ❤️"
    assert df.iloc[0]["timestamp"] == datetime(2023, 1, 1, 9, 0)
    assert list(df.columns) == WhatsAppParser.COLUMNS


def test_parse_multiline_message(sample_df):
    """Continuation lines are appended with a newline."""
    assert len(sample_df) == 8
    assert sample_df.iloc[3]["content"] == "bugün trafikte kaldım\nbu yüzden geç kaldım"


def test_parse_media_message(sample_df):
    """Test media message detection."""
    media = sample_df.iloc[5]
    assert media["type"] == "media"
    assert media["media_type"] == "image"
    assert media["emojis"] == []


def test_parse_system_message(sample_df):
    assert sample_df.iloc[7]["type"] == "system"


def test_emoji_extraction(sample_df):
    assert sample_df.iloc[1]["emojis"] == ["❤"]
    assert sample_df.iloc[2]["emojis"] == ["😂"]


def test_emoji_extraction_splits_modifiers():
    """Skin tones and joiner sequences yield one entry per code point."""
    df = parse("[01.01.23, 10:00] Alice: tamam \U0001F44D\U0001F3FD")
    assert df.iloc[0]["emojis"] == ["\U0001F44D", "\U0001F3FD"]

    family = parse("[01.01.23, 10:00] Alice: \U0001F468\u200d\U0001F469")
    assert family.iloc[0]["emojis"] == ["\U0001F468", "\U0001F469"]


def test_parse_empty_chat():
    """Test parsing empty chat."""
    with pytest.raises(EmptyInputError):
        parse("")
    with pytest.raises(EmptyInputError):
        parse("   \n  ")


def test_parse_unrecognized_format():
    with pytest.raises(UnrecognizedFormatError):
        parse("25/12/23, 09:15 - Alice: Android format\nsecond line")


def test_parse_errors_are_value_errors():
    """Callers catching ValueError keep working."""
    with pytest.raises(ValueError):
        parse("")
    assert issubclass(NoMessagesParsedError, ParseError)


def test_timestamp_parsing():
    """Test header variants."""
    test_cases = [
        ("[25.12.23, 09:15:30] Alice: Test", datetime(2023, 12, 25, 9, 15, 30)),
        ("[25.12.2023, 09:15] Alice: Test", datetime(2023, 12, 25, 9, 15)),
        ("[5.1.24 7:05] Alice: Test", datetime(2024, 1, 5, 7, 5)),
    ]

    for line, expected in test_cases:
        df = parse(line)
        assert len(df) == 1, f"Failed to parse: {line}"
        assert df.iloc[0]["timestamp"] == expected


def test_invalid_date_falls_back_to_now():
    before = datetime.now()
    df = parse("[31.02.23, 10:00] Alice: olmayan gün")
    assert df.iloc[0]["timestamp"] >= before


def test_output_sorted_by_timestamp():
    text = "\n".join([
        "[02.01.23, 10:00] Alice: ikinci",
        "[01.01.23, 10:00] Bob: birinci",
        "[02.01.23, 10:00] Bob: üçüncü",
    ])
    df = parse(text)

    assert df["timestamp"].is_monotonic_increasing
    assert df["content"].tolist() == ["birinci", "ikinci", "üçüncü"]
    assert df["msg_id"].tolist() == [1, 0, 2]


def test_message_count_matches_header_lines(sample_text):
    headers = [line for line in sample_text.split("\n") if line.startswith("[")]
    assert len(parse(sample_text)) == len(headers)


def test_progress_is_monotonic_and_ends_at_100(sample_text):
    seen = []
    WhatsAppParser(chunk_size=2).parse_text(sample_text, on_progress=seen.append)

    assert seen == sorted(seen)
    assert seen[-1] == 100


def test_encoding_repair():
    assert repair_encoding("gÃ¼zel Ã§ok") == "güzel çok"
    assert repair_encoding("temiz metin") == "temiz metin"


def test_parse_file_utf8(tmp_path, sample_text):
    path = tmp_path / "chat.txt"
    path.write_text(sample_text, encoding="utf-8")

    df = WhatsAppParser().parse_file(str(path))
    assert len(df) == 8


def test_validate_format(sample_text):
    valid, _ = validate_format(sample_text)
    assert valid

    valid, msg = validate_format("hello\nworld")
    assert not valid
    assert "No lines" in msg
