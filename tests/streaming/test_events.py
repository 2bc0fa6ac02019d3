"""Unit tests for SSE payload decoding."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import logging

from report_tables.streaming.events import EventDecoder, decode_events, parse_event_line


class TestParseEventLine:

    def test_content(self):
        event = parse_event_line('data: {"content": "| A |\\n"}')
        assert event.content == "| A |\n"
        assert event.has_content is True

    def test_balance(self):
        event = parse_event_line('data: {"balance": {"is_available": true}}')
        assert event.balance == {"is_available": True}
        assert event.has_content is False

    def test_raw_data_alias(self):
        event = parse_event_line('data: {"rawData": [{"BranchID": "1"}]}')
        assert event.raw_data == [{"BranchID": "1"}]

    def test_non_data_line(self):
        assert parse_event_line(": keep-alive") is None
        assert parse_event_line("") is None

    def test_bad_json_logged(self, caplog):
        with caplog.at_level(logging.ERROR):
            assert parse_event_line("data: {not json") is None
        assert "Error parsing SSE message" in caplog.text

    def test_non_object_payload(self):
        assert parse_event_line("data: [1, 2]") is None


class TestEventDecoder:

    def test_line_split_across_reads(self):
        decoder = EventDecoder()
        assert not decoder.feed('data: {"cont')
        events = decoder.feed('ent": "x"}\n\n')
        assert [e.content for e in events] == ["x"]

    def test_close_flushes_last_line(self):
        decoder = EventDecoder()
        assert not decoder.feed('data: {"content": "tail"}')
        assert [e.content for e in decoder.close()] == ["tail"]
        assert not decoder.close()

    def test_reset_drops_partial_line(self):
        decoder = EventDecoder()
        decoder.feed('data: {"content": "st')
        decoder.reset()
        assert not decoder.close()

    def test_decode_events(self):
        raw = 'data: {"content": "a"}\n\ndata: {"content": "b"}'
        assert [e.content for e in decode_events(raw)] == ["a", "b"]
