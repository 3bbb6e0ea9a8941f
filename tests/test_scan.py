import io
import logging

import pytest

from furthest_point import ErrorKind, PointKind, ScanStatus, TextCursor, find_max

INT2 = PointKind.from_names('int', 2)


def test_finds_point_with_largest_norm():
    result = find_max('(1 2) (3 4) (0 0)', INT2)
    assert result.found
    assert result.status is ScanStatus.COMPLETE
    assert str(result.maximum) == '( 3 4 )'
    assert result.records == 3
    assert result.skipped == 0
    assert result.events == []


def test_skips_garbage_to_end_of_line():
    result = find_max('(1 1) garbage line here\n(5 0)', INT2)
    assert result.found
    assert str(result.maximum) == '( 5 0 )'
    assert result.records == 2
    assert result.skipped == 1
    assert [event.kind for event in result.events] == [ErrorKind.INVALID_SYMBOL]


def test_empty_source_has_no_result():
    result = find_max('', INT2, name='empty.txt')
    assert not result.found
    assert result.maximum is None
    assert result.status is ScanStatus.FIRST_RECORD_FAILED
    assert result.error.kind is ErrorKind.EMPTY_STREAM
    assert result.source == 'empty.txt'


def test_malformed_first_record_aborts_scan():
    result = find_max('(1 2 3)\n(9 9)', INT2)
    assert not result.found
    assert result.status is ScanStatus.FIRST_RECORD_FAILED
    assert result.error.kind is ErrorKind.INVALID_SYMBOL
    assert result.records == 0


def test_malformed_record_mid_stream_is_skipped():
    result = find_max('(1 2)\n(1 2 3)\n(2 2)', INT2)
    assert str(result.maximum) == '( 2 2 )'
    assert result.skipped == 1
    assert result.status is ScanStatus.COMPLETE


def test_ties_keep_first_seen_point():
    result = find_max('(1 0) (0 1)', INT2)
    assert str(result.maximum) == '( 1 0 )'


def test_negative_components_count_by_magnitude():
    result = find_max('(1 1)\n(-4 0)\n(2 2)', INT2)
    assert str(result.maximum) == '( -4 0 )'


def test_garbage_on_last_line_without_newline_ends_cleanly():
    result = find_max('(1 1)\n(2 2) trailing junk', INT2)
    assert result.status is ScanStatus.COMPLETE
    assert str(result.maximum) == '( 2 2 )'
    assert result.skipped == 1


def test_records_may_span_lines():
    kind = PointKind.from_names('double', 3)
    result = find_max('(\n 1.5\n 0 0\n)\n( 0 -2.5\n 0 )\n', kind)
    assert result.maximum.values() == (0.0, -2.5, 0.0)


class _FailingStream(io.StringIO):
    def __init__(self, text, fail_after):
        super().__init__(text)
        self.calls = 0
        self.fail_after = fail_after

    def readline(self, *args):
        self.calls += 1
        if self.calls > self.fail_after:
            raise OSError('device went away')
        return super().readline(*args)


def test_stream_error_aborts_and_keeps_partial_maximum():
    stream = _FailingStream('(1 1)\n(3 3)\n(9 9)\n', fail_after=2)
    result = find_max(TextCursor(stream, name='flaky'), INT2)
    assert result.status is ScanStatus.ABORTED
    assert not result.found
    assert result.error.kind is ErrorKind.UNRECOVERABLE
    assert 'device went away' in result.error.description
    assert str(result.maximum) == '( 3 3 )'


def test_failures_are_logged_with_source_and_position(caplog):
    with caplog.at_level(logging.WARNING, logger='furthest_point.scan'):
        find_max('(1 1) bad\n(2 2)', INT2, name='points.txt')
    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 1
    assert 'ignoring invalid element (invalid_symbol)' in messages[0]
    assert 'reading from points.txt at position 7 [line 1, col 7]' in messages[0]
    assert caplog.records[0].levelno == logging.WARNING


def test_first_record_failure_is_logged_as_error(caplog):
    with caplog.at_level(logging.ERROR, logger='furthest_point.scan'):
        find_max('', INT2, name='empty.txt')
    assert any(
        'unable to read first element (empty_stream)' in record.getMessage()
        for record in caplog.records
    )


@pytest.mark.parametrize(
    'text, expected',
    [
        ('(1) (-7) (5) (0)', '( -7 )'),
        ('(0)', '( 0 )'),
    ],
)
def test_one_dimensional_sources(text, expected):
    result = find_max(text, PointKind.from_names('int', 1))
    assert str(result.maximum) == expected
