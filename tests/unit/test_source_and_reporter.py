"""CharSource pushback and ErrorReporter bookkeeping."""

import io

import pytest

from nupy.error_reporter import (
	ContractViolation,
	ErrorReporter,
	NupySyntaxError,
	get_error_reporter,
	panic,
	reset_error_reporter,
)
from nupy.source import CharSource


def test_read_and_unread():
	source = CharSource("ab")

	assert source.read() == "a"
	source.unread("a")
	assert source.read() == "a"
	assert source.read() == "b"
	assert source.read() == ""
	assert source.read() == ""


def test_unread_empty_is_noop():
	source = CharSource("x")
	source.unread("")

	assert source.read() == "x"


def test_second_pushback_is_a_contract_violation():
	source = CharSource("xy")
	source.unread("a")

	with pytest.raises(ContractViolation):
		source.unread("b")


def test_drain_line():
	source = CharSource(io.StringIO("rest of line\nnext"))
	source.drain_line()

	assert source.read() == "n"


def test_string_sources_are_not_interactive():
	assert CharSource("pass\n").interactive is False
	assert CharSource(io.StringIO("pass\n")).interactive is False


def test_reporter_writes_one_line_per_error():
	stream = io.StringIO()
	reporter = ErrorReporter(stream)
	error = reporter.report_error(NupySyntaxError, "expecting :, found 'x'", line=2, column=4)

	assert reporter.errors == [error]
	assert reporter.has_errors()
	assert stream.getvalue() == "**SYNTAX ERROR @ (2,4): expecting :, found 'x'\n"

	reporter.clear()
	assert not reporter.has_errors()


def test_reporter_quotes_registered_source():
	reporter = ErrorReporter(io.StringIO())
	reporter.register_source("prog.py", "x = 1\ny = 2\n")

	assert reporter.source_line("prog.py", 2) == "y = 2"
	assert reporter.source_line("prog.py", 9) is None
	assert reporter.source_line("other.py", 1) is None


def test_default_reporter_can_be_reset():
	first = get_error_reporter()
	second = reset_error_reporter()

	assert first is not second
	assert get_error_reporter() is second


def test_panic_raises():
	with pytest.raises(ContractViolation) as info:
		panic("queue is empty (TokenQueue.dequeue)")

	assert str(info.value) == "**PANIC: queue is empty (TokenQueue.dequeue)"
