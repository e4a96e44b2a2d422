"""Tests for the single-slot error reporter."""

from yt_transcript_client.reporter import ErrorReporter


class TestErrorReporter:
    def test_new_message_replaces_old(self):
        reporter = ErrorReporter()
        reporter.present("first")
        reporter.present("second")
        assert reporter.message == "second"

    def test_clear(self):
        reporter = ErrorReporter()
        reporter.present("oops")
        reporter.clear()
        assert reporter.message is None

    def test_sink_sees_each_change(self):
        seen = []
        reporter = ErrorReporter(sink=seen.append)
        reporter.clear()
        reporter.present("oops")
        reporter.clear()
        assert seen == ["oops", None]
