"""
Collector tests: verbosity gate, line rendering, header flags, sinks and
write failures.

Run:
  python -m pytest fanlog/tests/test_collector.py -v
"""
from __future__ import annotations

import io
import os
import sys
import unittest

from fanlog.core.exceptions import SinkWriteError
from fanlog.core.flags import Flag, MaskOp
from fanlog.core.severity import Severity
from fanlog.receivers.collector import Collector
from fanlog.receivers.location import CallerLocation

MESSAGE = "collector\n"

# (severity, verbosity, flags, prefix, expected substring, expected length or None)
CASES = [
    (Severity.EMERGENCY, Severity.EMERGENCY, 0, "", "[EMERGENCY] " + MESSAGE, 22),
    (Severity.EMERGENCY, Severity.ERROR, 0, "", "[EMERGENCY] " + MESSAGE, 22),
    (Severity.DEBUG, Severity.ERROR, 0, "", "", 0),
    (Severity.ERROR, Severity.ERROR, 0, "", "[ERROR] " + MESSAGE, 18),
    (Severity.ERROR, Severity.ERROR, 0, "Prefix", "Prefix[ERROR] " + MESSAGE, 24),
    (Severity.ERROR, Severity.ERROR, Flag.SHORTFILE, "", "test_collector.py", None),
]


class _ByteSink:
    """Duck-typed byte sink: only write()."""

    def __init__(self) -> None:
        self.chunks: list[bytes] = []

    def write(self, data: bytes) -> int:
        self.chunks.append(data)
        return len(data)


class TestCollectorRendering(unittest.TestCase):
    def setUp(self) -> None:
        self.sink = io.StringIO()
        self.collector = Collector(self.sink, Severity.ERROR, "", 0)

    def _take(self) -> str:
        value = self.sink.getvalue()
        self.sink.seek(0)
        self.sink.truncate()
        return value

    def test_table_log_logf_logln(self) -> None:
        for severity, verbosity, flags, prefix, match, length in CASES:
            with self.subTest(severity=severity, verbosity=verbosity, flags=flags, prefix=prefix):
                self.collector.set_verbosity(verbosity)
                self.collector.set_prefix(prefix)
                self.collector.set_flags(flags, MaskOp.NONE)

                self.collector.log(severity, 1, MESSAGE)
                result = self._take()
                self.assertIn(match, result)
                if length is not None:
                    self.assertEqual(len(result), length)

                self.collector.logf(severity, 1, "%s", MESSAGE)
                result = self._take()
                self.assertIn(match, result)
                if length is not None:
                    self.assertEqual(len(result), length)

                self.collector.logln(severity, 1, MESSAGE)
                result = self._take()[:-1]
                self.assertIn(match, result)
                if length is not None:
                    self.assertEqual(len(result), length)

    def test_exact_error_line(self) -> None:
        self.collector.log(Severity.ERROR, 1, MESSAGE)
        self.assertEqual(self.sink.getvalue(), "[ERROR] collector\n")

    def test_boundary_equal_passes_one_looser_drops(self) -> None:
        for verbosity in Severity:
            with self.subTest(verbosity=verbosity):
                self.collector.set_verbosity(verbosity)
                self.collector.log(verbosity, 1, "x")
                self.assertEqual(self._take(), f"[{verbosity.name}] x\n")
                if verbosity < Severity.DEBUG:
                    self.collector.log(verbosity + 1, 1, "x")
                    self.assertEqual(self._take(), "")

    def test_log_spaces_only_between_non_strings(self) -> None:
        self.collector.log(Severity.ERROR, 1, "a", "b", 1, 2, "c")
        self.assertEqual(self.sink.getvalue(), "[ERROR] ab1 2c\n")

    def test_logln_space_joins_and_keeps_single_newline(self) -> None:
        self.collector.logln(Severity.ERROR, 1, "a", 1, None)
        self.assertEqual(self.sink.getvalue(), "[ERROR] a 1 None\n")

    def test_logf_printf_style(self) -> None:
        self.collector.logf(Severity.ERROR, 1, "%s=%d (%.1f%%)", "load", 3, 99.5)
        self.assertEqual(self.sink.getvalue(), "[ERROR] load=3 (99.5%)\n")

    def test_dropped_message_has_no_side_effect(self) -> None:
        # Bad format args are never evaluated below the gate.
        self.collector.logf(Severity.DEBUG, 1, "%d", "not a number")
        self.assertEqual(self.sink.getvalue(), "")


class TestCollectorHeader(unittest.TestCase):
    # 2023-11-14T22:13:20.5Z
    NOW = 1_700_000_000.5

    def _collector(self, flags: int, prefix: str = "") -> tuple[Collector, io.StringIO]:
        sink = io.StringIO()
        return Collector(sink, Severity.DEBUG, prefix, flags, clock=lambda: self.NOW), sink

    def test_date_time_utc(self) -> None:
        collector, sink = self._collector(Flag.STD | Flag.UTC)
        collector.output(1, "hi")
        self.assertEqual(sink.getvalue(), "2023/11/14 22:13:20 hi\n")

    def test_microseconds_implies_time(self) -> None:
        collector, sink = self._collector(Flag.MICROSECONDS | Flag.UTC)
        collector.output(1, "hi")
        self.assertEqual(sink.getvalue(), "22:13:20.500000 hi\n")

    def test_prefix_before_header_unless_msgprefix(self) -> None:
        collector, sink = self._collector(Flag.DATE | Flag.UTC, prefix="app: ")
        collector.output(1, "hi")
        self.assertEqual(sink.getvalue(), "app: 2023/11/14 hi\n")

        collector.set_flags(Flag.MSGPREFIX, MaskOp.OR)
        sink.seek(0)
        sink.truncate()
        collector.output(1, "hi")
        self.assertEqual(sink.getvalue(), "2023/11/14 app: hi\n")

    def test_shortfile_names_caller_line(self) -> None:
        collector, sink = self._collector(Flag.SHORTFILE)
        line = sys._getframe().f_lineno + 1
        collector.log(Severity.ERROR, 1, "x")
        self.assertEqual(sink.getvalue(), f"test_collector.py:{line}: [ERROR] x\n")

    def test_longfile_uses_full_path(self) -> None:
        collector, sink = self._collector(Flag.LONGFILE)
        line = sys._getframe().f_lineno + 1
        collector.output(1, "x")
        value = sink.getvalue()
        self.assertTrue(value.endswith(f"test_collector.py:{line}: x\n"))
        self.assertTrue(os.path.isabs(value.rsplit(":", 2)[0]))

    def test_shortfile_wins_over_longfile(self) -> None:
        collector, sink = self._collector(Flag.LONGFILE | Flag.SHORTFILE)
        collector.output(1, "x")
        self.assertTrue(sink.getvalue().startswith("test_collector.py:"))

    def test_explicit_location_is_used_as_is(self) -> None:
        collector, sink = self._collector(Flag.SHORTFILE)
        collector.log(Severity.INFO, CallerLocation("/srv/app/jobs.py", 42), "x")
        self.assertEqual(sink.getvalue(), "jobs.py:42: [INFO] x\n")

    def test_too_deep_reports_unknown_location(self) -> None:
        collector, sink = self._collector(Flag.SHORTFILE)
        collector.output(10_000, "x")
        self.assertEqual(sink.getvalue(), "???:0: x\n")


class TestCollectorSinks(unittest.TestCase):
    def test_byte_sink_receives_utf8(self) -> None:
        sink = _ByteSink()
        Collector(sink, Severity.DEBUG).log(Severity.INFO, 1, "héllo")
        self.assertEqual(sink.chunks, ["[INFO] héllo\n".encode("utf-8")])

    def test_bytesio_sink(self) -> None:
        sink = io.BytesIO()
        Collector(sink, Severity.DEBUG).log(Severity.INFO, 1, "x")
        self.assertEqual(sink.getvalue(), b"[INFO] x\n")

    def test_set_output_swaps_sink(self) -> None:
        first, second = io.StringIO(), io.StringIO()
        collector = Collector(first, Severity.DEBUG)
        collector.log(Severity.INFO, 1, "one")
        collector.set_output(second)
        collector.log(Severity.INFO, 1, "two")
        self.assertEqual(first.getvalue(), "[INFO] one\n")
        self.assertEqual(second.getvalue(), "[INFO] two\n")
        self.assertIs(collector.sink, second)

    def test_output_raises_on_closed_sink(self) -> None:
        sink = io.StringIO()
        sink.close()
        collector = Collector(sink, Severity.DEBUG)
        with self.assertRaises(SinkWriteError) as ctx:
            collector.output(1, "x")
        self.assertIsInstance(ctx.exception.cause, ValueError)
        self.assertEqual(ctx.exception.code, "SINK_WRITE_ERROR")

    def test_log_reports_write_failure_without_raising(self) -> None:
        sink = io.StringIO()
        sink.close()
        collector = Collector(sink, Severity.DEBUG)
        with self.assertLogs("fanlog.receivers.collector", level="WARNING") as logs:
            collector.log(Severity.ERROR, 1, "x")
            collector.logf(Severity.ERROR, 1, "%s", "x")
            collector.logln(Severity.ERROR, 1, "x")
        self.assertEqual(len(logs.records), 3)
        self.assertIn("Dropped ERROR message", logs.output[0])


class TestCollectorSettings(unittest.TestCase):
    def test_accessors(self) -> None:
        collector = Collector(io.StringIO(), Severity.WARNING, "p", Flag.STD)
        self.assertIs(collector.verbosity, Severity.WARNING)
        self.assertEqual(collector.prefix, "p")
        self.assertEqual(collector.flags, Flag.DATE | Flag.TIME)

    def test_set_flags_mask_ops(self) -> None:
        collector = Collector(io.StringIO(), Severity.DEBUG, "", Flag.DATE | Flag.TIME)
        collector.set_flags(Flag.TIME, MaskOp.ANDNOT)
        self.assertEqual(collector.flags, Flag.DATE)
        collector.set_flags(Flag.SHORTFILE, MaskOp.OR)
        self.assertEqual(collector.flags, Flag.DATE | Flag.SHORTFILE)
        collector.set_flags(Flag.UTC)
        self.assertEqual(collector.flags, Flag.UTC)

    def test_severity_out_of_range_is_not_guarded(self) -> None:
        collector = Collector(io.StringIO(), Severity.DEBUG)
        with self.assertRaises(IndexError):
            collector.log(-100, 1, "x")


if __name__ == "__main__":
    unittest.main()
