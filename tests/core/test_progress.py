#!/usr/bin/env python3
"""
Tests for ProgressReporter.
"""

import unittest

from ibadmin.core import ProgressReporter


class TestProgressReporter(unittest.TestCase):
    """Test cases for ProgressReporter."""

    def test_disabled_below_progress_level(self):
        reporter = ProgressReporter(total_items=10, report_every=1, verbosity=1)
        self.assertFalse(reporter.enabled)
        self.assertIsNone(reporter.update(5))

    def test_reports_on_interval_and_final_item(self):
        reporter = ProgressReporter(total_items=7, report_every=3, verbosity=2)
        reported = [n for n in range(1, 8) if reporter.should_report(n)]
        self.assertEqual(reported, [3, 6, 7])

    def test_format_with_total(self):
        reporter = ProgressReporter(total_items=3, report_every=1)
        self.assertEqual(
            reporter.format_status(1),
            "processed record [#1] of [3], [33%] complete",
        )

    def test_format_without_total(self):
        reporter = ProgressReporter(report_every=2500)
        self.assertEqual(reporter.format_status(2500), "processed record [#2500]")

    def test_update_logs_status(self):
        reporter = ProgressReporter(total_items=4, report_every=2, verbosity=2)

        with self.assertLogs("ibadmin.core.progress", level="INFO") as captured:
            self.assertIsNone(reporter.update(1))
            message = reporter.update(2)

        self.assertEqual(message, "processed record [#2] of [4], [50%] complete")
        self.assertEqual(len(captured.output), 1)
        self.assertIn("------ [02]:  processed record [#2]", captured.output[0])

    def test_interval_is_at_least_one(self):
        reporter = ProgressReporter(report_every=0)
        self.assertEqual(reporter.report_every, 1)


if __name__ == "__main__":
    unittest.main()
