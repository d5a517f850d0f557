import logging
import os
import sys
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from textsplit.logging_setup import level_from_name, setup_logging


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.log_dir = Path(self._tmp.name) / "logs"

    def tearDown(self):
        root = logging.getLogger()
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        self._tmp.cleanup()

    def handlers(self):
        root = logging.getLogger()
        console = [h for h in root.handlers if not isinstance(h, RotatingFileHandler)]
        files = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
        return console, files

    def test_console_goes_to_stderr_at_warning(self):
        setup_logging(self.log_dir, level=logging.INFO, force=True)
        console, files = self.handlers()
        self.assertEqual(len(console), 1)
        self.assertEqual(len(files), 1)
        self.assertIs(console[0].stream, sys.stderr)
        self.assertEqual(console[0].level, logging.WARNING)
        self.assertEqual(files[0].level, logging.INFO)
        self.assertEqual(logging.getLogger().level, logging.INFO)
        self.assertTrue((self.log_dir / "textsplit.log").exists())

    def test_verbose_console(self):
        setup_logging(self.log_dir, level=logging.DEBUG, console_level=logging.DEBUG, force=True)
        console, _ = self.handlers()
        self.assertEqual(console[0].level, logging.DEBUG)

    def test_file_records_chunking_debug(self):
        setup_logging(self.log_dir, level=logging.DEBUG, force=True)
        from textsplit.chunking import split_text_into_chunks
        split_text_into_chunks("hello world", 5)
        for h in logging.getLogger().handlers:
            h.flush()
        content = (self.log_dir / "textsplit.log").read_text(encoding="utf-8")
        self.assertIn("textsplit.chunking", content)
        self.assertIn("into 2 chunks", content)

    def test_not_reconfigured_without_force(self):
        setup_logging(self.log_dir, force=True)
        setup_logging(self.log_dir)
        console, files = self.handlers()
        self.assertEqual((len(console), len(files)), (1, 1))


class TestLevelFromName(unittest.TestCase):
    def test_names(self):
        self.assertEqual(level_from_name("debug"), logging.DEBUG)
        self.assertEqual(level_from_name("INFO"), logging.INFO)
        self.assertEqual(level_from_name("nonsense"), logging.WARNING)


if __name__ == "__main__":
    unittest.main()
