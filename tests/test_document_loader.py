
import os
import sys
import tempfile
import unittest
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from textsplit.document_loader import DocumentLoader, DocumentLoadError

class TestDocumentLoader(unittest.TestCase):
    """Tests for the DocumentLoader class."""

    def setUp(self):
        """Set up a DocumentLoader instance and create dummy files."""
        self.loader = DocumentLoader()
        self._tmp = tempfile.TemporaryDirectory()
        self.docs_dir = Path(self._tmp.name)

        (self.docs_dir / "test_doc.txt").write_text("This is a test txt file.", encoding="utf-8")
        (self.docs_dir / "test_doc.md").write_text(
            "# Title\n\nSome *emphasis* & a [link](http://example.com).", encoding="utf-8"
        )
        (self.docs_dir / "test_doc.csv").write_text("col1,col2\nval1,val2", encoding="utf-8")
        (self.docs_dir / "corrupted.pdf").write_text("this is not a pdf", encoding="utf-8")

    def tearDown(self):
        self._tmp.cleanup()

    def test_load_txt_file(self):
        """Test loading a .txt file."""
        content = self.loader.load_document(str(self.docs_dir / "test_doc.txt"))
        self.assertEqual(content, "This is a test txt file.")

    def test_load_md_file(self):
        """Markdown is rendered and stripped back to plain text."""
        content = self.loader.load_document(str(self.docs_dir / "test_doc.md"))
        self.assertEqual(content, "Title\nSome emphasis & a link.")

    def test_load_csv_file(self):
        """Test loading a .csv file."""
        content = self.loader.load_document(str(self.docs_dir / "test_doc.csv"))
        self.assertEqual(content, "col1, col2\nval1, val2")

    def test_unsupported_file_type(self):
        (self.docs_dir / "test.unsupported").write_text("test", encoding="utf-8")
        with self.assertRaises(DocumentLoadError):
            self.loader.load_document(str(self.docs_dir / "test.unsupported"))

    def test_corrupted_pdf_file(self):
        with self.assertRaises(DocumentLoadError):
            self.loader.load_document(str(self.docs_dir / "corrupted.pdf"))

    def test_file_not_found(self):
        with self.assertRaises(DocumentLoadError):
            self.loader.load_document(str(self.docs_dir / "non_existent_file.txt"))

    def test_md_drops_script_and_style(self):
        (self.docs_dir / "styled.md").write_text("<style>p{color:red}</style>hi", encoding="utf-8")
        content = self.loader.load_document(str(self.docs_dir / "styled.md"))
        self.assertEqual(content, "hi")

    def test_non_utf8_md_file(self):
        (self.docs_dir / "latin1.md").write_bytes(b"caf\xe9 time")
        with self.assertRaises(DocumentLoadError):
            self.loader.load_document(str(self.docs_dir / "latin1.md"))

    def test_non_utf8_csv_file(self):
        (self.docs_dir / "latin1.csv").write_bytes(b"name,drink\nana,caf\xe9\n")
        with self.assertRaises(DocumentLoadError):
            self.loader.load_document(str(self.docs_dir / "latin1.csv"))

    def test_non_utf8_txt_file(self):
        (self.docs_dir / "latin1.txt").write_bytes(b"caf\xe9 time")
        with self.assertRaises(DocumentLoadError):
            self.loader.load_document(str(self.docs_dir / "latin1.txt"))

    def test_load_error_is_value_error(self):
        self.assertTrue(issubclass(DocumentLoadError, ValueError))

    def test_supported_extensions(self):
        self.assertEqual(self.loader.get_supported_extensions(), ['.txt', '.md', '.pdf', '.csv'])

if __name__ == "__main__":
    unittest.main()
