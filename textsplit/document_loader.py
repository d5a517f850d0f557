import csv
from pathlib import Path
from typing import List

import markdown
import pypdf
from bs4 import BeautifulSoup
from pypdf.errors import PyPdfError


class DocumentLoadError(ValueError):
    """Raised when a source file cannot be read as text."""


class DocumentLoader:
    """Handles loading text to split from different document types."""

    def load_document(self, file_path: str) -> str:
        """
        Load a document based on its extension.

        Args:
            file_path (str): Path to the document

        Returns:
            str: Plain-text content of the document

        Raises:
            DocumentLoadError: if the file is missing, unsupported or unreadable
        """
        path = Path(file_path)
        if not path.is_file():
            raise DocumentLoadError(f"File does not exist: {file_path}")

        suffix = path.suffix.lower()

        if suffix == '.txt':
            return self._load_text_file(path)
        elif suffix == '.md':
            return self._load_markdown_file(path)
        elif suffix == '.pdf':
            return self._load_pdf_file(path)
        elif suffix == '.csv':
            return self._load_csv_file(path)
        raise DocumentLoadError(f"Unsupported file type: {suffix or '(none)'}")

    def _load_text_file(self, path: Path) -> str:
        """Load a plain text file."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise DocumentLoadError(f"Could not decode text file: {e}") from e

    def _load_markdown_file(self, path: Path) -> str:
        """Render markdown and strip the markup back down to text."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                md_content = f.read()
        except UnicodeDecodeError as e:
            raise DocumentLoadError(f"Could not decode markdown file: {e}") from e

        soup = BeautifulSoup(markdown.markdown(md_content), "html.parser")
        # Raw HTML passes through markdown untouched
        for tag in soup(["script", "style"]):
            tag.decompose()
        return soup.get_text().strip()

    def _load_pdf_file(self, path: Path) -> str:
        """Load content from a PDF file."""
        try:
            with open(path, 'rb') as f:
                reader = pypdf.PdfReader(f)
                text = ""
                for page in reader.pages:
                    text += page.extract_text() or ""
                return text
        except PyPdfError as e:
            raise DocumentLoadError(f"Could not parse PDF file: {e}") from e

    def _load_csv_file(self, path: Path) -> str:
        """Load content from a CSV file."""
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                reader = csv.reader(f)
                rows = []
                for row in reader:
                    rows.append(', '.join(row))
                return '\n'.join(rows)
        except UnicodeDecodeError as e:
            raise DocumentLoadError(f"Could not decode CSV file: {e}") from e
        except csv.Error as e:
            raise DocumentLoadError(f"Could not parse CSV file: {e}") from e

    def get_supported_extensions(self) -> List[str]:
        """Get list of supported document extensions."""
        return ['.txt', '.md', '.pdf', '.csv']
