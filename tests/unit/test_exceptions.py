"""Unit tests for the exception hierarchy."""

import pytest

from docxdiff.exceptions import (
    DependencyError,
    DocumentNotFoundError,
    DocxDiffError,
    FileError,
    MalformedInputError,
    ParsingError,
    RenderingError,
    ValidationError,
)


@pytest.mark.unit
class TestExceptionHierarchy:
    """Tests for the exception classes."""

    @pytest.mark.parametrize(
        "error",
        [
            ValidationError("bad"),
            FileError("io"),
            DocumentNotFoundError("missing.docx"),
            ParsingError("broken"),
            MalformedInputError("no cells"),
            RenderingError("oops"),
            DependencyError("docx", [("mammoth", ">=1.6.0")]),
        ],
    )
    def test_all_derive_from_base(self, error):
        """Test that every error is a DocxDiffError."""
        assert isinstance(error, DocxDiffError)

    def test_not_found_is_file_error(self):
        """Test the file error branch."""
        error = DocumentNotFoundError("missing.docx")
        assert isinstance(error, FileError)
        assert error.file_path == "missing.docx"
        assert str(error) == "File not found: missing.docx"

    def test_original_error_kept(self):
        """Test that wrapped exceptions are kept."""
        cause = ValueError("inner")
        error = ParsingError("outer", parsing_stage="docx_to_html", original_error=cause)
        assert error.original_error is cause
        assert error.parsing_stage == "docx_to_html"

    def test_malformed_location_prefix(self):
        """Test that the location prefixes the message."""
        error = MalformedInputError("row has no cells", location="source table 1, row 2")
        assert str(error) == "source table 1, row 2: row has no cells"
        assert error.location == "source table 1, row 2"


@pytest.mark.unit
class TestDependencyError:
    """Tests for DependencyError message generation."""

    def test_missing_package_message(self):
        """Test the generated message and install command."""
        error = DependencyError("docx", [("mammoth", ">=1.6.0")])
        assert "DOCX input requires the following packages: 'mammoth>=1.6.0'" in str(error)
        assert error.install_command == 'pip install --upgrade "mammoth>=1.6.0"'
        assert "Install with:" in str(error)

    def test_version_mismatch_message(self):
        """Test mismatches are reported with the installed version."""
        error = DependencyError("html", [], version_mismatches=[("beautifulsoup4", ">=4.12.0", "4.9.3")])
        assert "requires >=4.12.0, but 4.9.3 is installed" in str(error)
        assert "beautifulsoup4>=4.12.0" in error.install_command

    def test_custom_message(self):
        """Test that an explicit message is used verbatim."""
        error = DependencyError("html", [("lxml", "")], message="lxml missing")
        assert str(error) == "lxml missing"
