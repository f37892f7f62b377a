"""Tests for resume and job description loading."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import httpx
import pytest

from rezzy.exceptions import ResumeFetchError
from rezzy.parsers.job_description import clean_job_description, load_job_description
from rezzy.parsers.resume_parser import fetch_resume, load_resume_file, parse_resume_json


def _response(status: int, payload: dict | None = None) -> httpx.Response:
    request = httpx.Request("GET", "https://example.com/resume.json")
    return httpx.Response(status, json=payload or {}, request=request)


class TestFetchResume:
    def test_local_file(self, tmp_path, sample_resume_data):
        path = tmp_path / "resume.json"
        path.write_text(json.dumps(sample_resume_data), encoding="utf-8")
        resume = fetch_resume(str(path))
        assert resume.basics.name == "Jane Doe"

    def test_url(self, sample_resume_data):
        with patch("rezzy.parsers.resume_parser.httpx.get") as mock_get:
            mock_get.return_value = _response(200, sample_resume_data)
            resume = fetch_resume("https://example.com/resume.json")
        assert resume.basics.name == "Jane Doe"
        mock_get.assert_called_once_with(
            "https://example.com/resume.json", timeout=30.0, follow_redirects=True
        )

    def test_404_raises(self):
        with patch("rezzy.parsers.resume_parser.httpx.get", return_value=_response(404)):
            with pytest.raises(ResumeFetchError, match="404"):
                fetch_resume("https://example.com/missing.json")

    def test_transport_error_raises(self):
        with patch(
            "rezzy.parsers.resume_parser.httpx.get",
            side_effect=httpx.ConnectError("refused"),
        ):
            with pytest.raises(ResumeFetchError):
                fetch_resume("http://localhost:1/resume.json")

    def test_malformed_json_propagates(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            fetch_resume(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            fetch_resume(str(tmp_path / "nope.json"))

    def test_load_resume_file(self, tmp_path):
        path = tmp_path / "resume.json"
        path.write_text('{"basics": {"name": "B"}}', encoding="utf-8")
        assert load_resume_file(path).basics.name == "B"

    def test_local_path_reads_through_load_resume_file(self, tmp_path):
        path = tmp_path / "wrapped.json"
        path.write_text('{"resume": {"basics": {"name": "C"}}}', encoding="utf-8")
        with patch(
            "rezzy.parsers.resume_parser.load_resume_file", wraps=load_resume_file
        ) as loader:
            resume = fetch_resume(str(path))
        loader.assert_called_once_with(str(path))
        assert resume.basics.name == "C"


class TestParseResumeJson:
    def test_unwraps_resume_object(self):
        resume = parse_resume_json({"resume": {"basics": {"name": "A"}}})
        assert resume.basics.name == "A"

    def test_plain_document(self):
        assert parse_resume_json({"basics": {"name": "A"}}).basics.name == "A"


class TestJobDescription:
    def test_clean_collapses_whitespace(self):
        text = "Title\n\n\n\nRole:   build   things  \n\t- item"
        assert clean_job_description(text) == "Title\n\nRole: build things\n- item"

    def test_load_text_file(self, tmp_path):
        path = tmp_path / "jd.txt"
        path.write_text("  Engineer  \n\n\n\nPython", encoding="utf-8")
        assert load_job_description(path) == "Engineer\n\nPython"

    def test_load_pdf_uses_text_extraction(self, tmp_path):
        path = tmp_path / "jd.pdf"
        path.write_bytes(b"%PDF-1.4")
        with patch(
            "rezzy.parsers.job_description.extract_pdf_text",
            return_value="PDF   text",
        ) as mock_extract:
            assert load_job_description(path) == "PDF text"
        mock_extract.assert_called_once_with(path)


class TestExtractPdfText:
    def test_joins_pages(self, tmp_path):
        from rezzy.parsers.resume_parser import extract_pdf_text

        page_one = MagicMock()
        page_one.get_text.return_value = "Page one"
        page_two = MagicMock()
        page_two.get_text.return_value = "Page two"
        doc = MagicMock()
        doc.__iter__.return_value = iter([page_one, page_two])

        with patch("fitz.open", return_value=doc):
            text = extract_pdf_text(tmp_path / "resume.pdf")

        assert text == "Page one\nPage two"
        doc.close.assert_called_once()
