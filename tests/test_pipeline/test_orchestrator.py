"""Tests for pipeline orchestrator."""

from __future__ import annotations

import json
import threading
from unittest.mock import MagicMock, patch

import pytest

from rezzy.pipeline.orchestrator import RezzyOrchestrator, RezzyResult, build_documents


@pytest.fixture
def resume_file(tmp_path, sample_resume_data):
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(sample_resume_data), encoding="utf-8")
    return path


class TestBuildDocuments:
    def test_resume_only(self, sample_resume):
        latex_resume, latex_cover_letter = build_documents(sample_resume)
        assert latex_resume[0] == "\\documentclass{resume}"
        assert latex_cover_letter is None

    def test_with_letter(self, sample_resume, sample_letter, letter_date):
        _, latex_cover_letter = build_documents(sample_resume, sample_letter, today=letter_date)
        assert latex_cover_letter[0] == "\\documentclass[12pt,letterpaper]{article}"


class TestRezzyOrchestrator:
    async def test_resume_only_needs_no_provider(self, resume_file):
        result = await RezzyOrchestrator().run(resume_source=str(resume_file))
        assert isinstance(result, RezzyResult)
        assert result.resume.basics.name == "Jane Doe"
        assert result.letter is None
        assert result.latex_cover_letter is None
        assert result.latex_resume[-1] == "\\end{document}"

    async def test_cover_letter_generated_with_job_description(
        self, mock_provider, resume_file, sample_jd_text, letter_date
    ):
        orchestrator = RezzyOrchestrator(mock_provider, today=letter_date)
        result = await orchestrator.run(
            resume_source=str(resume_file),
            job_description=sample_jd_text,
            prompt="Mention remote work",
        )

        mock_provider.generate_cover_letter.assert_awaited_once()
        args = mock_provider.generate_cover_letter.call_args.args
        assert args[0] == sample_jd_text
        assert args[1].basics.name == "Jane Doe"
        assert args[2] == "Mention remote work"
        assert result.letter.greeting == "Dear Hiring Manager,"
        assert any("March 5, 2024" in line for line in result.latex_cover_letter)
        assert result.metadata["provider"] == "mock"

    async def test_document_processed_by_provider(self, mock_provider, tmp_path):
        pdf = tmp_path / "resume.pdf"
        pdf.write_bytes(b"%PDF-1.4")
        result = await RezzyOrchestrator(mock_provider).run(document=pdf)
        mock_provider.process_document.assert_awaited_once_with(pdf)
        mock_provider.generate_cover_letter.assert_not_awaited()
        assert result.resume.basics.name == "Jane Doe"

    async def test_same_resume_feeds_both_documents(self, mock_provider, tmp_path, sample_jd_text):
        pdf = tmp_path / "resume.pdf"
        pdf.write_bytes(b"%PDF-1.4")
        result = await RezzyOrchestrator(mock_provider).run(document=pdf, job_description=sample_jd_text)
        assert "\\name{Jane Doe}" in result.latex_resume
        assert any("JANE DOE" in line for line in result.latex_cover_letter)

    @pytest.mark.parametrize(
        "kwargs",
        [{}, {"resume_source": "a.json", "document": "b.pdf"}],
    )
    async def test_exactly_one_source(self, mock_provider, kwargs):
        with pytest.raises(ValueError, match="exactly one"):
            await RezzyOrchestrator(mock_provider).run(**kwargs)

    async def test_job_description_without_provider(self, resume_file):
        with pytest.raises(ValueError, match="provider"):
            await RezzyOrchestrator().run(resume_source=str(resume_file), job_description="JD")

    async def test_on_phase_callback(self, resume_file):
        phases = []
        await RezzyOrchestrator().run(
            resume_source=str(resume_file),
            on_phase=lambda phase, detail: phases.append(phase),
        )
        assert phases == ["resume", "render", "done"]

    async def test_token_usage_recorded_when_provider_tracks_it(
        self, mock_provider, resume_file, sample_jd_text
    ):
        usage = {"input": 1200, "output": 300, "calls": [("claude-sonnet", 1200, 300)]}
        mock_provider.get_token_summary = MagicMock(return_value=usage)
        result = await RezzyOrchestrator(mock_provider).run(
            resume_source=str(resume_file), job_description=sample_jd_text
        )
        mock_provider.get_token_summary.assert_called_once_with()
        assert result.metadata["usage"] == usage

    async def test_no_usage_without_token_tracking(self, mock_provider, resume_file, sample_jd_text):
        result = await RezzyOrchestrator(mock_provider).run(
            resume_source=str(resume_file), job_description=sample_jd_text
        )
        assert "usage" not in result.metadata

    async def test_resume_fetch_runs_off_the_event_loop_thread(self, sample_resume):
        threads = []

        def fetch(source):
            threads.append(threading.get_ident())
            return sample_resume

        with patch("rezzy.pipeline.orchestrator.fetch_resume", side_effect=fetch):
            resume = await RezzyOrchestrator().load_resume(resume_source="https://example.com/resume.json")

        assert resume is sample_resume
        assert threads and threads[0] != threading.get_ident()
