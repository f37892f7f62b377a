"""Tests for pydantic models."""

from rezzy.models.cover_letter import CoverLetterPayload
from rezzy.models.resume import ResumeDocument


class TestResumeDocument:
    def test_camel_case_aliases(self, sample_resume):
        assert sample_resume.work[0].start_date == "2021-03"
        assert sample_resume.education[0].study_type == "Bachelor"

    def test_all_sections_optional(self):
        doc = ResumeDocument.model_validate({})
        assert doc.basics.name is None
        assert doc.work == []
        assert doc.interests == []

    def test_explicit_nulls_treated_as_absent(self):
        doc = ResumeDocument.model_validate({"basics": {"name": "A", "profiles": None}, "work": None})
        assert doc.basics.profiles == []
        assert doc.work == []

    def test_unknown_keys_kept(self):
        doc = ResumeDocument.model_validate({"basics": {"name": "A"}, "projects": [{"name": "P"}]})
        assert doc.to_json_dict()["projects"] == [{"name": "P"}]

    def test_numbers_coerced_to_str(self):
        doc = ResumeDocument.model_validate({"education": [{"startDate": 2014, "score": 3.9}]})
        assert doc.education[0].start_date == "2014"
        assert doc.education[0].score == "3.9"

    def test_to_json_dict_uses_aliases_and_drops_none(self, sample_resume_data):
        doc = ResumeDocument.model_validate(sample_resume_data)
        dumped = doc.to_json_dict()
        assert dumped["work"][0]["startDate"] == "2021-03"
        assert "url" not in dumped["work"][0]


class TestCoverLetterPayload:
    def test_from_camel_case(self):
        letter = CoverLetterPayload.model_validate({
            "greeting": "Hi",
            "companyStreetAddress": "1 Main",
            "companyZipCode": "12345",
            "letterBody": "Body",
        })
        assert letter.company_street_address == "1 Main"
        assert letter.company_zip_code == "12345"
        assert letter.company_city == ""

    def test_null_and_numbers(self):
        letter = CoverLetterPayload.model_validate({"companyCity": None, "companyZipCode": 94105})
        assert letter.company_city == ""
        assert letter.company_zip_code == "94105"
