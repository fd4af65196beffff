"""Tests for job input and prediction result models."""
from legitmate.models import JobInput, PredictionResult, Verdict


class TestJobInput:
    """Tests for JobInput dataclass."""

    def test_create_job_input(self):
        job = JobInput(title="Engineer", company="Acme", description="Build things")

        assert job.title == "Engineer"
        assert job.location is None
        assert job.has_company is True

    def test_nan_strings_cleaned(self):
        job = JobInput(title="Dev", company="nan", description="NaN", location="NAN")

        assert job.company == ""
        assert job.description == ""
        assert job.location is None
        assert job.has_company is False

    def test_non_string_fields_coerced(self):
        job = JobInput(title="Dev", company=42, description="Role", location=5, department=float("nan"))

        assert job.company == "42"
        assert job.location == "5"
        assert job.department is None

    def test_none_fields_become_empty(self):
        job = JobInput(title=None, company=None, description=None)
        assert (job.title, job.company, job.description) == ("", "", "")

    def test_searchable_text_includes_every_field(self):
        job = JobInput(
            title="Dev",
            company="Acme",
            description="Remote role",
            location="Lisbon",
            department="R&D",
        )
        assert job.searchable_text() == "Dev Acme Lisbon R&D Remote role"

    def test_payload_omits_absent_fields(self):
        job = JobInput(title="Dev", company="", description="Role")
        assert job.to_payload() == {"title": "Dev", "company": "", "description": "Role"}


class TestPredictionResult:
    """Tests for PredictionResult."""

    def test_verdict_values(self):
        assert Verdict.LEGIT.value == "Legit"
        assert Verdict("Fake") is Verdict.FAKE

    def test_to_dict_minimal(self):
        result = PredictionResult(verdict=Verdict.FAKE, confidence=0.8, keywords=["urgent"])
        assert result.to_dict() == {"verdict": "Fake", "confidence": 0.8, "keywords": ["urgent"]}
        assert result.is_fake

    def test_to_dict_camel_case(self):
        result = PredictionResult(
            verdict=Verdict.LEGIT,
            confidence=0.45,
            risk_factors=[],
            trustworthy_indicators=["Company name provided"],
            analysis_comment="ok",
        )
        data = result.to_dict()

        assert data["riskFactors"] == []
        assert data["trustworthyIndicators"] == ["Company name provided"]
        assert data["analysisComment"] == "ok"
        assert "title" not in data
