"""Pydantic validation models for prediction submissions."""
from typing import Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, ValidationError, field_validator

from legitmate.exceptions import InvalidJobInputError
from legitmate.models import JobInput


class JobSubmission(BaseModel):
    """A job posting entered through a form or the CLI."""
    title: str = Field(min_length=1, description="Job title")
    description: str = Field(min_length=1, description="Full job description")
    company: str = Field(default="")
    location: Optional[str] = Field(default=None)
    department: Optional[str] = Field(default=None)

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_required(cls, v):
        """Treat whitespace-only values as missing."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("company", mode="before")
    @classmethod
    def strip_company(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v or ""

    @field_validator("location", "department", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Strip optional values, turning blanks into None."""
        if isinstance(v, str):
            v = v.strip()
        return v or None

    def to_job(self) -> JobInput:
        return JobInput(
            title=self.title,
            company=self.company,
            description=self.description,
            location=self.location,
            department=self.department,
        )


class LinkSubmission(BaseModel):
    """A job posting link."""
    url: str = Field(min_length=1)

    @field_validator("url", mode="before")
    @classmethod
    def validate_url(cls, v):
        """Require an http(s) URL with a host."""
        if not isinstance(v, str):
            raise ValueError("URL must be a string")
        v = v.strip()
        try:
            parts = urlsplit(v)
            host = parts.hostname
        except ValueError as e:
            raise ValueError(f"Malformed URL: {e}") from e
        if parts.scheme not in ("http", "https") or not host:
            raise ValueError("URL must start with http:// or https:// and include a host")
        return v


def _messages(error: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}"
        for err in error.errors()
    ]


def validate_job(data: dict) -> JobInput:
    """Validate a submitted job posting.

    Args:
        data: Dictionary of job fields

    Returns:
        JobInput ready for scoring

    Raises:
        InvalidJobInputError: If title or description is missing
    """
    try:
        return JobSubmission(**data).to_job()
    except ValidationError as e:
        raise InvalidJobInputError(_messages(e)) from e


def validate_link(url: str) -> str:
    """Validate a submitted job link.

    Raises:
        InvalidJobInputError: If the URL is not an http(s) link
    """
    try:
        return LinkSubmission(url=url).url
    except ValidationError as e:
        raise InvalidJobInputError(_messages(e)) from e
