from pydantic import BaseModel, Field, field_validator


class AssessRequest(BaseModel):
    university: str = Field(..., max_length=200, description="University name, free text")
    major: str = Field(..., max_length=200, description="Major or degree, free text")

    @field_validator("university", "major")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value
