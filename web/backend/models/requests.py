#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from ebi.scorer import ScoreRequest


class ScoreRequestBody(BaseModel):
    """Body of POST /api/ebi.

    Every field is optional at the schema level so that an empty subject is
    answered with the API's own 400 ("Missing subject") rather than a 422.
    """
    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={
            "example": {
                "subject": "Martin Luther",
                "subjectType": "person",
                "notes": "Reformation, printing press, persecution"
            }
        }
    )

    subject: Optional[str] = Field(None, description="Person, event or idea to score")
    subjectType: Optional[str] = Field("person", description="person, event or idea")
    notes: Optional[str] = Field(None, description="Free-text context; include #explorer for Explorer Mode")

    def to_score_request(self) -> ScoreRequest:
        return ScoreRequest.from_raw(self.subject, self.subjectType, self.notes)
