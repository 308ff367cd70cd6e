from dataclasses import asdict, dataclass
from typing import Optional

from marshmallow import EXCLUDE, Schema, fields, validate


class SubmitAnswerSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    uid = fields.Str(required=True, validate=validate.Length(min=1))
    question_id = fields.Int(required=True, validate=validate.Range(min=1))
    answer = fields.Raw(required=True)


class RandomQuestionSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    subject_name = fields.Str(required=True, validate=validate.Length(min=1))
    paper_name = fields.Str(required=True, validate=validate.Length(min=1))
    uid = fields.Str(required=True, validate=validate.Length(min=1))
    question_id = fields.Int(load_default=None)


@dataclass
class SubmissionDTO:
    id: int
    correct: bool
    mastered: bool
    explanation: Optional[str]
    created: Optional[str]

    def to_dict(self) -> dict:
        return asdict(self)
