from marshmallow import EXCLUDE, Schema, fields, validate

from examquiz_app.models import Question


class QuestionStatusSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    uid = fields.Str(required=True, validate=validate.Length(min=1))
    question_id = fields.Int(required=True, validate=validate.Range(min=1))
    status = fields.Str(required=True, validate=validate.OneOf(Question.STATUSES))
    comment = fields.Str(load_default=None, allow_none=True)
