from marshmallow import EXCLUDE, Schema, fields, validate


class LeaderboardQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    uid = fields.Str(required=True, validate=validate.Length(min=1))
    period = fields.Int(load_default=None, validate=validate.Range(min=0))
    subject_id = fields.Int(load_default=None)
    grade_id = fields.Int(load_default=None)
    limit = fields.Int(load_default=None, validate=validate.Range(min=1, max=500))


class LearnerStatsQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    uid = fields.Str(required=True, validate=validate.Length(min=1))
    period = fields.Int(load_default=None, validate=validate.Range(min=0))
