from marshmallow import EXCLUDE, Schema, fields, validate


class TrackStreakSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    uid = fields.Str(required=True, validate=validate.Length(min=1))
