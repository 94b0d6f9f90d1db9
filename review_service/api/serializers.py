from rest_framework import serializers


class StrictBooleanField(serializers.BooleanField):
    """Only JSON true/false; no "true", 1 or "yes" coercion."""

    def to_internal_value(self, data):
        if not isinstance(data, bool):
            self.fail("invalid", input=data)
        return data


class CardIdField(serializers.CharField):
    default_error_messages = {"not_a_string": "Must be a string."}

    def __init__(self, **kwargs):
        kwargs.setdefault("trim_whitespace", False)
        kwargs.setdefault("allow_blank", False)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("not_a_string")
        return super().to_internal_value(data)


class GradeInSerializer(serializers.Serializer):
    cardId = CardIdField()
    isCorrect = StrictBooleanField()


class ResetInSerializer(serializers.Serializer):
    cardId = CardIdField()
