from rest_framework import serializers

from .validators.export_request_validator import validate_export_request


class LenientDateField(serializers.DateField):
    """Unparseable input becomes None, so the request rules report it."""

    def to_internal_value(self, value):
        try:
            return super().to_internal_value(value)
        except serializers.ValidationError:
            return None


class LenientIntegerField(serializers.IntegerField):
    """Non-numeric input becomes None, so the request rules report it."""

    def to_internal_value(self, data):
        try:
            return super().to_internal_value(data)
        except serializers.ValidationError:
            return None


class InvoiceExportRequestSerializer(serializers.Serializer):
    date_od = LenientDateField(required=False, allow_null=True)
    date_do = LenientDateField(required=False, allow_null=True)
    tip_fakture = LenientIntegerField(required=False, allow_null=True)

    def validate(self, attrs):
        """
        Single user-facing message, same rules and order as the export form.
        """
        error = validate_export_request(
            attrs.get("date_od"),
            attrs.get("date_do"),
            attrs.get("tip_fakture"),
        )
        if error is not None:
            raise serializers.ValidationError(error)
        return attrs


class InvoiceExportDefaultsSerializer(serializers.Serializer):
    date_od = serializers.DateField()
    date_do = serializers.DateField()
    tip_fakture = serializers.IntegerField(allow_null=True)
