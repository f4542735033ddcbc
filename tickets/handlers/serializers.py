"""Serializers for parsing purchase requests into domain values.

Format checks only. Business rules are left to the service so that
they surface as domain errors.
"""

from rest_framework import serializers

from tickets.domain import TicketType, TicketTypeRequest


class StrictIntegerField(serializers.IntegerField):
    """IntegerField that only accepts JSON integers, not numeric strings or floats."""

    def to_internal_value(self, data):
        if not isinstance(data, int) or isinstance(data, bool):
            self.fail("invalid")
        return super().to_internal_value(data)


class TicketTypeRequestSerializer(serializers.Serializer):
    """Serializer for a single TicketTypeRequest."""

    type = serializers.ChoiceField(choices=[t.value for t in TicketType])
    count = StrictIntegerField(min_value=0)


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for POST /api/purchases bodies."""

    account_id = StrictIntegerField()
    tickets = TicketTypeRequestSerializer(many=True)

    def to_domain(self) -> tuple[int, list[TicketTypeRequest]]:
        requests = [
            TicketTypeRequest(
                ticket_type=TicketType(item["type"]),
                count=item["count"],
            )
            for item in self.validated_data["tickets"]
        ]
        return self.validated_data["account_id"], requests
