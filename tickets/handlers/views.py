"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain import DomainError
from tickets.handlers.serializers import PurchaseRequestSerializer
from tickets.services import get_ticket_service


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status.HTTP_400_BAD_REQUEST,
    )


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        account_id, ticket_type_requests = serializer.to_domain()

        try:
            get_ticket_service().purchase(account_id, ticket_type_requests)
        except DomainError as exc:
            return domain_error_response(exc)

        return Response(status=status.HTTP_204_NO_CONTENT)
