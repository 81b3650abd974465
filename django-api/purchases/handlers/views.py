"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.http import HttpRequest, HttpResponse
from django.utils.decorators import method_decorator
from django.views.decorators.cache import never_cache
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from purchases.domain.errors import DomainError, ErrorCode
from purchases.handlers.serializers import PurchaseRequestSerializer
from purchases.services.factory import build_ticket_service


def error_response(error: DomainError) -> Response:
    """Map a domain error to a user-safe JSON response."""
    match error.code:
        case ErrorCode.PAYMENT_FAILED | ErrorCode.RESERVATION_FAILED:
            status_code = status.HTTP_502_BAD_GATEWAY
        case (
            ErrorCode.INVALID_ACCOUNT
            | ErrorCode.TOO_MANY_TICKETS
            | ErrorCode.NO_ADULT
            | ErrorCode.TOO_MANY_INFANTS
        ):
            status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        case _:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return Response(
        {"code": error.code.value, "message": error.message}, status=status_code
    )


@method_decorator(never_cache, name="dispatch")
class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"errors": serializer.errors}, status=status.HTTP_400_BAD_REQUEST
            )

        service = build_ticket_service()
        try:
            service.purchase_tickets(
                serializer.validated_data["account_id"],
                serializer.ticket_requests(),
            )
        except DomainError as error:
            return error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)


@never_cache
def metrics_view(request: HttpRequest) -> HttpResponse:
    """Handler for GET /metrics"""
    return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
