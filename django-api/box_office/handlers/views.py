"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from box_office.dependencies import (
    get_analytics_service,
    get_pricing_service,
    get_session_service,
)
from box_office.domain.errors import DomainError, ErrorCode
from box_office.handlers.serializers import (
    CreateSessionSerializer,
    OccupancyOverviewSerializer,
    PriceBreakdownSerializer,
    PriceCalculationSerializer,
    PriceGridRequestSerializer,
    PriceSuggestionRequestSerializer,
    PriceSuggestionSerializer,
    PricingOptionsSerializer,
    SaleReceiptSerializer,
    SaleRecordSerializer,
    SaleRequestSerializer,
    SessionSerializer,
    SessionSummarySerializer,
)
from box_office.signals import SESSIONS_LIST_KEY, current_version, session_detail_key

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.INVALID_INPUT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.CAPACITY_EXCEEDED: status.HTTP_409_CONFLICT,
    ErrorCode.SESSION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.SALE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_SESSION: status.HTTP_409_CONFLICT,
}


def _cache_timeout() -> int:
    return settings.BOX_OFFICE["SESSION_CACHE_TIMEOUT"]


def _cached_response(key: str, render) -> Response:
    # Take the version first so data rendered before a concurrent mutation
    # is stored under the version that mutation supersedes.
    version = current_version(key)
    data = cache.get(key, version=version)
    if data is None:
        data = render()
        cache.set(key, data, _cache_timeout(), version=version)
    return Response(data)


class DomainAPIView(APIView):
    """APIView that turns domain errors into JSON error responses."""

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            logger.info("%s %s rejected: %s", self.request.method, self.request.path, exc)
            return Response(
                {"error": {"code": exc.code.value, "message": exc.message}},
                status=STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
            )
        return super().handle_exception(exc)


class SessionListView(DomainAPIView):
    """Handler for GET/POST /api/sessions"""

    def get(self, request: Request) -> Response:
        service = get_session_service()
        return _cached_response(
            SESSIONS_LIST_KEY,
            lambda: SessionSerializer(service.list_sessions(), many=True).data,
        )

    def post(self, request: Request) -> Response:
        serializer = CreateSessionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payload = serializer.validated_data
        session = get_session_service().create_session(
            movie_title=payload["movie_title"],
            capacity=payload["capacity"],
            base_price=payload["base_price"],
            room=payload["room"],
            showtime=payload["showtime"],
            dubbed=payload["dubbed"],
            session_id=payload.get("id"),
        )
        return Response(SessionSerializer(session).data, status=status.HTTP_201_CREATED)


class SessionDetailView(DomainAPIView):
    """Handler for GET /api/sessions/{session_id}"""

    def get(self, request: Request, session_id: str) -> Response:
        service = get_session_service()
        sid = service.resolve_id(session_id)
        return _cached_response(
            session_detail_key(str(sid)),
            lambda: SessionSerializer(service.get_session(str(sid))).data,
        )


class SaleListView(DomainAPIView):
    """Handler for GET/POST /api/sessions/{session_id}/sales"""

    def get(self, request: Request, session_id: str) -> Response:
        session = get_session_service().get_session(session_id)
        return Response(SaleRecordSerializer(session.list_sales(), many=True).data)

    def post(self, request: Request, session_id: str) -> Response:
        serializer = SaleRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payload = serializer.validated_data
        options = payload.get("options")
        receipt, summary = get_session_service().sell_tickets(
            session_id,
            ticket_type=payload["ticket_type"],
            quantity=payload["quantity"],
            number_of_people=payload["number_of_people"],
            options=PricingOptionsSerializer.build_options(options) if options else None,
        )
        return Response(
            {
                "sale": SaleReceiptSerializer(receipt).data,
                "session": SessionSummarySerializer(summary).data,
            },
            status=status.HTTP_201_CREATED,
        )


class SaleDetailView(DomainAPIView):
    """Handler for DELETE /api/sessions/{session_id}/sales/{sale_id}"""

    def delete(self, request: Request, session_id: str, sale_id: str) -> Response:
        summary = get_session_service().cancel_sale(session_id, sale_id)
        return Response({"success": True, "session": SessionSummarySerializer(summary).data})


class PriceCalculationView(DomainAPIView):
    """Handler for POST /api/pricing/calculate"""

    def post(self, request: Request) -> Response:
        serializer = PriceCalculationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payload = serializer.validated_data
        breakdown = get_pricing_service().calculate(
            payload["base_price"],
            ticket_type=payload["ticket_type"],
            options=PricingOptionsSerializer.build_options(payload),
            number_of_people=payload["number_of_people"],
            quantity=payload["quantity"],
        )
        return Response(PriceBreakdownSerializer(breakdown).data)


class PriceSuggestionView(DomainAPIView):
    """Handler for POST /api/pricing/suggest"""

    def post(self, request: Request) -> Response:
        serializer = PriceSuggestionRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        suggestion = get_pricing_service().suggest(**serializer.validated_data)
        return Response(PriceSuggestionSerializer(suggestion).data)


class PriceGridView(DomainAPIView):
    """Handler for POST /api/pricing/grid"""

    def post(self, request: Request) -> Response:
        serializer = PriceGridRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        grid = get_pricing_service().build_grid(**serializer.validated_data)
        return Response(PriceSuggestionSerializer(grid, many=True).data)


class OccupancyOverviewView(DomainAPIView):
    """Handler for GET /api/analytics/occupancy"""

    def get(self, request: Request) -> Response:
        overview = get_analytics_service().occupancy_overview()
        return Response(OccupancyOverviewSerializer(overview).data)
