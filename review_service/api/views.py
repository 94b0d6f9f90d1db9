import time
import uuid

import structlog
from django.http import JsonResponse
from django.utils import timezone
from rest_framework import status, views
from rest_framework.response import Response

from ..apps import get_scheduler
from ..config import SERVICE_NAME
from ..utils.time import to_iso
from .serializers import GradeInSerializer, ResetInSerializer

base_logger = structlog.get_logger()

AVAILABLE_ENDPOINTS = [
    "GET /health",
    "POST /grade",
    "POST /reset",
    "GET /progress/:cardId",
    "GET /due",
    "GET /due/:deckId",
    "GET /all-progress",
]


def request_logger():
    # Create a unique request_id
    return base_logger.bind(request_id=str(uuid.uuid4()))


class HealthView(views.APIView):
    def get(self, request):
        return Response(
            {
                "status": "healthy",
                "service": SERVICE_NAME,
                "timestamp": to_iso(timezone.now()),
                "cards": len(get_scheduler()),
            }
        )


class GradeView(views.APIView):
    def post(self, request):
        started = time.perf_counter()
        logger = request_logger()

        s = GradeInSerializer(data=request.data)
        if not s.is_valid():
            logger.info("grade_rejected", errors=s.errors)
            return Response(
                {"error": "Missing required fields: cardId and isCorrect", "details": s.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        card_id = s.validated_data["cardId"]
        is_correct = s.validated_data["isCorrect"]
        record = get_scheduler().grade(card_id, is_correct)
        elapsed_ms = round((time.perf_counter() - started) * 1000)

        logger.info(
            "grade_api_response",
            card_id=card_id,
            is_correct=is_correct,
            streak=record.streak,
            next_review_utc=to_iso(record.next_review_date),
            response_ms=elapsed_ms,
        )

        return Response(
            {
                "success": True,
                "cardId": card_id,
                "progress": record.to_dict(),
                "responseTime": f"{elapsed_ms}ms",
            }
        )


class ResetView(views.APIView):
    def post(self, request):
        logger = request_logger()

        s = ResetInSerializer(data=request.data)
        if not s.is_valid():
            logger.info("reset_rejected", errors=s.errors)
            return Response(
                {"error": "Missing required field: cardId", "details": s.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        card_id = s.validated_data["cardId"]
        record = get_scheduler().reset(card_id)
        logger.info("reset_api_response", card_id=card_id)

        return Response(
            {
                "success": True,
                "cardId": card_id,
                "progress": record.to_dict(),
                "message": "Card progress has been reset",
            }
        )


class ProgressView(views.APIView):
    def get(self, request, card_id):
        record = get_scheduler().initialize_if_absent(card_id)
        return Response({"success": True, "progress": record.to_dict()})


class DueCardsView(views.APIView):
    def get(self, request, deck_id=None):
        logger = request_logger()
        now = timezone.now()

        due = get_scheduler().query_due(now, deck=deck_id)
        due_cards = [dict(rec.to_dict(), overdueDays=days) for rec, days in due]

        logger.info(
            "due_cards_api_response",
            deck_id=deck_id,
            now_utc=to_iso(now),
            card_count=len(due_cards),
        )

        body = {"success": True}
        if deck_id is not None:
            body["deckId"] = deck_id
        body["dueCards"] = due_cards
        body["count"] = len(due_cards)
        return Response(body)


class AllProgressView(views.APIView):
    def get(self, request):
        records = get_scheduler().query_all()
        return Response(
            {
                "success": True,
                "progress": {card_id: rec.to_dict() for card_id, rec in records.items()},
                "totalCards": len(records),
            }
        )


def not_found(request, exception=None):
    return JsonResponse(
        {"error": "Endpoint not found", "availableEndpoints": AVAILABLE_ENDPOINTS},
        status=404,
    )
