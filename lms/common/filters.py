"""
Shared query filters for list endpoints.

Author: LMS Development Team
Version: 1.0.0
"""

from typing import Any, Dict

from django.db.models import QuerySet
from rest_framework import serializers


class DateRangeFilterSerializer(serializers.Serializer):
    """Optional ISO 8601 ``start_date``/``end_date`` query parameters."""

    start_date = serializers.DateTimeField(required=False)
    end_date = serializers.DateTimeField(required=False)

    def validate(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        start = attrs.get("start_date")
        end = attrs.get("end_date")
        if start and end and start > end:
            raise serializers.ValidationError("start_date must not be after end_date.")
        return attrs


def parse_date_filters(query_params) -> Dict[str, Any]:
    """Validate date range query parameters, raising a 400 on malformed input."""
    serializer = DateRangeFilterSerializer(data=query_params)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


def apply_date_filters(
    queryset: QuerySet, filters: Dict[str, Any], field: str = "created_at"
) -> QuerySet:
    """Restrict ``queryset`` to rows whose ``field`` lies within the inclusive range."""
    if filters.get("start_date"):
        queryset = queryset.filter(**{f"{field}__gte": filters["start_date"]})
    if filters.get("end_date"):
        queryset = queryset.filter(**{f"{field}__lte": filters["end_date"]})
    return queryset
