import logging

from django.shortcuts import get_object_or_404
from rest_framework import generics, permissions, status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from ..common.exceptions import NotFoundException
from ..common.filters import apply_date_filters, parse_date_filters
from ..common.permissions import IsStaffOrReadOnly
from .models import LessonResource
from .serializers import LessonResourceSerializer

logger = logging.getLogger(__name__)


def get_active_resource(pk) -> LessonResource:
    try:
        return LessonResource.objects.get(pk=pk, is_active=True)
    except LessonResource.DoesNotExist:
        raise NotFoundException("Lesson resource", pk)


def _positive_int(value, name):
    try:
        number = int(value)
    except (TypeError, ValueError):
        number = 0
    if number < 1:
        raise ValidationError({name: "Must be a positive integer."})
    return number


class LessonResourceListCreateView(APIView):
    """
    GET: active resources, newest first, as ``{"resources": [...], "total": n}``.
    Supports ``page``/``limit`` pagination and ``start_date``/``end_date``.
    POST: create resource metadata (staff only).
    """

    permission_classes = [IsStaffOrReadOnly]

    def get(self, request):
        filters = parse_date_filters(request.query_params)
        queryset = apply_date_filters(
            LessonResource.objects.filter(is_active=True).select_related("lesson"), filters
        )
        total = queryset.count()

        page = request.query_params.get("page")
        limit = request.query_params.get("limit")
        if page and limit:
            page = _positive_int(page, "page")
            limit = _positive_int(limit, "limit")
            offset = (page - 1) * limit
            queryset = queryset[offset:offset + limit]

        return Response(
            {
                "resources": LessonResourceSerializer(queryset, many=True).data,
                "total": total,
            },
            status=status.HTTP_200_OK,
        )

    def post(self, request):
        serializer = LessonResourceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        resource = serializer.save()
        logger.info(f"Lesson resource {resource.id} created for lesson {resource.lesson_id}")
        return Response(LessonResourceSerializer(resource).data, status=status.HTTP_201_CREATED)


class LessonResourceDetailView(APIView):
    """GET (retrieve), PATCH (partial update), DELETE (soft delete)."""

    permission_classes = [IsStaffOrReadOnly]

    def get(self, request, pk):
        resource = get_active_resource(pk)
        return Response(LessonResourceSerializer(resource).data, status=status.HTTP_200_OK)

    def patch(self, request, pk):
        resource = get_active_resource(pk)
        serializer = LessonResourceSerializer(resource, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data, status=status.HTTP_200_OK)

    def delete(self, request, pk):
        resource = get_active_resource(pk)
        resource.is_active = False
        resource.save(update_fields=["is_active", "updated_at"])
        logger.info(f"Lesson resource {pk} deactivated")
        return Response(status=status.HTTP_204_NO_CONTENT)


class LessonResourcePermanentDeleteView(APIView):
    permission_classes = [IsStaffOrReadOnly]

    def delete(self, request, pk):
        resource = get_object_or_404(LessonResource, pk=pk)
        resource.delete()
        logger.info(f"Lesson resource {pk} permanently deleted")
        return Response(status=status.HTTP_204_NO_CONTENT)


class LessonResourceDownloadView(APIView):
    """Count a download and return the resource with its file URL."""

    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, pk):
        resource = get_active_resource(pk)
        resource.increment_download_count()
        return Response(LessonResourceSerializer(resource).data, status=status.HTTP_200_OK)


class LessonResourceByLessonView(generics.ListAPIView):
    serializer_class = LessonResourceSerializer
    permission_classes = [IsStaffOrReadOnly]

    def get_queryset(self):
        filters = parse_date_filters(self.request.query_params)
        return apply_date_filters(
            LessonResource.objects.filter(lesson_id=self.kwargs["lesson_id"], is_active=True),
            filters,
        )


class LessonResourceByTypeView(generics.ListAPIView):
    serializer_class = LessonResourceSerializer
    permission_classes = [IsStaffOrReadOnly]

    def get_queryset(self):
        return LessonResource.objects.filter(
            resource_type=self.kwargs["resource_type"], is_active=True
        ).select_related("lesson")
