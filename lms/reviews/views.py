import logging

from django.shortcuts import get_object_or_404
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from ..common.exceptions import NotFoundException
from ..common.filters import apply_date_filters, parse_date_filters
from ..courses.models import Course
from .models import Review
from .serializers import ReviewSerializer

logger = logging.getLogger(__name__)


def _get_own_review(user, course_id) -> Review:
    review = Review.objects.filter(user=user, course_id=course_id).first()
    if review is None:
        raise NotFoundException("Review", f"of user {user.id} for course {course_id}")
    return review


class CourseReviewsView(APIView):
    """
    GET: all reviews of a course, optionally filtered by start_date/end_date.
    POST: create the requesting user's review; a second review for the same
    course is rejected.
    DELETE: remove the requesting user's review.
    """

    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, course_id):
        get_object_or_404(Course, pk=course_id)
        filters = parse_date_filters(request.query_params)
        reviews = apply_date_filters(
            Review.objects.filter(course_id=course_id).select_related("user"), filters
        )
        return Response(ReviewSerializer(reviews, many=True).data, status=status.HTTP_200_OK)

    def post(self, request, course_id):
        course = get_object_or_404(Course, pk=course_id)
        if Review.objects.filter(user=request.user, course=course).exists():
            return Response(
                {"detail": "You have already reviewed this course."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        serializer = ReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        review = serializer.save(user=request.user, course=course)
        logger.info(f"User {request.user.id} reviewed course {course.id} with {review.rating}/5")
        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    def delete(self, request, course_id):
        review = _get_own_review(request.user, course_id)
        review.delete()
        return Response(status=status.HTTP_200_OK)


class MyCourseReviewView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, course_id):
        review = _get_own_review(request.user, course_id)
        return Response(ReviewSerializer(review).data, status=status.HTTP_200_OK)


class CourseReviewUpdateView(APIView):
    """Update the requesting user's own review."""

    permission_classes = [permissions.IsAuthenticated]

    def put(self, request, course_id, pk):
        review = get_object_or_404(Review, pk=pk, course_id=course_id, user=request.user)
        serializer = ReviewSerializer(review, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data, status=status.HTTP_200_OK)
