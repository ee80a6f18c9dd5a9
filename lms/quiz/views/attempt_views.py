from rest_framework import permissions, status
from rest_framework.exceptions import PermissionDenied
from rest_framework.response import Response
from rest_framework.views import APIView

from ...common.permissions import IsSelfOrStaff, is_staff_user
from ..serializers import AttemptRecordSerializer, QuizResultSerializer, SubmitQuizSerializer
from ..services import QuizSubmissionService


class SubmitQuizView(APIView):
    """
    Grade and store a quiz submission.

    ``user_id`` defaults to the requesting user; only staff may submit on
    behalf of someone else. Domain errors (unknown quiz, invalid submission,
    broken quiz, failed save) are rendered by the LMS exception handler.
    """

    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):
        serializer = SubmitQuizSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user_id = serializer.validated_data.get("user_id") or request.user.id
        if user_id != request.user.id and not is_staff_user(request.user):
            raise PermissionDenied("You may only submit quizzes for yourself.")

        service = QuizSubmissionService.default()
        result = service.submit_quiz(serializer.to_submission(user_id))
        return Response(QuizResultSerializer(result).data, status=status.HTTP_200_OK)


class UserQuizAttemptView(APIView):
    """The user's attempt for a quiz; 204 No Content if there is none."""

    permission_classes = [IsSelfOrStaff]

    def get(self, request, user_id, quiz_id):
        attempt = QuizSubmissionService.default().get_user_quiz_attempt(user_id, quiz_id)
        if attempt is None:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response(AttemptRecordSerializer(attempt).data, status=status.HTTP_200_OK)


class UserPassedQuizView(APIView):
    permission_classes = [IsSelfOrStaff]

    def get(self, request, user_id, quiz_id):
        passed = QuizSubmissionService.default().has_user_passed_quiz(user_id, quiz_id)
        return Response({"passed": passed}, status=status.HTTP_200_OK)
