from rest_framework import generics

from ...common.permissions import IsStaffOrReadOnly
from ..models import Quiz
from ..serializers import QuizSerializer

# --- Quiz authoring and browsing ---

class QuizListCreateView(generics.ListCreateAPIView):
    """List all quizzes or create one with nested questions and answers (staff only)."""

    queryset = Quiz.objects.prefetch_related("questions__answers")
    serializer_class = QuizSerializer
    permission_classes = [IsStaffOrReadOnly]


class QuizDetailView(generics.RetrieveDestroyAPIView):
    """Retrieve a quiz, or delete it together with its attempts (staff only)."""

    queryset = Quiz.objects.prefetch_related("questions__answers")
    serializer_class = QuizSerializer
    permission_classes = [IsStaffOrReadOnly]


class QuizByLessonView(generics.ListAPIView):
    serializer_class = QuizSerializer
    permission_classes = [IsStaffOrReadOnly]

    def get_queryset(self):
        return (
            Quiz.objects.filter(lesson_id=self.kwargs["lesson_id"])
            .prefetch_related("questions__answers")
            .order_by("created_at")
        )
