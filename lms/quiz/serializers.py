from typing import Any, Dict, List

from django.db import transaction
from rest_framework import serializers

from ..common.permissions import is_staff_user
from .grading import QuestionSubmission, SubmitQuiz
from .models import Answer, Question, Quiz


class SortedIdListField(serializers.ListField):
    """
    List of distinct integer ids rendered in ascending order (accepts sets on
    output). Repeated ids are rejected rather than folded together.
    """

    child = serializers.IntegerField(min_value=1)
    default_error_messages = {
        "duplicate": "Ids must be unique, {ids} given more than once.",
    }

    def to_internal_value(self, data):
        ids = super().to_internal_value(data)
        repeated = sorted({value for value in ids if ids.count(value) > 1})
        if repeated:
            self.fail("duplicate", ids=repeated)
        return ids

    def to_representation(self, data):
        return sorted(data)


# --- Quiz authoring ---


class AnswerSerializer(serializers.ModelSerializer):
    """
    Candidate answer. ``is_correct`` is only rendered for staff, so learners
    fetching a quiz cannot read the solution.
    """

    class Meta:
        model = Answer
        fields = ["id", "text", "is_correct", "order"]
        read_only_fields = ["id"]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        request = self.context.get("request")
        if request is not None and not is_staff_user(request.user):
            data.pop("is_correct", None)
        return data


class QuestionSerializer(serializers.ModelSerializer):
    answers = AnswerSerializer(many=True)

    class Meta:
        model = Question
        fields = ["id", "text", "allows_multiple_answers", "order", "answers"]
        read_only_fields = ["id"]

    def validate(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        answers = attrs.get("answers") or []
        if not answers:
            raise serializers.ValidationError("Every question needs at least one answer.")

        correct = sum(1 for answer in answers if answer.get("is_correct"))
        if correct == 0:
            raise serializers.ValidationError(
                "Every question needs at least one correct answer."
            )
        if correct > 1 and not attrs.get("allows_multiple_answers", False):
            raise serializers.ValidationError(
                "A single-answer question must have exactly one correct answer."
            )
        return attrs


class QuizSerializer(serializers.ModelSerializer):
    """
    Quiz with nested questions and answers.

    Creation writes the whole aggregate in one transaction; quizzes are not
    edited after creation.
    """

    questions = QuestionSerializer(many=True)
    question_count = serializers.SerializerMethodField()

    class Meta:
        model = Quiz
        fields = [
            "id",
            "lesson",
            "title",
            "description",
            "pass_threshold",
            "question_count",
            "questions",
            "created_at",
        ]
        read_only_fields = ["id", "created_at"]

    def get_question_count(self, obj: Quiz) -> int:
        return len(obj.questions.all())

    def validate_questions(self, value: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if not value:
            raise serializers.ValidationError("A quiz needs at least one question.")
        return value

    def create(self, validated_data: Dict[str, Any]) -> Quiz:
        questions_data = validated_data.pop("questions")
        with transaction.atomic():
            quiz = Quiz.objects.create(**validated_data)
            for question_order, question_data in enumerate(questions_data, start=1):
                answers_data = question_data.pop("answers")
                question_data.setdefault("order", question_order)
                question = Question.objects.create(quiz=quiz, **question_data)
                for answer_order, answer_data in enumerate(answers_data, start=1):
                    answer_data.setdefault("order", answer_order)
                    Answer.objects.create(question=question, **answer_data)
        return quiz


# --- Submission ---


class QuestionSubmissionSerializer(serializers.Serializer):
    question_id = serializers.IntegerField(min_value=1)
    selected_answer_ids = SortedIdListField(allow_empty=True)


class SubmitQuizSerializer(serializers.Serializer):
    """
    Incoming quiz submission.

    Only the shape is checked here. Membership of questions and answers is
    the business of the grading core, which rejects rather than ignores
    unknown ids.
    """

    quiz_id = serializers.IntegerField(min_value=1)
    user_id = serializers.IntegerField(min_value=1, required=False)
    responses = QuestionSubmissionSerializer(many=True, allow_empty=True)

    def to_submission(self, user_id: int) -> SubmitQuiz:
        data = self.validated_data
        return SubmitQuiz(
            quiz_id=data["quiz_id"],
            user_id=user_id,
            responses=tuple(
                QuestionSubmission(
                    question_id=response["question_id"],
                    selected_answer_ids=frozenset(response["selected_answer_ids"]),
                )
                for response in data["responses"]
            ),
        )


class GradedQuestionSerializer(serializers.Serializer):
    question_id = serializers.IntegerField()
    selected_answer_ids = SortedIdListField()
    is_correct = serializers.BooleanField()


class QuizResultSerializer(serializers.Serializer):
    attempt_id = serializers.IntegerField()
    quiz_id = serializers.IntegerField()
    score = serializers.IntegerField()
    passed = serializers.BooleanField()
    questions = GradedQuestionSerializer(many=True)


class AttemptRecordSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    user_id = serializers.IntegerField()
    quiz_id = serializers.IntegerField()
    score = serializers.IntegerField()
    passed = serializers.BooleanField()
    submitted_at = serializers.DateTimeField()
    attempt_count = serializers.IntegerField()
    responses = GradedQuestionSerializer(many=True)
