"""
Tests for the Django ORM repositories and the end-to-end submission flow
against the database.
"""

from unittest import mock

from django.contrib.auth.models import User
from django.db import DatabaseError
from django.test import TestCase

from lms.common.exceptions import NotFoundException, PersistenceFailureException
from lms.models import Answer, Question, Quiz, QuizAttempt, UserQuestionResponse
from lms.quiz.grading import GradingEngine, GradedQuestion
from lms.quiz.repositories import DjangoAttemptRepository, DjangoQuizRepository
from lms.quiz.services import QuizSubmissionService

from .factories import make_submission


def create_quiz(title="Python Basics", pass_threshold=70):
    """Two single-answer questions, the first answer of each is correct."""
    quiz = Quiz.objects.create(title=title, pass_threshold=pass_threshold)
    for order in (1, 2):
        question = Question.objects.create(quiz=quiz, text=f"Question {order}", order=order)
        Answer.objects.create(question=question, text="right", is_correct=True, order=1)
        Answer.objects.create(question=question, text="wrong", is_correct=False, order=2)
    return quiz


def answer_ids(quiz):
    """[(question id, correct answer id, wrong answer id), ...] in question order."""
    return [
        (
            question.id,
            question.answers.get(is_correct=True).id,
            question.answers.get(is_correct=False).id,
        )
        for question in quiz.questions.all()
    ]


class DjangoQuizRepositoryTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.quiz = create_quiz()

    def test_loads_quiz_with_questions_and_answers(self):
        data = DjangoQuizRepository().get_quiz_with_questions_and_answers(self.quiz.id)

        self.assertEqual(data.id, self.quiz.id)
        self.assertEqual(data.pass_threshold, 70)
        self.assertEqual([q.text for q in data.questions], ["Question 1", "Question 2"])
        for question in data.questions:
            self.assertEqual(len(question.answers), 2)
            self.assertEqual(len(question.correct_answer_ids), 1)

    def test_missing_quiz_raises_not_found(self):
        with self.assertRaises(NotFoundException) as ctx:
            DjangoQuizRepository().get_quiz_with_questions_and_answers(999999)
        self.assertEqual(ctx.exception.status_code, 404)

    def test_default_pass_threshold_comes_from_settings(self):
        with self.settings(LMS_DEFAULT_PASS_THRESHOLD=80):
            quiz = Quiz.objects.create(title="Defaults")
        self.assertEqual(quiz.pass_threshold, 80)


class DjangoAttemptRepositoryTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(username="learner", password="learnerPassword")
        cls.quiz = create_quiz()
        cls.ids = answer_ids(cls.quiz)

    def setUp(self):
        self.service = QuizSubmissionService.default()

    def submit(self, picks):
        """``picks`` holds True (correct answer), False (wrong answer) or None per question."""
        selections = []
        for (question_id, right, wrong), pick in zip(self.ids, picks):
            if pick is None:
                continue
            selections.append((question_id, [right if pick else wrong]))
        return self.service.submit_quiz(make_submission(self.quiz.id, selections, user_id=self.user.id))

    def test_submission_persists_attempt_and_all_responses(self):
        result = self.submit([True, None])

        attempt = QuizAttempt.objects.get(pk=result.attempt_id)
        self.assertEqual(attempt.score, 50)
        self.assertFalse(attempt.passed)
        self.assertEqual(attempt.attempt_count, 1)

        responses = list(attempt.responses.all())
        self.assertEqual(len(responses), 2)
        self.assertEqual(responses[0].selected_answer_ids, [self.ids[0][1]])
        self.assertTrue(responses[0].is_correct)
        self.assertEqual(responses[1].selected_answer_ids, [])
        self.assertFalse(responses[1].is_correct)

    def test_stored_score_matches_recomputed_score(self):
        result = self.submit([True, False])

        attempt = QuizAttempt.objects.get(pk=result.attempt_id)
        recomputed = GradingEngine.score_responses(
            GradedQuestion(
                question_id=response.question_id,
                selected_answer_ids=frozenset(response.selected_answer_ids),
                is_correct=response.is_correct,
            )
            for response in attempt.responses.all()
        )
        self.assertEqual(recomputed, attempt.score)

    def test_resubmission_overwrites_attempt_and_responses(self):
        first = self.submit([False, False])
        second = self.submit([True, True])

        self.assertEqual(first.attempt_id, second.attempt_id)
        self.assertEqual(QuizAttempt.objects.filter(user=self.user, quiz=self.quiz).count(), 1)

        attempt = QuizAttempt.objects.get(pk=second.attempt_id)
        self.assertEqual(attempt.score, 100)
        self.assertTrue(attempt.passed)
        self.assertEqual(attempt.attempt_count, 2)
        self.assertEqual(UserQuestionResponse.objects.filter(attempt=attempt).count(), 2)
        self.assertTrue(all(r.is_correct for r in attempt.responses.all()))

    def test_get_attempt_returns_record(self):
        self.submit([True, True])

        record = DjangoAttemptRepository().get_attempt(self.user.id, self.quiz.id)
        self.assertEqual(record.user_id, self.user.id)
        self.assertEqual(record.quiz_id, self.quiz.id)
        self.assertEqual(record.score, 100)
        self.assertEqual([r.question_id for r in record.responses], [q[0] for q in self.ids])

    def test_no_attempt_means_not_passed(self):
        self.assertIsNone(self.service.get_user_quiz_attempt(self.user.id, self.quiz.id))
        self.assertFalse(self.service.has_user_passed_quiz(self.user.id, self.quiz.id))

    def test_failed_save_leaves_no_partial_attempt(self):
        with mock.patch.object(
            UserQuestionResponse.objects, "bulk_create", side_effect=DatabaseError("disk full")
        ):
            with self.assertRaises(PersistenceFailureException):
                self.submit([True, True])

        self.assertFalse(QuizAttempt.objects.filter(user=self.user, quiz=self.quiz).exists())

    def test_failed_overwrite_keeps_previous_attempt(self):
        self.submit([True, False])

        with mock.patch.object(
            UserQuestionResponse.objects, "bulk_create", side_effect=DatabaseError("disk full")
        ):
            with self.assertRaises(PersistenceFailureException):
                self.submit([True, True])

        attempt = QuizAttempt.objects.get(user=self.user, quiz=self.quiz)
        self.assertEqual(attempt.score, 50)
        self.assertEqual(attempt.attempt_count, 1)
        self.assertEqual(attempt.responses.count(), 2)
