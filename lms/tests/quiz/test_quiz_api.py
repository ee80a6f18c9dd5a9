"""
API tests for quiz authoring, submission and attempt lookup.

Routes are defined in backend/urls combined with lms/urls.
"""

from django.contrib.auth.models import User
from rest_framework import status
from rest_framework.test import APITestCase

from lms.models import Answer, Question, Quiz, QuizAttempt


QUIZZES_URL = "/api/lms/quizzes/"
SUBMIT_URL = "/api/lms/quizzes/submit/"


def quiz_payload(title="Loops"):
    return {
        "title": title,
        "description": "Iteration in Python",
        "pass_threshold": 50,
        "questions": [
            {
                "text": "Which statement starts a loop?",
                "allows_multiple_answers": False,
                "answers": [
                    {"text": "for", "is_correct": True},
                    {"text": "def", "is_correct": False},
                ],
            },
            {
                "text": "Which of these are iterable?",
                "allows_multiple_answers": True,
                "answers": [
                    {"text": "list", "is_correct": True},
                    {"text": "dict", "is_correct": True},
                    {"text": "int", "is_correct": False},
                ],
            },
        ],
    }


class QuizAuthoringTests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        cls.staff = User.objects.create_user(username="instructor", password="instructorPassword", is_staff=True)
        cls.learner = User.objects.create_user(username="learner", password="learnerPassword")

    def test_staff_creates_quiz_with_nested_questions(self):
        self.client.force_authenticate(self.staff)
        response = self.client.post(QUIZZES_URL, quiz_payload(), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["question_count"], 2)
        quiz = Quiz.objects.get(pk=response.data["id"])
        self.assertEqual(quiz.pass_threshold, 50)
        self.assertEqual([q.order for q in quiz.questions.all()], [1, 2])
        self.assertEqual(Answer.objects.filter(question__quiz=quiz).count(), 5)

    def test_learner_cannot_create_quiz(self):
        self.client.force_authenticate(self.learner)
        response = self.client.post(QUIZZES_URL, quiz_payload(), format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_quiz_without_questions_is_rejected(self):
        self.client.force_authenticate(self.staff)
        payload = quiz_payload()
        payload["questions"] = []
        response = self.client.post(QUIZZES_URL, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_question_without_correct_answer_is_rejected(self):
        self.client.force_authenticate(self.staff)
        payload = quiz_payload()
        for answer in payload["questions"][0]["answers"]:
            answer["is_correct"] = False
        response = self.client.post(QUIZZES_URL, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_single_answer_question_with_two_correct_answers_is_rejected(self):
        self.client.force_authenticate(self.staff)
        payload = quiz_payload()
        for answer in payload["questions"][0]["answers"]:
            answer["is_correct"] = True
        response = self.client.post(QUIZZES_URL, payload, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Quiz.objects.exists())

    def test_learner_does_not_see_correct_answers(self):
        self.client.force_authenticate(self.staff)
        quiz_id = self.client.post(QUIZZES_URL, quiz_payload(), format="json").data["id"]

        self.client.force_authenticate(self.learner)
        response = self.client.get(f"{QUIZZES_URL}{quiz_id}/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        for question in response.data["questions"]:
            for answer in question["answers"]:
                self.assertNotIn("is_correct", answer)

    def test_anonymous_request_is_unauthorized(self):
        response = self.client.get(QUIZZES_URL)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class QuizSubmissionApiTests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        cls.staff = User.objects.create_user(username="instructor", password="instructorPassword", is_staff=True)
        cls.learner = User.objects.create_user(username="learner", password="learnerPassword")
        cls.other = User.objects.create_user(username="other", password="otherPassword")

        cls.quiz = Quiz.objects.create(title="Python Basics", pass_threshold=70)
        cls.q1 = Question.objects.create(quiz=cls.quiz, text="Q1", order=1)
        cls.q1_right = Answer.objects.create(question=cls.q1, text="right", is_correct=True)
        cls.q1_wrong = Answer.objects.create(question=cls.q1, text="wrong", is_correct=False)
        cls.q2 = Question.objects.create(quiz=cls.quiz, text="Q2", order=2)
        cls.q2_right = Answer.objects.create(question=cls.q2, text="right", is_correct=True)
        cls.q2_wrong = Answer.objects.create(question=cls.q2, text="wrong", is_correct=False)

    def setUp(self):
        self.client.force_authenticate(self.learner)

    def payload(self, selections, **extra):
        data = {
            "quiz_id": self.quiz.id,
            "responses": [
                {"question_id": question.id, "selected_answer_ids": [a.id for a in answers]}
                for question, answers in selections
            ],
        }
        data.update(extra)
        return data

    def test_all_correct_submission_passes(self):
        response = self.client.post(
            SUBMIT_URL,
            self.payload([(self.q1, [self.q1_right]), (self.q2, [self.q2_right])]),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["score"], 100)
        self.assertTrue(response.data["passed"])
        self.assertEqual(response.data["quiz_id"], self.quiz.id)
        attempt = QuizAttempt.objects.get(pk=response.data["attempt_id"])
        self.assertEqual(attempt.user, self.learner)

    def test_half_correct_submission_fails(self):
        response = self.client.post(
            SUBMIT_URL,
            self.payload([(self.q1, [self.q1_right]), (self.q2, [self.q2_wrong])]),
            format="json",
        )

        self.assertEqual(response.data["score"], 50)
        self.assertFalse(response.data["passed"])
        self.assertEqual(
            [(q["question_id"], q["is_correct"]) for q in response.data["questions"]],
            [(self.q1.id, True), (self.q2.id, False)],
        )

    def test_unknown_answer_is_rejected_with_rule(self):
        response = self.client.post(
            SUBMIT_URL,
            self.payload([(self.q1, [self.q2_right])]),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error_code"], "InvalidSubmission")
        self.assertEqual(response.data["details"]["rule"], "unknown_answer")
        self.assertEqual(response.data["details"]["question_id"], self.q1.id)
        self.assertEqual(response.data["details"]["answer_ids"], [self.q2_right.id])
        self.assertFalse(QuizAttempt.objects.exists())

    def test_repeated_answer_ids_are_rejected(self):
        response = self.client.post(
            SUBMIT_URL,
            self.payload([(self.q1, [self.q1_right, self.q1_right])]),
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(QuizAttempt.objects.exists())

    def test_question_without_correct_answer_is_server_error(self):
        broken = Quiz.objects.create(title="Broken")
        question = Question.objects.create(quiz=broken, text="Q", order=1)
        Answer.objects.create(question=question, text="nope", is_correct=False)

        response = self.client.post(
            SUBMIT_URL, {"quiz_id": broken.id, "responses": []}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data["error_code"], "InvalidQuizState")
        self.assertFalse(QuizAttempt.objects.filter(quiz=broken).exists())

    def test_unknown_quiz_is_not_found(self):
        response = self.client.post(
            SUBMIT_URL, {"quiz_id": 999999, "responses": []}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error_code"], "NotFound")

    def test_quiz_without_questions_is_server_error(self):
        empty = Quiz.objects.create(title="Empty")
        response = self.client.post(SUBMIT_URL, {"quiz_id": empty.id, "responses": []}, format="json")
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data["error_code"], "InvalidQuizState")

    def test_malformed_payload_is_rejected(self):
        response = self.client.post(SUBMIT_URL, {"responses": "nope"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_learner_cannot_submit_for_someone_else(self):
        response = self.client.post(
            SUBMIT_URL,
            self.payload([(self.q1, [self.q1_right])], user_id=self.other.id),
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(QuizAttempt.objects.exists())

    def test_staff_can_submit_on_behalf_of_learner(self):
        self.client.force_authenticate(self.staff)
        response = self.client.post(
            SUBMIT_URL,
            self.payload([(self.q1, [self.q1_right])], user_id=self.learner.id),
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(QuizAttempt.objects.filter(user=self.learner, quiz=self.quiz).exists())

    def test_attempt_lookup_before_and_after_submission(self):
        url = f"{QUIZZES_URL}attempt/{self.learner.id}/{self.quiz.id}/"

        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

        self.client.post(SUBMIT_URL, self.payload([(self.q1, [self.q1_right])]), format="json")
        self.client.post(
            SUBMIT_URL,
            self.payload([(self.q1, [self.q1_right]), (self.q2, [self.q2_right])]),
            format="json",
        )

        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["score"], 100)
        self.assertEqual(response.data["attempt_count"], 2)
        self.assertEqual(len(response.data["responses"]), 2)

    def test_passed_lookup(self):
        url = f"{QUIZZES_URL}passed/{self.learner.id}/{self.quiz.id}/"

        self.assertEqual(self.client.get(url).data, {"passed": False})

        self.client.post(
            SUBMIT_URL,
            self.payload([(self.q1, [self.q1_right]), (self.q2, [self.q2_right])]),
            format="json",
        )
        self.assertEqual(self.client.get(url).data, {"passed": True})

    def test_learner_cannot_read_other_users_attempt(self):
        response = self.client.get(f"{QUIZZES_URL}attempt/{self.other.id}/{self.quiz.id}/")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_staff_can_read_any_attempt_status(self):
        self.client.force_authenticate(self.staff)
        response = self.client.get(f"{QUIZZES_URL}passed/{self.learner.id}/{self.quiz.id}/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)


class TokenAuthenticationTests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        User.objects.create_user(username="testUser", password="testPassword")

    def obtain_access_token(self):
        response = self.client.post(
            "/api/lms/token/", {"username": "testUser", "password": "testPassword"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        return response.data["access"]

    def test_bearer_header_authenticates(self):
        access = self.obtain_access_token()
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        response = self.client.get(QUIZZES_URL)
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_access_token_cookie_authenticates(self):
        access = self.obtain_access_token()
        self.client.cookies["access_token"] = access
        response = self.client.get(QUIZZES_URL)
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_bad_cookie_is_rejected(self):
        self.client.cookies["access_token"] = "bad token"
        response = self.client.get(QUIZZES_URL)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
