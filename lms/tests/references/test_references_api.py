from django.contrib.auth.models import User
from rest_framework import status
from rest_framework.test import APITestCase

from lms.models import Course, CourseModule, Lesson, Reference

"""
    Tests for the reference endpoints. References belong to a module, a lesson,
    or both, and are managed by staff only.
"""

REFERENCES_URL = "/api/lms/references/"


class ReferenceApiTests(APITestCase):
    @classmethod
    def setUpTestData(cls):
        cls.staff = User.objects.create_user(username="instructor", password="instructorPassword", is_staff=True)
        cls.learner = User.objects.create_user(username="learner", password="learnerPassword")

        course = Course.objects.create(title="Python")
        cls.module = CourseModule.objects.create(course=course, title="Basics", order=1)
        cls.other_module = CourseModule.objects.create(course=course, title="Advanced", order=2)
        cls.lesson = Lesson.objects.create(module=cls.module, title="Variables", order=1)

        cls.module_reference = Reference.objects.create(
            title="Python docs", url="https://docs.python.org/3/", module=cls.module
        )
        cls.lesson_reference = Reference.objects.create(
            title="PEP 8", url="https://peps.python.org/pep-0008/", lesson=cls.lesson
        )

    def setUp(self):
        self.client.force_authenticate(self.staff)

    def test_list_references(self):
        response = self.client.get(REFERENCES_URL)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 2)

    def test_create_reference_for_module(self):
        response = self.client.post(
            REFERENCES_URL,
            {"title": "Real Python", "url": "https://realpython.com/", "module": self.module.id},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(Reference.objects.filter(module=self.module).count(), 2)

    def test_reference_needs_module_or_lesson(self):
        response = self.client.post(
            REFERENCES_URL, {"title": "Orphan", "url": "https://example.com/"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_lesson_must_belong_to_module(self):
        response = self.client.post(
            REFERENCES_URL,
            {
                "title": "Mismatch",
                "url": "https://example.com/",
                "module": self.other_module.id,
                "lesson": self.lesson.id,
            },
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_invalid_url_is_rejected(self):
        response = self.client.post(
            REFERENCES_URL, {"title": "Bad", "url": "not a url", "module": self.module.id}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_and_delete_reference(self):
        url = f"{REFERENCES_URL}{self.module_reference.id}/"

        response = self.client.patch(url, {"title": "Python 3 docs"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["title"], "Python 3 docs")

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Reference.objects.filter(pk=self.module_reference.id).exists())

    def test_filter_by_module_and_lesson(self):
        response = self.client.get(f"{REFERENCES_URL}module/{self.module.id}/")
        self.assertEqual([r["id"] for r in response.data], [self.module_reference.id])

        response = self.client.get(f"{REFERENCES_URL}lesson/{self.lesson.id}/")
        self.assertEqual([r["id"] for r in response.data], [self.lesson_reference.id])

    def test_learner_cannot_manage_references(self):
        self.client.force_authenticate(self.learner)
        self.assertEqual(self.client.get(REFERENCES_URL).status_code, status.HTTP_403_FORBIDDEN)
