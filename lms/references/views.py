from rest_framework import generics, permissions

from .models import Reference
from .serializers import ReferenceSerializer

# References are managed by staff only.

class ReferenceListCreateView(generics.ListCreateAPIView):
    queryset = Reference.objects.all()
    serializer_class = ReferenceSerializer
    permission_classes = [permissions.IsAdminUser]


class ReferenceDetailView(generics.RetrieveUpdateDestroyAPIView):
    """GET (retrieve), PUT/PATCH (update), DELETE (destroy) a reference."""

    queryset = Reference.objects.all()
    serializer_class = ReferenceSerializer
    permission_classes = [permissions.IsAdminUser]


class ReferenceByModuleView(generics.ListAPIView):
    serializer_class = ReferenceSerializer
    permission_classes = [permissions.IsAdminUser]

    def get_queryset(self):
        return Reference.objects.filter(module_id=self.kwargs["module_id"])


class ReferenceByLessonView(generics.ListAPIView):
    serializer_class = ReferenceSerializer
    permission_classes = [permissions.IsAdminUser]

    def get_queryset(self):
        return Reference.objects.filter(lesson_id=self.kwargs["lesson_id"])
