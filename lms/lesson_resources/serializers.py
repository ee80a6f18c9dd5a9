from rest_framework import serializers

from .models import LessonResource


class LessonResourceSerializer(serializers.ModelSerializer):
    """
    Lesson resource metadata. ``resource_type`` is derived from ``mimetype``
    when it is not given explicitly.
    """

    class Meta:
        model = LessonResource
        fields = [
            "id",
            "lesson",
            "title",
            "description",
            "filename",
            "original_name",
            "mimetype",
            "size",
            "file_url",
            "resource_type",
            "download_count",
            "is_active",
            "created_at",
        ]
        read_only_fields = ["id", "download_count", "is_active", "created_at"]
        extra_kwargs = {"resource_type": {"required": False}}

    def create(self, validated_data):
        if not validated_data.get("resource_type"):
            validated_data["resource_type"] = LessonResource.resource_type_for_mimetype(
                validated_data.get("mimetype", "")
            )
        return super().create(validated_data)
