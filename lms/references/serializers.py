from rest_framework import serializers

from .models import Reference


class ReferenceSerializer(serializers.ModelSerializer):
    class Meta:
        model = Reference
        fields = [
            "id",
            "title",
            "url",
            "description",
            "module",
            "lesson",
            "order",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate(self, attrs):
        module = attrs.get("module", getattr(self.instance, "module", None))
        lesson = attrs.get("lesson", getattr(self.instance, "lesson", None))
        if module is None and lesson is None:
            raise serializers.ValidationError(
                "A reference must belong to a module or a lesson."
            )
        if module is not None and lesson is not None and lesson.module_id != module.id:
            raise serializers.ValidationError(
                "The lesson does not belong to the given module."
            )
        return attrs
