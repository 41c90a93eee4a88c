from rest_framework import serializers

from .models import Application, Offer, Onboarding, OnboardingDocument


class ApplicationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Application
        fields = ["id", "candidate", "position_title", "status", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]


class OfferSerializer(serializers.ModelSerializer):
    class Meta:
        model = Offer
        fields = [
            "id",
            "application",
            "candidate",
            "hr_employee",
            "role",
            "gross_salary",
            "signing_bonus",
            "benefits",
            "applicant_response",
            "final_status",
            "deadline",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_signing_bonus(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("Signing bonus cannot be negative.")
        return value


class OnboardingDocumentSerializer(serializers.ModelSerializer):
    class Meta:
        model = OnboardingDocument
        fields = ["id", "owner", "type", "file_path", "uploaded_at"]
        read_only_fields = ["id", "uploaded_at"]


class OnboardingTaskSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    department = serializers.CharField(max_length=255, required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=Onboarding.TASK_STATUS_CHOICES, default=Onboarding.TASK_PENDING)
    deadline = serializers.DateTimeField(required=False, allow_null=True)
    completed_at = serializers.DateTimeField(required=False, allow_null=True)
    document_id = serializers.UUIDField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True)

    def to_internal_value(self, data):
        validated = super().to_internal_value(data)
        # Stored in a JSONField
        for key in ("deadline", "completed_at"):
            if validated.get(key) is not None:
                validated[key] = validated[key].isoformat()
        if validated.get("document_id") is not None:
            validated["document_id"] = str(validated["document_id"])
        return validated


class OnboardingSerializer(serializers.ModelSerializer):
    tasks = OnboardingTaskSerializer(many=True, required=False)

    class Meta:
        model = Onboarding
        fields = ["id", "employee", "contract", "tasks", "completed", "completed_at", "created_at", "updated_at"]
        read_only_fields = ["id", "completed", "completed_at", "created_at", "updated_at"]
