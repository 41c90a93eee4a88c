from rest_framework import serializers

from .models import Contract


class ContractSerializer(serializers.ModelSerializer):
    signature_state = serializers.CharField(read_only=True)
    is_fully_executed = serializers.BooleanField(read_only=True)

    class Meta:
        model = Contract
        fields = [
            'id',
            'offer',
            'acceptance_date',
            'gross_salary',
            'signing_bonus',
            'role',
            'benefits',
            'document',
            'employee_signature_url',
            'employer_signature_url',
            'employee_signed_at',
            'employer_signed_at',
            'signature_state',
            'is_fully_executed',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_signing_bonus(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError('Signing bonus cannot be negative.')
        return value


class ContractUpdateSerializer(ContractSerializer):
    """Partial update payload; the offer link cannot change."""

    class Meta(ContractSerializer.Meta):
        read_only_fields = ['id', 'offer', 'created_at', 'updated_at']
