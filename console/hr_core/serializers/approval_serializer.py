# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import serializers

from hr_core.models import (
    AllowanceAmountType, LeavePayload, TransferPayload, AllowancePayload, PostponementPayload,
)
from hr_core.utils.dates import parse_month, month_of


# ===== Requester submissions (one serializer per kind) =====
class LeaveSubmitSerializer(serializers.Serializer):
    from_date = serializers.DateField()
    to_date = serializers.DateField()
    reason = serializers.CharField(allow_blank=False, trim_whitespace=True)

    def validate(self, attrs):
        if attrs["to_date"] < attrs["from_date"]:
            raise serializers.ValidationError({"to_date": "to_date must be on or after from_date."})
        return attrs

    def to_payload(self) -> LeavePayload:
        return LeavePayload(**self.validated_data)


class TransferSubmitSerializer(serializers.Serializer):
    from_project_code = serializers.IntegerField()
    to_project_code = serializers.IntegerField()
    transfer_date = serializers.DateField()
    reason = serializers.CharField(allow_blank=False, trim_whitespace=True)

    def validate(self, attrs):
        if attrs["to_project_code"] == attrs["from_project_code"]:
            raise serializers.ValidationError({"to_project_code": "Destination project must differ from the current project."})
        return attrs

    def to_payload(self) -> TransferPayload:
        return TransferPayload(**self.validated_data)


class AllowanceSubmitSerializer(serializers.Serializer):
    type_code = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    amount_type = serializers.ChoiceField(choices=AllowanceAmountType.choices, default=AllowanceAmountType.AMOUNT)
    transaction_date = serializers.DateField()
    reason = serializers.CharField(allow_blank=False, trim_whitespace=True)

    def validate(self, attrs):
        if attrs["amount"] <= 0:
            raise serializers.ValidationError({"amount": "Amount must be greater than 0."})
        if attrs["amount_type"] == AllowanceAmountType.PERCENTAGE and attrs["amount"] > 100:
            raise serializers.ValidationError({"amount": "Percentage must not exceed 100."})
        return attrs

    def to_payload(self) -> AllowancePayload:
        return AllowancePayload(**self.validated_data)


class PostponementSubmitSerializer(serializers.Serializer):
    loan_id = serializers.IntegerField()
    installment_id = serializers.IntegerField()
    original_due_date = serializers.DateField()
    new_month = serializers.CharField()
    reason = serializers.CharField(allow_blank=False, trim_whitespace=True)

    def validate_new_month(self, value):
        try:
            y, m = parse_month(value)
        except ValueError as e:
            raise serializers.ValidationError(str(e))
        return f"{y:04d}-{m:02d}"

    def validate(self, attrs):
        # strictly after the installment's original due month
        if parse_month(attrs["new_month"]) <= month_of(attrs["original_due_date"]):
            raise serializers.ValidationError({"new_month": "New month must be after the installment's original due month."})
        return attrs

    def to_payload(self) -> PostponementPayload:
        return PostponementPayload(**self.validated_data)
