from __future__ import annotations
from rest_framework import serializers

from hr_core.models import EmployeeCategory


class BreakdownRecordSerializer(serializers.Serializer):
    """Backend salary-structure record: one category, one transaction type."""
    serNo = serializers.IntegerField(required=False, allow_null=True)
    employeeCategory = serializers.ChoiceField(choices=EmployeeCategory.choices)
    transTypeCode = serializers.IntegerField()
    transTypeName = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    salaryPercentage = serializers.FloatField(min_value=0)
    isDeleted = serializers.ChoiceField(choices=["Y", "N"], required=False, allow_null=True, default="N")
    year = serializers.IntegerField(required=False, allow_null=True, default=None)


class BreakdownRowSerializer(serializers.Serializer):
    """Merged row as edited by an admin (0-100 scale)."""
    transaction_code = serializers.IntegerField()
    transaction_name = serializers.CharField(required=False, allow_blank=True, default="")
    saudi_percentage = serializers.FloatField(required=False, allow_null=True, min_value=0, max_value=100)
    non_saudi_percentage = serializers.FloatField(required=False, allow_null=True, min_value=0)
