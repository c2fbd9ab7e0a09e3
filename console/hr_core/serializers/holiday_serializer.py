from __future__ import annotations
from rest_framework import serializers

from hr_core.models import HolidayType


class HolidayRecordSerializer(serializers.Serializer):
    """Backend single-date holiday record."""
    holidayId = serializers.IntegerField(required=False, allow_null=True)
    holidayDate = serializers.DateField()
    holidayName = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    holidayYear = serializers.IntegerField()
    isRecurring = serializers.ChoiceField(choices=["Y", "N"], required=False, allow_null=True, default="N")
    isActive = serializers.ChoiceField(choices=["Y", "N"], required=False, allow_null=True, default="Y")
    isPaid = serializers.ChoiceField(choices=["Y", "N"], required=False, allow_null=True, default="Y")


class HolidayRangeSerializer(serializers.Serializer):
    """Range as entered on the holiday form."""
    from_date = serializers.DateField()
    to_date = serializers.DateField()
    holiday_type = serializers.ChoiceField(choices=HolidayType.choices, default=HolidayType.CUSTOM)
    holiday_name = serializers.CharField(required=False, allow_blank=True, default="")
    year = serializers.IntegerField(required=False, allow_null=True, default=None)
    is_paid = serializers.BooleanField(required=False, default=True)
    is_recurring = serializers.BooleanField(required=False, allow_null=True, default=None)

    def validate(self, attrs):
        if attrs["to_date"] < attrs["from_date"]:
            raise serializers.ValidationError({"to_date": "to_date must be on or after from_date."})
        if attrs["holiday_type"] == HolidayType.CUSTOM and not attrs["holiday_name"].strip():
            raise serializers.ValidationError({"holiday_name": "Custom holidays need a name."})
        if attrs["year"] is None:
            attrs["year"] = attrs["from_date"].year
        return attrs
