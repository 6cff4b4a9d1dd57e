from rest_framework import serializers

from .models import Notification


class NotificationRecordSerializer(serializers.Serializer):
    """Shape of a cached notification record (temporary ids included)"""
    id = serializers.CharField()
    title = serializers.CharField()
    message = serializers.CharField(allow_blank=True)
    type = serializers.ChoiceField(choices=[c[0] for c in Notification.TYPE_CHOICES])
    read = serializers.BooleanField()
    link = serializers.CharField(allow_blank=True)
    created_at = serializers.CharField()


class NotificationDraftSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200)
    message = serializers.CharField(allow_blank=True, required=False, default='')
    type = serializers.ChoiceField(choices=[c[0] for c in Notification.TYPE_CHOICES], default='info')
    link = serializers.CharField(max_length=255, allow_blank=True, required=False, default='')
