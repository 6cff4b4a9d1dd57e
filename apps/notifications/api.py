"""
Polling API used by the browser every NOTIFICATIONS_REFRESH_INTERVAL seconds

GET  /notifications/api/          → refreshed list + unread count
POST /notifications/api/          → add a notification for the signed-in user
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.decorators import get_current_user
from .serializers import NotificationDraftSerializer, NotificationRecordSerializer
from .store import NotificationError, NotificationStore

logger = logging.getLogger(__name__)


class NotificationPollView(APIView):

    def _store(self, request):
        profile = get_current_user(request)
        if profile is None or profile.pk is None:
            return None
        return NotificationStore(profile)

    def _payload(self, store):
        items = store.notifications
        return {
            'notifications': NotificationRecordSerializer(items, many=True).data,
            'unread_count': sum(1 for n in items if not n['read']),
            'refresh_interval': store.refresh_interval,
        }

    def get(self, request):
        store = self._store(request)
        if store is None:
            return Response({'detail': 'No active profile'}, status=status.HTTP_403_FORBIDDEN)

        store.refresh()
        return Response(self._payload(store))

    def post(self, request):
        store = self._store(request)
        if store is None:
            return Response({'detail': 'No active profile'}, status=status.HTTP_403_FORBIDDEN)

        serializer = NotificationDraftSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            store.add(serializer.validated_data)
        except NotificationError as e:
            return Response({'detail': str(e)}, status=status.HTTP_502_BAD_GATEWAY)

        return Response(self._payload(store), status=status.HTTP_201_CREATED)
