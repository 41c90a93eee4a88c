from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from accounts.models import User
from notifications.models import Notification
from notifications.services import send_notification


class NotificationTests(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(email='notify@example.com', password='pass')
        Notification.objects.create(user=self.user, title='Test', body='Hello')
        Notification.objects.create(user=self.user, title='Read', body='World', status=Notification.STATUS_READ)

    def test_list_notifications(self):
        self.client.force_authenticate(self.user)
        url = reverse('notifications:notifications')
        resp = self.client.get(url)
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(len(resp.data.get('data', [])), 2)

    def test_list_notifications_filters_by_status(self):
        self.client.force_authenticate(self.user)
        url = reverse('notifications:notifications')
        resp = self.client.get(url, {'status': Notification.STATUS_UNREAD})
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual([n['title'] for n in resp.data['data']], ['Test'])

    def test_mark_read(self):
        note = Notification.objects.create(user=self.user, title='Unread', body='Body')
        self.client.force_authenticate(self.user)
        url = reverse('notifications:notifications-mark-read')
        resp = self.client.post(url, {'notification_ids': [note.id]}, format='json')
        self.assertEqual(resp.status_code, status.HTTP_200_OK)
        self.assertEqual(resp.data['data']['updated'], 1)
        note.refresh_from_db()
        self.assertEqual(note.status, Notification.STATUS_READ)
        self.assertIsNotNone(note.read_at)

    def test_send_notification_accepts_user_or_id(self):
        first = send_notification(to=self.user, type='Contract Fully Executed', message='Welcome aboard!')
        second = send_notification(to=self.user.id, type='Employee Credentials', message='Login details')
        self.assertEqual(first.user_id, self.user.id)
        self.assertEqual(first.title, 'Contract Fully Executed')
        self.assertEqual(first.body, 'Welcome aboard!')
        self.assertEqual(second.user_id, self.user.id)
        self.assertEqual(second.status, Notification.STATUS_UNREAD)

    def test_send_notification_without_recipient_is_dropped(self):
        before = Notification.objects.count()
        self.assertIsNone(send_notification(to=None, type='Orphan', message='nobody'))
        self.assertEqual(Notification.objects.count(), before)
