"""
Tests for the admin moderation endpoints.
"""

from django.test import TestCase
from model_bakery import baker

from api.tests.utils import authenticated_client, make_user
from moderation.models import AdminAction
from spots.models import CommunitySpot


class AdminStatusApiTest(TestCase):
    def test_admin_status(self):
        admin_client = authenticated_client(make_user(is_admin=True))
        user_client = authenticated_client(make_user())

        self.assertEqual(admin_client.get('/api/v1/admin/status').json(), {"is_admin": True})
        self.assertEqual(user_client.get('/api/v1/admin/status').json(), {"is_admin": False})


class ModerationApiTest(TestCase):
    def setUp(self):
        self.admin = make_user(is_admin=True)
        self.client = authenticated_client(self.admin)
        self.spot = baker.make(CommunitySpot, title="Hidden Cove")

    def test_pending_queue(self):
        submitter = self.spot.user
        submitter.profile.name = "Ola"
        submitter.profile.save()

        resp = self.client.get('/api/v1/admin/pending')

        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["title"], "Hidden Cove")
        self.assertEqual(data[0]["submitter_name"], "Ola")

    def test_non_admin_cannot_moderate(self):
        client = authenticated_client(make_user())

        self.assertEqual(client.get('/api/v1/admin/pending').status_code, 403)
        self.assertEqual(client.post(f'/api/v1/admin/spots/{self.spot.id}/approve').status_code, 403)
        self.assertEqual(client.get('/api/v1/admin/actions').status_code, 403)
        self.spot.refresh_from_db()
        self.assertEqual(self.spot.status, CommunitySpot.Status.PENDING)

    def test_approve(self):
        resp = self.client.post(f'/api/v1/admin/spots/{self.spot.id}/approve')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"id": self.spot.id, "status": "approved"})
        self.spot.refresh_from_db()
        self.assertEqual(self.spot.status, CommunitySpot.Status.APPROVED)
        self.assertEqual(AdminAction.objects.get().target_id, str(self.spot.id))

    def test_approve_twice_conflicts(self):
        self.client.post(f'/api/v1/admin/spots/{self.spot.id}/approve')

        resp = self.client.post(f'/api/v1/admin/spots/{self.spot.id}/approve')

        self.assertEqual(resp.status_code, 409)
        self.assertEqual(AdminAction.objects.count(), 1)

    def test_approve_missing_spot(self):
        self.assertEqual(self.client.post('/api/v1/admin/spots/999999/approve').status_code, 404)

    def test_reject_requires_reason(self):
        resp = self.client.post(f'/api/v1/admin/spots/{self.spot.id}/reject', {"reason": ""}, format='json')

        self.assertEqual(resp.status_code, 400)
        self.spot.refresh_from_db()
        self.assertEqual(self.spot.status, CommunitySpot.Status.PENDING)
        self.assertFalse(AdminAction.objects.exists())

    def test_reject_with_reason(self):
        resp = self.client.post(f'/api/v1/admin/spots/{self.spot.id}/reject', {"reason": "too far"}, format='json')

        self.assertEqual(resp.status_code, 200)
        self.spot.refresh_from_db()
        self.assertEqual(self.spot.status, CommunitySpot.Status.REJECTED)
        self.assertEqual(self.spot.rejection_reason, "too far")

    def test_reject_after_approve_conflicts(self):
        self.client.post(f'/api/v1/admin/spots/{self.spot.id}/approve')

        resp = self.client.post(f'/api/v1/admin/spots/{self.spot.id}/reject', {"reason": "too far"}, format='json')

        self.assertEqual(resp.status_code, 409)

    def test_activity_feed(self):
        other = baker.make(CommunitySpot)
        self.client.post(f'/api/v1/admin/spots/{self.spot.id}/approve')
        self.client.post(f'/api/v1/admin/spots/{other.id}/reject', {"reason": "private land"}, format='json')

        resp = self.client.get('/api/v1/admin/actions?limit=1')

        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["action_type"], "reject_spot")
        self.assertEqual(data[0]["details"], {"action": "rejected", "reason": "private land"})
        self.assertEqual(data[0]["admin_id"], self.admin.id)

    def test_activity_feed_rejects_bad_limit(self):
        self.assertEqual(self.client.get('/api/v1/admin/actions?limit=0').status_code, 400)


class HiddenCoveApiFlowTest(TestCase):
    def test_submit_approve_and_list(self):
        submitter = authenticated_client(make_user())
        admin = authenticated_client(make_user(is_admin=True))

        resp = submitter.post('/api/v1/spots/community', {
            "title": "Hidden Cove",
            "address": "Oslo",
            "description": "nice",
            "latitude": 59.9,
            "longitude": 10.7,
            "main_image_url": "/media/spots/cove.jpg",
        }, format='json')
        self.assertEqual(resp.status_code, 201)
        spot_id = resp.json()["id"]
        self.assertEqual(resp.json()["status"], "pending")

        pending_ids = [p["id"] for p in admin.get('/api/v1/admin/pending').json()]
        self.assertIn(spot_id, pending_ids)
        self.assertEqual(admin.get('/api/v1/spots').json(), [])

        self.assertEqual(admin.post(f'/api/v1/admin/spots/{spot_id}/approve').status_code, 200)

        listed = submitter.get('/api/v1/spots').json()
        self.assertEqual([s["id"] for s in listed], [f"community-{spot_id}"])
