"""
Tests for image uploads. Storage is in-memory under test settings.
"""

from django.core.files.storage import default_storage
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from api.tests.utils import authenticated_client, make_user


def image(name="photo.jpg", size=128, content_type="image/jpeg"):
    return SimpleUploadedFile(name, b"\xff" * size, content_type=content_type)


class SpotImageUploadTest(TestCase):
    def setUp(self):
        self.user = make_user()
        self.client = authenticated_client(self.user)

    def test_upload_returns_url(self):
        resp = self.client.post('/api/upload', {"file": image()}, format='multipart')

        self.assertEqual(resp.status_code, 200)
        url = resp.json()["url"]
        self.assertIn(f"spots/spot-{self.user.id}-", url)
        self.assertTrue(url.endswith(".jpg"))
        self.assertTrue(default_storage.exists(url.split("/media/", 1)[1]))

    def test_missing_file(self):
        resp = self.client.post('/api/upload', {}, format='multipart')

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "No file provided")

    def test_non_image_rejected(self):
        resp = self.client.post('/api/upload', {"file": image("notes.txt", content_type="text/plain")}, format='multipart')

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "File must be an image")

    @override_settings(MAX_SPOT_IMAGE_BYTES=1024)
    def test_oversized_rejected(self):
        resp = self.client.post('/api/upload', {"file": image(size=2048)}, format='multipart')

        self.assertEqual(resp.status_code, 400)

    def test_requires_auth(self):
        resp = APIClient().post('/api/upload', {"file": image()}, format='multipart')

        self.assertEqual(resp.status_code, 401)


class ProfileImageUploadTest(TestCase):
    def setUp(self):
        self.user = make_user()
        self.client = authenticated_client(self.user)

    def test_upload_sets_profile_image(self):
        resp = self.client.post('/api/upload/profile-image', {"file": image("me.png", content_type="image/png")}, format='multipart')

        self.assertEqual(resp.status_code, 200)
        self.user.profile.refresh_from_db()
        self.assertEqual(self.user.profile.profile_image_url, resp.json()["url"])
        self.assertIn("profiles/profile-", resp.json()["url"])

    @override_settings(MAX_PROFILE_IMAGE_BYTES=1024)
    def test_profile_limit_is_separate(self):
        resp = self.client.post('/api/upload/profile-image', {"file": image(size=2048)}, format='multipart')

        self.assertEqual(resp.status_code, 400)
