from django.contrib.auth import get_user_model
from model_bakery import baker
from rest_framework.test import APIClient

User = get_user_model()

PASSWORD = "strong-pass"


def make_user(is_admin=False, **kwargs):
    user = baker.make(User, **kwargs)
    user.set_password(PASSWORD)
    user.save()
    if is_admin:
        user.profile.is_admin = True
        user.profile.save()
    return user


def authenticated_client(user):
    """APIClient carrying a bearer token obtained from the token endpoint."""
    client = APIClient()
    resp = client.post('/api/v1/token/', {'username': user.username, 'password': PASSWORD}, format='json')
    assert resp.status_code == 200, resp.content
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {resp.data['access']}")
    return client
