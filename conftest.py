import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(username="meter", password="s3cret-pass")


@pytest.fixture
def user_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def admin_client(db):
    admin = get_user_model().objects.create_user(
        username="admin", password="s3cret-pass", is_staff=True
    )
    client = APIClient()
    client.force_authenticate(user=admin)
    return client
