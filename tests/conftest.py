"""
Shared fixtures: users and DRF clients bound to them.
"""
import pytest
from rest_framework.test import APIClient


@pytest.fixture
def make_user(django_user_model):
    def make(username):
        return django_user_model.objects.create_user(
            username=username,
            email=f'{username}@example.com',
            password='checkout-pass',
        )
    return make


@pytest.fixture
def client_for():
    """Build an API client logged in as ``user``; ``None`` gives an anonymous one."""
    def build(user=None):
        client = APIClient()
        if user is not None:
            client.force_authenticate(user=user)
        return client
    return build


@pytest.fixture
def api_client(client_for):
    return client_for()


@pytest.fixture
def user(make_user):
    return make_user('shopper')


@pytest.fixture
def authenticated_client(client_for, user):
    return client_for(user)


@pytest.fixture
def other_client(client_for, make_user):
    return client_for(make_user('someone-else'))
