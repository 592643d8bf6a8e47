"""Shared fixtures for emailmask tests."""

import pytest
from faker import Faker


@pytest.fixture
def fake():
    """Seeded Faker instance for reproducible addresses."""
    Faker.seed(4321)
    return Faker()


@pytest.fixture
def fake_emails(fake):
    """A batch of realistic email addresses."""
    return [fake.email() for _ in range(50)] + [
        fake.company_email() for _ in range(25)
    ]
