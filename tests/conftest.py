"""Shared fixtures for the CRPT client tests."""

import pytest

from core.config import AppSettings
from core.domain.models import Description, Document, Product


class FakeClock:
    """Deterministic clock/sleep pair for the rate gate (milliseconds resolution)."""

    def __init__(self):
        self.ms = 0
        self.sleeps = []
        self.interrupt_next_sleep = False

    def __call__(self):
        return self.ms / 1000

    def sleep(self, seconds):
        if self.interrupt_next_sleep:
            self.interrupt_next_sleep = False
            raise KeyboardInterrupt
        self.sleeps.append(seconds)
        self.ms += round(seconds * 1000)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return AppSettings(_env_file=None)


@pytest.fixture
def simple_document():
    return Document(doc_id="1", products=[Product(tnved_code="123")])


@pytest.fixture
def full_document():
    return Document(
        description=Description(participant_inn="7700000000"),
        doc_id="doc-42",
        doc_status="DRAFT",
        doc_type="LP_INTRODUCE_GOODS",
        import_request=False,
        owner_inn="7700000001",
        participant_inn="7700000000",
        producer_inn="7700000002",
        production_date="2024-01-15",
        production_type="OWN_PRODUCTION",
        products=[
            Product(
                certificate_document="CONFORMITY_CERTIFICATE",
                certificate_document_date="2024-01-10",
                certificate_document_number="RU-123",
                owner_inn="7700000001",
                producer_inn="7700000002",
                production_date="2024-01-15",
                tnved_code="6401100000",
                uit_code="010460043993125621JgXJ5.T",
            ),
            Product(tnved_code="6402", uitu_code="046004399312562"),
        ],
        reg_date="2024-01-16",
        reg_number="R-1",
    )
