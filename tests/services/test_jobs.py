"""Tests for job helpers."""

from datetime import timedelta

import pytest

from skyfleet.contracts.errors import RelationNotLoaded
from skyfleet.contracts.payload import Job, Payload
from skyfleet.services.jobs import is_expired, total_weight
from tests.builders import NOW, FixedClock


def _job(**kwargs):
    kwargs.setdefault("expires_at", NOW + timedelta(hours=2))
    return Job(id="j1", operator={"kind": "user", "id": "u1"}, origin_icao="KLAX", value=800, **kwargs)


def _payload(weight):
    return Payload(job_id="j1", description="Parcel", weight=weight, destination_icao="KSFO", airport_icao="KLAX")


class TestJobs:
    def test_expiry(self):
        clock = FixedClock()
        assert not is_expired(_job(), clock)
        clock.advance(hours=2)
        assert is_expired(_job(), clock)

    def test_total_weight(self):
        job = _job(payloads=[_payload(100), _payload(250.5)])
        assert total_weight(job) == 350.5

    def test_payloads_not_loaded(self):
        with pytest.raises(RelationNotLoaded):
            total_weight(_job())
