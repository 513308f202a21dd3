# pylint: disable=redefined-outer-name
import pytest

from dnsync.endpoint import Endpoint, Targets


@pytest.fixture
def desired():
    return Endpoint(
        name='svc.example.com',
        targets=['10.0.0.1', '10.0.0.2'],
        record_type='A',
        ttl=300,
    )


@pytest.fixture
def observed():
    return Endpoint(
        name='svc.example.com.',
        targets=['10.0.0.2', '10.0.0.1'],
        record_type='A',
        ttl=300,
    )


@pytest.fixture
def unordered_targets():
    return Targets('c.example.com', 'a.example.com', 'b.example.com')
