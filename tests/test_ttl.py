import pytest

from dnsync.endpoint import TTL


@pytest.mark.parametrize("value,configured", [
    (0, False),
    (1, True),
    (-5, False),
    (300, True),
    (2 ** 40, True),
])
def test_is_configured(value, configured):
    assert TTL(value).is_configured() is configured


def test_ttl_behaves_like_int():
    ttl = TTL(60)
    assert ttl == 60
    assert '{:d}'.format(ttl) == '60'
    assert repr(ttl) == 'TTL(60)'
