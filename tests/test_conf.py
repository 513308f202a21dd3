from unittest import mock

from django.core.exceptions import ImproperlyConfigured

from dnsync import conf


def test_get_setting_reads_django_settings(settings):
    settings.HASHIDS_MIN_LENGTH = 12
    assert conf.get_setting('HASHIDS_MIN_LENGTH') == 12


def test_get_setting_missing_uses_default(settings):
    del settings.HASHIDS_ALPHABET
    assert conf.get_setting('HASHIDS_ALPHABET') == conf.defaults.HASHIDS_ALPHABET


def test_get_setting_without_django_project():
    unconfigured = mock.Mock()
    type(unconfigured).SECRET_KEY = mock.PropertyMock(side_effect=ImproperlyConfigured)
    with mock.patch('dnsync.conf.settings', unconfigured):
        assert conf.get_setting('SECRET_KEY') == conf.defaults.SECRET_KEY
