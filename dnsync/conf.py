from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from dnsync import settings as defaults


def get_setting(name):
    """
    Look up a dnsync setting, falling back to the value shipped in
    `dnsync.settings` when there is no configured Django project.
    """
    default = getattr(defaults, name)
    try:
        return getattr(settings, name, default)
    except ImproperlyConfigured:
        return default
