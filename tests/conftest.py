import django
from django.conf import settings


def pytest_configure():
    if not settings.configured:
        settings.configure(INSTALLED_APPS=[], USE_TZ=True)
        django.setup()
