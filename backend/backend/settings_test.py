from .settings import *  # noqa: F401,F403

SECRET_KEY = "test-secret-key"
DEBUG = False
ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

FZO_XML_EXPORT = {
    "FACILITY_CODE": "12345",
    "FACILITY_NAME": "Dom zdravlja Test",
    "NAMESPACE_URI": "urn:fzo:fakture",
    "SCHEMA_URI": "https://fzo.example.org/fakture.xsd",
    "XSL_HREF": "https://fzo.example.org/fakture.xsl",
    "CURRENCY": "BAM",
    "XML_VERSION": "1",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "dentalpay_app": {"handlers": ["console"], "level": "WARNING", "propagate": True},
    },
}
