"""
Django settings for smm_backend project.
"""

from pathlib import Path
import os
from dotenv import load_dotenv

# Load .env from the project root, so it works when run from repo root or from smm-backend
_project_root = Path(__file__).resolve().parent.parent
load_dotenv(_project_root / ".env")

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = _project_root


# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-change-this-in-production')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.getenv('DEBUG', 'True').lower() in ('true', '1', 'yes')

# Comma-separated list; APP_DOMAIN is appended when the platform provides it
_default_hosts = 'localhost,127.0.0.1,testserver'
_app_domain = os.getenv('APP_DOMAIN', '')
if _app_domain:
    _default_hosts = _default_hosts + ',' + _app_domain
ALLOWED_HOSTS = [h.strip() for h in os.getenv('ALLOWED_HOSTS', _default_hosts).split(',') if h.strip()]


# Application definition

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'corsheaders',
    'companies',
    'catalog',
    'content',
    'seo',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'smm_backend.middleware.APICommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'smm_backend.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'smm_backend.wsgi.application'


# Database
# DATABASE_URL wins when set; DB_NAME selects a plain PostgreSQL config; otherwise local SQLite.

import dj_database_url

DATABASES = {}
if os.getenv('DATABASE_URL'):
    DATABASES['default'] = dj_database_url.config(
        conn_max_age=600,
        conn_health_checks=True,
        ssl_require=os.getenv('DB_SSL', '').lower() in ('true', '1', 'yes'),
    )
elif os.getenv('DB_NAME'):
    DATABASES['default'] = {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': os.getenv('DB_NAME'),
        'USER': os.getenv('DB_USER', ''),
        'PASSWORD': os.getenv('DB_PASSWORD', ''),
        'HOST': os.getenv('DB_HOST', 'localhost'),
        'PORT': os.getenv('DB_PORT', '5432'),
        'OPTIONS': {'sslmode': 'require'} if os.getenv('DB_SSL') else {},
    }
else:
    DATABASES['default'] = {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }


# Caches
# The 'sitemaps' alias holds resolved crawl URL lists; entries expire after SITEMAP_CACHE_TTL.

SITEMAP_CACHE_TTL = int(os.getenv('SITEMAP_CACHE_TTL', '3600'))

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'smm-default',
    },
    'sitemaps': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'smm-sitemaps',
        'TIMEOUT': SITEMAP_CACHE_TTL,
    },
}


# Internationalization

LANGUAGE_CODE = 'en-us'

# Plans are laid out on this calendar; post times are always 09:00 UTC
TIME_ZONE = os.getenv('TIME_ZONE', 'UTC')

USE_I18N = True

USE_TZ = True


# Static files (CSS, JavaScript, Images) and uploaded/exported files
STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'
MEDIA_URL = 'media/'
MEDIA_ROOT = Path(os.getenv('MEDIA_ROOT', BASE_DIR / 'media'))
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'whitenoise.storage.CompressedManifestStaticFilesStorage',
    },
}

# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# REST Framework configuration
# No authentication layer: tenants are addressed by company_id only.
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': (),
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.AllowAny',
    ),
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
    ),
    'DEFAULT_PARSER_CLASSES': (
        'rest_framework.parsers.JSONParser',
    ),
}

# CORS Settings
# The form client may be served from anywhere; narrow with CORS_ALLOWED_ORIGINS_EXTRA when needed.
CORS_ALLOW_ALL_ORIGINS = os.getenv('CORS_ALLOW_ALL_ORIGINS', 'True').lower() in ('true', '1', 'yes')
_cors_extra = os.getenv('CORS_ALLOWED_ORIGINS_EXTRA', '')
CORS_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
] + [o.strip() for o in _cors_extra.split(',') if o.strip()]


# Logging
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': os.getenv('LOG_LEVEL', 'INFO'),
    },
}


# Ingestion / content settings
SMM_USER_AGENT = os.getenv('SMM_USER_AGENT', 'SMM/1.0')
SMM_FETCH_TIMEOUT = int(os.getenv('SMM_FETCH_TIMEOUT', '15'))  # seconds
SMM_INGEST_DEFAULT_LIMIT = int(os.getenv('SMM_INGEST_DEFAULT_LIMIT', '20'))
SMM_PLAN_PRODUCT_LIMIT = int(os.getenv('SMM_PLAN_PRODUCT_LIMIT', '20'))
SMM_CONTACT_LINE = os.getenv('SMM_CONTACT_LINE', 'Chat to us: 021 007 0200 | sales@vinet.co.za')
SMM_BASE_HASHTAGS = [
    t.strip() for t in os.getenv(
        'SMM_BASE_HASHTAGS', '#Vinet,#Internet,#Connectivity,#Fibre,#Wireless'
    ).split(',') if t.strip()
]
SMM_EXPORT_PREFIX = os.getenv('SMM_EXPORT_PREFIX', 'exports')
