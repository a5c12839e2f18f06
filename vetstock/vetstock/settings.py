import os
from pathlib import Path
import dj_database_url
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-change-me-in-production')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.getenv('DEBUG', 'True').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')

# Application definition
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'main',
    'facilities',
    'inventory_meds',
    'widget_tweaks',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'main.middleware.AdminSessionMiddleware',  # Gates dashboard and facility admin pages
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'vetstock.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'main' / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'main.context_processors.admin_session',
            ],
        },
    },
]

WSGI_APPLICATION = 'vetstock.wsgi.application'

# Database
# PostgreSQL when DATABASE_URL is set, SQLite otherwise
DATABASES = {
    'default': dj_database_url.config(
        default=os.getenv(
            'DATABASE_URL',
            f"sqlite:///{BASE_DIR / 'db.sqlite3'}"
        ),
        conn_max_age=600,  # Connection pooling: keep alive for 10 minutes
        conn_health_checks=True,
    )
}

# SSL Configuration for hosted PostgreSQL
if os.getenv('DATABASE_URL', '').startswith('postgres'):
    DATABASES['default']['OPTIONS'] = {
        'sslmode': os.getenv('DATABASE_SSLMODE', 'require'),
    }

# Password validation
AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]

# Internationalization
LANGUAGE_CODE = 'en-gb'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Logging Configuration
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
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
        'level': 'INFO',
    },
    'loggers': {
        name: {
            'handlers': ['console'],
            'level': os.getenv('VETSTOCK_LOG_LEVEL', 'INFO'),
            'propagate': False,
        }
        for name in ('main', 'facilities', 'inventory_meds')
    },
}

# ================================================
# Authentication
# ================================================

# Single administrator account. Override both in the environment for any
# deployment that is reachable from outside.
VETSTOCK_ADMIN_USERNAME = os.getenv('VETSTOCK_ADMIN_USERNAME', 'admin')
VETSTOCK_ADMIN_PASSWORD = os.getenv('VETSTOCK_ADMIN_PASSWORD', 'password')

# Lifetime of an admin session in seconds (1 hour)
VETSTOCK_SESSION_AGE = int(os.getenv('VETSTOCK_SESSION_AGE', 3600))

# Pages that need a session, and JSON endpoints that answer 401 without one
VETSTOCK_PROTECTED_PATHS = ['/dashboard', '/admin/facilities']
VETSTOCK_PROTECTED_API_PATHS = [
    '/api/facilities',
    '/api/medicines',
    '/api/medicine-usage',
    '/api/summary',
    '/api/alerts',
]

LOGIN_URL = 'user_login'
LOGIN_REDIRECT_URL = 'inventory_meds:dashboard'

# ================================================
# Inventory
# ================================================
VETSTOCK_EXPIRING_SOON_DAYS = int(os.getenv('VETSTOCK_EXPIRING_SOON_DAYS', 7))
VETSTOCK_PAGE_SIZE = int(os.getenv('VETSTOCK_PAGE_SIZE', 10))

# ================================================
# Cache Configuration
# ================================================
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'vetstock-cache',
        'TIMEOUT': 300,  # 5 minutes default timeout
        'OPTIONS': {
            'MAX_ENTRIES': 1000
        }
    }
}

# Session optimization
SESSION_ENGINE = 'django.contrib.sessions.backends.cached_db'
SESSION_CACHE_ALIAS = 'default'
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = 'Strict'
