from pathlib import Path
from decouple import config


# BASE DIRECTORY
# BASE_DIR points to the project root (where manage.py is)
BASE_DIR = Path(__file__).resolve().parent.parent


# SECURITY SETTINGS

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = config('SECRET_KEY', default='django-insecure-CHANGE-THIS-IN-PRODUCTION')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = config('DEBUG', default=True, cast=bool)

# Format: 'domain.com,www.domain.com,api.domain.com'
ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1,0.0.0.0,testserver').split(',')


# INSTALLED APPS

INSTALLED_APPS = [
    # Django built-in apps
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third-party apps
    'rest_framework',  # Notification polling API
    'corsheaders',
    'crispy_forms',
    'crispy_bootstrap5',

    # Our custom apps
    # IMPORTANT: accounts must be first (custom user model)
    'apps.accounts',  # Identities, profiles, roles, session store
    'apps.core',  # Dashboard, reports, organization settings, navigation
    'apps.leads',
    'apps.contacts',  # Contacts and customer accounts
    'apps.deals',
    'apps.activities',  # Tasks and communications
    'apps.campaigns',
    'apps.notifications',
]


# MIDDLEWARE

# Order matters! Each request passes through these top to bottom
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'corsheaders.middleware.CorsMiddleware',  # must be before CommonMiddleware
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    # Resolves request.user into a CRM profile (needs AuthenticationMiddleware)
    'apps.accounts.middleware.SessionProfileMiddleware',
]


# URL CONFIGURATION
ROOT_URLCONF = 'config.urls'


# TEMPLATES
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [
            BASE_DIR / 'templates',  # Global templates directory
        ],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'apps.core.context_processors.navigation',  # Role-filtered menu
            ],
        },
    },
]


# WSGI APPLICATION
WSGI_APPLICATION = 'config.wsgi.application'


# DATABASE

# PostgreSQL in production (DB_ENGINE=django.db.backends.postgresql)
# SQLite for local development and tests
DB_ENGINE = config('DB_ENGINE', default='django.db.backends.sqlite3')

if DB_ENGINE == 'django.db.backends.sqlite3':
    DATABASES = {
        'default': {
            'ENGINE': DB_ENGINE,
            'NAME': config('DB_NAME', default=str(BASE_DIR / 'db.sqlite3')),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': DB_ENGINE,
            'NAME': config('DB_NAME', default='crmpro_db'),
            'USER': config('DB_USER', default='crmpro_user'),
            'PASSWORD': config('DB_PASSWORD', default='crmpro_pass'),
            'HOST': config('DB_HOST', default='db'),  # 'db' is Docker service name
            'PORT': config('DB_PORT', default='5432'),
            'CONN_MAX_AGE': 600,  # Keep connection open for 10 minutes
            'OPTIONS': {
                'connect_timeout': 10,
            }
        }
    }


# CACHE

# Notification caches live here and must be shared by every worker process.
# LocMem is per process, so it is only the default for single-process development.
if DEBUG:
    CACHE_DEFAULTS = ('django.core.cache.backends.locmem.LocMemCache', 'crmpro')
else:
    CACHE_DEFAULTS = ('django.core.cache.backends.redis.RedisCache', 'redis://redis:6379/1')

CACHES = {
    'default': {
        'BACKEND': config('CACHE_BACKEND', default=CACHE_DEFAULTS[0]),
        'LOCATION': config('CACHE_LOCATION', default=CACHE_DEFAULTS[1]),
    }
}


# AUTHENTICATION

# Custom user model (session identity with a stable external auth_id)
# IMPORTANT: This MUST be set before first migration!
AUTH_USER_MODEL = 'accounts.User'

# Matches the minimum enforced on the security page and by the admin procedures
AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
        'OPTIONS': {
            'min_length': 6,
        }
    },
]

LOGIN_URL = '/login/'  # Redirect here if not authenticated
LOGIN_REDIRECT_URL = '/dashboard/'
LOGOUT_REDIRECT_URL = '/login/'


# INTERNATIONALIZATION
LANGUAGE_CODE = 'en-us'
TIME_ZONE = config('TIME_ZONE', default='UTC')
USE_I18N = True
USE_TZ = True


# STATIC FILES (CSS, JavaScript, Images)
STATIC_URL = '/static/'
STATICFILES_DIRS = [
    BASE_DIR / 'static',
]
STATIC_ROOT = BASE_DIR / 'staticfiles'


# CRISPY FORMS (Form Styling)
CRISPY_ALLOWED_TEMPLATE_PACKS = 'bootstrap5'
CRISPY_TEMPLATE_PACK = 'bootstrap5'


# DJANGO REST FRAMEWORK (API)
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework.authentication.SessionAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DATETIME_FORMAT': '%Y-%m-%dT%H:%M:%S%z',
}


# CORS HEADERS (Cross-Origin Resource Sharing)
if DEBUG:
    CORS_ALLOW_ALL_ORIGINS = True
else:
    CORS_ALLOWED_ORIGINS = config('CORS_ALLOWED_ORIGINS', default='https://crm.example.com').split(',')


# CELERY (Background Tasks)
CELERY_BROKER_URL = config('REDIS_URL', default='redis://redis:6379/0')
CELERY_RESULT_BACKEND = config('REDIS_URL', default='redis://redis:6379/0')
CELERY_ACCEPT_CONTENT = ['json']
CELERY_TASK_SERIALIZER = 'json'
CELERY_RESULT_SERIALIZER = 'json'
CELERY_TIMEZONE = TIME_ZONE
CELERY_TASK_TIME_LIMIT = 5 * 60
CELERY_TASK_SOFT_TIME_LIMIT = 4 * 60


# LOGGING

LOGS_DIR = BASE_DIR / 'logs'
LOGS_DIR.mkdir(exist_ok=True)

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,

    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },

    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
        'file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': LOGS_DIR / 'crmpro.log',
            'maxBytes': 1024 * 1024 * 10,  # 10 MB
            'backupCount': 5,
            'formatter': 'verbose',
        },
    },

    'loggers': {
        'django': {
            'handlers': ['console', 'file'],
            'level': config('LOG_LEVEL', default='INFO'),
            'propagate': True,
        },
        'apps': {  # Our custom apps
            'handlers': ['console', 'file'],
            'level': config('APPS_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
    },
}


# CUSTOM SETTINGS

# Role given to identities that sign in without a CRM profile and without a
# role in their metadata
CRM_DEFAULT_ROLE = config('CRM_DEFAULT_ROLE', default='Customer')

# Seconds before a cached notification list is re-read from the database.
# The browser polls on the same interval.
NOTIFICATIONS_REFRESH_INTERVAL = config('NOTIFICATIONS_REFRESH_INTERVAL', default=60, cast=int)

# Session settings
SESSION_COOKIE_AGE = 86400  # 24 hours in seconds
SESSION_SAVE_EVERY_REQUEST = False


# SECURITY SETTINGS (Production)

if not DEBUG:
    SECURE_SSL_REDIRECT = True
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True

    SECURE_CONTENT_TYPE_NOSNIFF = True
    X_FRAME_OPTIONS = 'DENY'

    SECURE_HSTS_SECONDS = 31536000  # 1 year
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True
    SECURE_HSTS_PRELOAD = True


DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
