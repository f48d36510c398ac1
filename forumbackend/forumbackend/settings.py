# forumbackend/forumbackend/settings.py

from pathlib import Path
import os

# 建立專案根目錄
BASE_DIR = Path(__file__).resolve().parent.parent

# --- 安全性設定 ---
SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-group-titles-dev-key') # 提示：生產環境請務必設定 DJANGO_SECRET_KEY
DEBUG = os.environ.get('DJANGO_DEBUG', '1') == '1'
ALLOWED_HOSTS = [h.strip() for h in os.environ.get('DJANGO_ALLOWED_HOSTS', '*').split(',') if h.strip()]

# --- 已安裝的應用程式 ---
INSTALLED_APPS = [
    'daphne',           # ASGI 伺服器 (runserver 改由 daphne 提供)
    'group_titles',
    'solo',
    # --- Django 預設 App ---
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
]

# --- 中間件 ---
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

# --- 根 URL 配置 ---
ROOT_URLCONF = 'forumbackend.urls'

# --- 模板設定 ---
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

# --- WSGI/ASGI 應用設定 ---
ASGI_APPLICATION = 'forumbackend.asgi.application'

# --- 資料庫設定 ---
# 預設使用 SQLite；設定 DB_ENGINE=postgresql 改用 PostgreSQL
if os.environ.get('DB_ENGINE', 'sqlite') == 'postgresql':
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ.get('DB_NAME', 'forum'),
            'USER': os.environ.get('DB_USER', ''),
            'PASSWORD': os.environ.get('DB_PASSWORD', ''),
            'HOST': os.environ.get('DB_HOST', 'localhost'),
            'PORT': os.environ.get('DB_PORT', '5432'),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.environ.get('DB_NAME', BASE_DIR / 'db.sqlite3'),
        }
    }

# --- 密碼驗證器 ---
AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',},
]

# --- 國際化設定 ---
LANGUAGE_CODE = 'zh-hant'
TIME_ZONE = 'Asia/Taipei'
USE_I18N = True
USE_TZ = True

# --- 靜態檔案設定 ---
STATIC_URL = 'static/'
STATIC_ROOT = os.path.join(BASE_DIR, 'staticfiles_collected')

# --- 主鍵類型設定 ---
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# --- django-solo 設定 ---
# 不開啟快取：每次事件都重新讀取群組稱號設定
SOLO_CACHE = None

# --- 日誌設定 ---
GROUP_TITLES_LOG_LEVEL = os.environ.get('GROUP_TITLES_LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} [{name}] {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'group_titles': {
            'level': GROUP_TITLES_LOG_LEVEL,
        },
    },
}
