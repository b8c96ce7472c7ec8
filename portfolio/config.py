import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

DEFAULT_SECRET_KEY = 'dev-secret-key-change-in-production'


def _env_flag(name, default='false'):
    return os.environ.get(name, default).lower() in ('1', 'true', 'yes')


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or DEFAULT_SECRET_KEY
    
    # Database - SQLite unless DATABASE_URL points at PostgreSQL
    DATABASE_URL = os.environ.get('DATABASE_URL')
    SQLALCHEMY_DATABASE_URI = DATABASE_URL or 'sqlite:///portfolio.db'  # relative to the instance folder
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Storage backends: 'sql' or 'memory'
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND') or ('sql' if DATABASE_URL else 'memory')
    SESSION_BACKEND = os.environ.get('SESSION_BACKEND') or STORAGE_BACKEND
    
    # Sessions
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_PERMANENT = True
    SESSION_COOKIE_NAME = 'portfolio_session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = False
    
    # Single admin account
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')
    ADMIN_PASSWORD_HASH = os.environ.get('ADMIN_PASSWORD_HASH')
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
    
    # Visitor replies on a conversation
    CONVERSATION_MAX_USER_REPLIES = int(os.environ.get('CONVERSATION_MAX_USER_REPLIES', 10))
    CONVERSATION_REPLY_COOLDOWN = int(os.environ.get('CONVERSATION_REPLY_COOLDOWN', 60))  # seconds
    PUBLIC_BASE_URL = os.environ.get('PUBLIC_BASE_URL', 'http://localhost:5000')
    CONVERSATION_URL_TEMPLATE = os.environ.get(
        'CONVERSATION_URL_TEMPLATE', '{base_url}/conversation/{token}')
    
    # Mail Configuration
    MAIL_SERVER = os.environ.get('MAIL_SERVER', 'smtp.gmail.com')
    MAIL_PORT = int(os.environ.get('MAIL_PORT', 587))
    MAIL_USE_TLS = os.environ.get('MAIL_USE_TLS', 'True').lower() == 'true'
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')
    MAIL_DEFAULT_SENDER = os.environ.get('MAIL_DEFAULT_SENDER') or os.environ.get('MAIL_USERNAME')
    MAIL_ENABLED = _env_flag('MAIL_ENABLED', 'true' if MAIL_USERNAME else 'false')
    
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    SQLALCHEMY_ECHO = False


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    SESSION_COOKIE_SECURE = True
    

class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    STORAGE_BACKEND = 'sql'
    SESSION_BACKEND = 'memory'
    WTF_CSRF_ENABLED = False
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'correct-horse'
    ADMIN_PASSWORD_HASH = None
    ADMIN_EMAIL = 'owner@example.com'
    CONVERSATION_MAX_USER_REPLIES = 3
    CONVERSATION_REPLY_COOLDOWN = 0
    PUBLIC_BASE_URL = 'https://portfolio.test'
    MAIL_DEFAULT_SENDER = 'noreply@portfolio.test'
    MAIL_ENABLED = True
    MAIL_SUPPRESS_SEND = True
    LOG_LEVEL = 'WARNING'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
