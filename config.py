"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

from constants import MAX_SERVINGS


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # Unit display settings ('' shows ingredients in their original units)
    DEFAULT_UNIT_SYSTEM = os.environ.get('DEFAULT_UNIT_SYSTEM', '')
    MAX_SERVINGS = int(os.environ.get('MAX_SERVINGS', MAX_SERVINGS))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEFAULT_UNIT_SYSTEM = ''


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
