"""
Application Configuration

Centralizes Flask, database and recipe-directory settings for the web
and CLI surface. The cookbook core never reads configuration.
"""

import os


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings (inventory mirror)
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///cookbook.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Recipe documents
    RECIPE_DIR = os.environ.get('COOKBOOK_RECIPE_DIR', os.path.join(os.getcwd(), 'recipes'))

    # Logging
    LOG_LEVEL = os.environ.get('COOKBOOK_LOG_LEVEL', 'INFO')

    # Decimal places for display formatting only
    DISPLAY_PLACES = int(os.environ.get('COOKBOOK_DISPLAY_PLACES', '2'))


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('COOKBOOK_LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'


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
