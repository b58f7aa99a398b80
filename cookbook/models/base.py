"""
Database Base Module

Creates the SQLAlchemy instance the inventory tables are declared on.
Kept separate so models and services can import it without importing
the app.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to an app in create_app()
db = SQLAlchemy()
