"""
Inventory Models

Relational mirror of the ingredients and equipment named in recipe
documents, keyed by their document UUIDs. Documents remain the source
of truth; these tables are only written by ``sync_inventory``.
"""

from .base import db


class InventoryIngredient(db.Model):
    """An ingredient seen in some recipe document."""
    __tablename__ = 'inventory_ingredient'
    id = db.Column(db.Integer, primary_key=True)
    uuid = db.Column(db.String(36), unique=True, nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    recipe_uuid = db.Column(db.String(36), nullable=False, index=True)


class InventoryEquipment(db.Model):
    """A piece of equipment seen in some recipe document, and whether it is owned."""
    __tablename__ = 'inventory_equipment'
    id = db.Column(db.Integer, primary_key=True)
    uuid = db.Column(db.String(36), unique=True, nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    is_owned = db.Column(db.Boolean, default=False, nullable=False)
    recipe_uuid = db.Column(db.String(36), nullable=False, index=True)
