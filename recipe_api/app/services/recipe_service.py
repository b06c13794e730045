"""
Service layer for recipes.

This module provides the create, list, get and delete operations on
the ``recipes`` table.  A missing record is reported by returning
``None`` (get) or ``False`` (delete); translating that into an HTTP
404 is left to the API layer.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from recipe_api.app.core.db import get_connection
from recipe_api.app.schemas.recipe import RecipeCreate, RecipeRead


logger = logging.getLogger(__name__)


class RecipeService:
    """Service class for managing recipes."""

    @classmethod
    async def create_recipe(cls, data: RecipeCreate) -> RecipeRead:
        """Insert a new recipe and return the stored record."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO recipes (name, ingredients, instructions, cook_time)
                VALUES (?, ?, ?, ?)
                """,
                (data.name, data.ingredients, data.instructions, data.cook_time),
            )
            recipe_id = cursor.lastrowid
            conn.commit()
            logger.info("Created recipe %s (%s)", recipe_id, data.name)
            row = cursor.execute(
                "SELECT * FROM recipes WHERE id = ?",
                (recipe_id,),
            ).fetchone()
            return cls._row_to_recipe_read(row)
        finally:
            conn.close()

    @classmethod
    async def list_recipes(
        cls,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[RecipeRead]:
        """Return recipes in insertion order.

        Without a ``limit`` every recipe from ``offset`` onwards is
        returned.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            # SQLite treats a negative LIMIT as "no limit".
            rows = cursor.execute(
                "SELECT * FROM recipes ORDER BY id ASC LIMIT ? OFFSET ?",
                (limit if limit is not None else -1, offset),
            ).fetchall()
            return [cls._row_to_recipe_read(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def get_recipe(cls, recipe_id: int) -> Optional[RecipeRead]:
        """Retrieve a single recipe by its ID."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            row = cursor.execute(
                "SELECT * FROM recipes WHERE id = ?",
                (recipe_id,),
            ).fetchone()
            if not row:
                return None
            return cls._row_to_recipe_read(row)
        finally:
            conn.close()

    @classmethod
    async def delete_recipe(cls, recipe_id: int) -> bool:
        """Delete a recipe by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM recipes WHERE id = ?", (recipe_id,))
            affected = cursor.rowcount
            conn.commit()
            if affected:
                logger.info("Deleted recipe %s", recipe_id)
            return affected > 0
        finally:
            conn.close()

    @staticmethod
    def _row_to_recipe_read(row: sqlite3.Row) -> RecipeRead:
        """Convert a database row to a RecipeRead schema instance."""
        return RecipeRead(
            id=row["id"],
            name=row["name"],
            ingredients=row["ingredients"],
            instructions=row["instructions"],
            cook_time=row["cook_time"],
            created_at=row["created_at"],
        )
