"""Form controller for the recipe book.

``RecipeFormController`` holds the state behind the recipe form and
the list of recipe cards, and turns user actions into API calls:

* submitting the form creates a recipe, or replaces the one being
  edited;
* editing copies a recipe into the form and locks its course, since
  the course is the partition key and cannot change;
* deleting sends the recipe's id and course;
* cancelling returns the form to create mode.

After every successful mutation the whole list is fetched and
rendered again; nothing is updated optimistically.  Failures are
logged and leave the state untouched.
"""

from __future__ import annotations

import html
import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from .api import RecipeBookAPI

logger = logging.getLogger(__name__)

CREATE_TITLE = "My Recipe Book"
EDIT_TITLE = "Edit Recipe"
ADD_LABEL = "Add Recipe"
UPDATE_LABEL = "Update Recipe"


@dataclass
class RecipeForm:
    """Values of the form fields."""

    name: str = ""
    course: str = ""
    ingredients: str = ""
    instructions: str = ""

    def to_payload(self) -> Dict[str, str]:
        return asdict(self)

    def fill(self, recipe: Dict[str, Any]) -> None:
        self.name = recipe.get("name", "")
        self.course = recipe.get("course", "")
        self.ingredients = recipe.get("ingredients", "")
        self.instructions = recipe.get("instructions", "")

    def reset(self) -> None:
        self.fill({})


@dataclass
class RecipeCard:
    """A rendered recipe with its edit and delete controls."""

    recipe: Dict[str, Any]

    @property
    def recipe_id(self) -> str:
        return self.recipe.get("id", "")

    def to_html(self) -> str:
        name = html.escape(self.recipe.get("name", ""))
        course = html.escape(self.recipe.get("course", ""))
        ingredients = html.escape(self.recipe.get("ingredients", ""))
        instructions = html.escape(self.recipe.get("instructions", ""))
        recipe_id = html.escape(self.recipe_id, quote=True)
        return (
            f'<div class="recipe-card" data-id="{recipe_id}">'
            f"<h3>{name} <small>({course})</small></h3>"
            f"<h4>Ingredients</h4><pre>{ingredients}</pre>"
            f"<h4>Instructions</h4><pre>{instructions}</pre>"
            '<div class="card-buttons">'
            '<button class="edit-btn">Edit</button>'
            '<button class="delete-btn">Delete</button>'
            "</div></div>"
        )

    def to_text(self) -> str:
        lines = [
            f"{self.recipe.get('name', '')} ({self.recipe.get('course', '')})  [{self.recipe_id}]",
            "  Ingredients:",
        ]
        lines.extend(f"    {line}" for line in self.recipe.get("ingredients", "").splitlines())
        lines.append("  Instructions:")
        lines.extend(f"    {line}" for line in self.recipe.get("instructions", "").splitlines())
        return "\n".join(lines)


@dataclass
class RecipeFormController:
    """State machine for the recipe form (create mode / edit mode)."""

    api: RecipeBookAPI
    form: RecipeForm = field(default_factory=RecipeForm)
    is_editing: bool = False
    editing_id: Optional[str] = None
    course_locked: bool = False
    title: str = CREATE_TITLE
    submit_label: str = ADD_LABEL
    cancel_visible: bool = False
    cards: List[RecipeCard] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def load(self) -> bool:
        """Fetch all recipes and render them.  Returns ``False`` on failure."""
        recipes, error = self.api.list_recipes()
        if error:
            logger.error("Could not fetch recipes: %s", error["message"])
            return False
        self.render(recipes)
        return True

    def render(self, recipes: List[Dict[str, Any]]) -> None:
        """Replace the card list with one card per recipe."""
        self.cards = [RecipeCard(recipe) for recipe in recipes]

    def render_html(self) -> str:
        return "".join(card.to_html() for card in self.cards)

    def render_text(self) -> str:
        if not self.cards:
            return "No recipes yet."
        return "\n\n".join(card.to_text() for card in self.cards)

    def find(self, recipe_id: str) -> Optional[Dict[str, Any]]:
        for card in self.cards:
            if card.recipe_id == recipe_id:
                return card.recipe
        return None

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------
    def start_edit(self, recipe: Dict[str, Any]) -> None:
        """Switch to edit mode for ``recipe`` and copy it into the form."""
        self.is_editing = True
        self.editing_id = recipe.get("id")
        self.form.fill(recipe)
        self.course_locked = True
        self.title = EDIT_TITLE
        self.submit_label = UPDATE_LABEL
        self.cancel_visible = True

    def reset_form(self) -> None:
        self.is_editing = False
        self.editing_id = None
        self.form.reset()
        self.course_locked = False
        self.title = CREATE_TITLE
        self.submit_label = ADD_LABEL
        self.cancel_visible = False

    def cancel(self) -> None:
        """Leave edit mode without submitting."""
        self.reset_form()

    def submit(self) -> bool:
        """Send the form: PUT when editing, POST otherwise."""
        payload = self.form.to_payload()
        if self.is_editing:
            _, error = self.api.update_recipe(self.editing_id, payload)
            action = "update"
        else:
            _, error = self.api.create_recipe(payload)
            action = "add"
        if error:
            logger.error("Could not %s recipe: %s", action, error["message"])
            return False
        self.reset_form()
        return self.load()

    def delete(self, recipe: Dict[str, Any]) -> bool:
        """Delete ``recipe`` by id and course, then reload the list."""
        ok, error = self.api.delete_recipe(recipe.get("id", ""), recipe.get("course", ""))
        if not ok:
            logger.error("Could not delete recipe: %s", error["message"] if error else "unknown error")
            return False
        return self.load()
