"""
Python client for the Recipe Book API.

``RecipeBookAPI`` wraps the HTTP endpoints; ``RecipeFormController``
keeps the form state and card list that a front end renders.
"""

from .api import RecipeBookAPI  # noqa: F401
from .controller import RecipeFormController  # noqa: F401
