"""Command line front end for the recipe book.

Drives :class:`RecipeFormController` against a running server, so the
same create/edit/delete cycle as the browser form is available from a
terminal::

    recipe-book list
    recipe-book add "Soup" starter --ingredients $'water\\nsalt' --instructions boil
    recipe-book edit <id> --ingredients $'water\\nsalt\\npepper'
    recipe-book delete <id>

The server URL comes from ``--url`` or the ``RECIPE_BOOK_URL``
environment variable.
"""

import argparse
import logging
import sys
from typing import List, Optional

from recipe_book_api.app.core.config import settings
from recipe_book_api.app.core.logging_config import setup_logging
from recipe_book_api.client.api import RecipeBookAPI
from recipe_book_api.client.controller import RecipeFormController

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="recipe-book", description="Manage recipes in the recipe book.")
    parser.add_argument("--url", default=settings.client_base_url, help="Base URL of the recipe book server")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all recipes")

    add = sub.add_parser("add", help="Add a recipe")
    add.add_argument("name")
    add.add_argument("course")
    add.add_argument("--ingredients", default="")
    add.add_argument("--instructions", default="")

    # The course is the partition key and cannot be changed.
    edit = sub.add_parser("edit", help="Edit a recipe")
    edit.add_argument("recipe_id")
    edit.add_argument("--name")
    edit.add_argument("--ingredients")
    edit.add_argument("--instructions")

    delete = sub.add_parser("delete", help="Delete a recipe")
    delete.add_argument("recipe_id")
    return parser


def run(args: argparse.Namespace, controller: RecipeFormController) -> int:
    """Execute a parsed command.  Returns the process exit status."""
    if not controller.load():
        return 1

    if args.command == "list":
        ok = True
    elif args.command == "add":
        controller.form.name = args.name
        controller.form.course = args.course
        controller.form.ingredients = args.ingredients
        controller.form.instructions = args.instructions
        ok = controller.submit()
    else:
        recipe = controller.find(args.recipe_id)
        if recipe is None:
            print(f"Recipe {args.recipe_id} not found.", file=sys.stderr)
            return 1
        if args.command == "edit":
            controller.start_edit(recipe)
            for field_name in ("name", "ingredients", "instructions"):
                value = getattr(args, field_name)
                if value is not None:
                    setattr(controller.form, field_name, value)
            ok = controller.submit()
        else:
            ok = controller.delete(recipe)

    if not ok:
        print(f"Could not {args.command} recipe; see log for details.", file=sys.stderr)
        return 1
    print(controller.render_text())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    controller = RecipeFormController(RecipeBookAPI(base_url=args.url))
    return run(args, controller)


if __name__ == "__main__":
    sys.exit(main())
