import logging

import pytest

from recipe_book_api import cli
from recipe_book_api.app.core.logging_config import setup_logging
from recipe_book_api.cli import build_parser, run
from recipe_book_api.client.controller import RecipeFormController


@pytest.fixture
def root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def _run(api, *argv):
    args = build_parser().parse_args(list(argv))
    return run(args, RecipeFormController(api))


def test_add_edit_delete(api, capsys):
    assert _run(api, "add", "Soup", "starter", "--ingredients", "water\nsalt", "--instructions", "boil") == 0
    out = capsys.readouterr().out
    assert "Soup (starter)" in out

    recipes, _ = api.list_recipes()
    recipe_id = recipes[0]["id"]

    assert _run(api, "edit", recipe_id, "--ingredients", "water\nsalt\npepper") == 0
    recipes, _ = api.list_recipes()
    assert recipes[0]["ingredients"] == "water\nsalt\npepper"
    assert recipes[0]["course"] == "starter"

    assert _run(api, "delete", recipe_id) == 0
    assert "No recipes yet." in capsys.readouterr().out


def test_unknown_recipe_fails(api, capsys):
    assert _run(api, "delete", "missing") == 1
    assert "not found" in capsys.readouterr().err


def test_list(api, capsys):
    assert _run(api, "list") == 0
    assert "No recipes yet." in capsys.readouterr().out


def test_setup_logging_applies_level_when_already_configured(root_level):
    setup_logging("INFO")
    assert root_level.handlers
    setup_logging("DEBUG")
    assert root_level.level == logging.DEBUG


def test_log_level_option_is_applied(api, root_level, monkeypatch, capsys):
    setup_logging("INFO")
    monkeypatch.setattr(cli, "RecipeBookAPI", lambda base_url: api)

    assert cli.main(["--log-level", "DEBUG", "list"]) == 0
    assert root_level.level == logging.DEBUG

    assert cli.main(["list"]) == 0
    assert root_level.level == logging.WARNING
