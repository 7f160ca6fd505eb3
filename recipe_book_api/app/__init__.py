"""
Application package.

Contains the FastAPI entrypoint (``main``) and its submodules:
``core`` for configuration, logging and the document store,
``schemas`` for the request and response models, ``services`` for
business logic and ``api`` for the routes.  The application itself is
built when ``recipe_book_api.app.main`` is imported, so the command
line client can use ``core`` without loading the server.
"""
