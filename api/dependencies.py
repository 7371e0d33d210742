"""
API dependencies for dependency injection
"""

from fastapi import Request

from domain.models import Database


def get_store(request: Request) -> Database:
    """
    Store handle opened by the application lifespan.

    Usage:
        @router.get("/example")
        def example(store: Database = Depends(get_store)):
            with store.session() as db:
                ...
    """
    return request.app.state.store
