from typing import Annotated

from fastapi import Depends, Request

from vinemanager.db.store import VineyardStore


def get_store(request: Request) -> VineyardStore:
    """The application's session store, created during startup."""
    return request.app.state.store


CurrentStore = Annotated[VineyardStore, Depends(get_store)]
