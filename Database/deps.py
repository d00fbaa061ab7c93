'''FastAPI dependency exposing the storage created at startup.'''
from fastapi import Request

from Database.db import FrontDeskDB


def get_db(request: Request) -> FrontDeskDB:
    return request.app.state.db
