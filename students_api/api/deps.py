from fastapi import Request

from students_api.storage.base import Storage


def get_storage(request: Request) -> Storage:
    """
    Dependency returning the storage bound to the application.
    The backend is built once at startup, see ``create_app``.
    """
    return request.app.state.storage
