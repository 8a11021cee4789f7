"""Route Dependencies — provides the process-wide UserStore.

Invariants:
    - One UserStore per process; every route reaches it through get_user_store

Design Decisions:
    - Module-level store: single-process uvicorn, state lost on restart (persistence is out of scope)
    - Dependency function over direct import: tests swap in a fresh store via
      app.dependency_overrides
"""

from apicrud.core.user_store import UserStore

_user_store = UserStore()


def get_user_store() -> UserStore:
    return _user_store
