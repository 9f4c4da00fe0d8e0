"""API routers."""

from profile_api.routers import absence, auth, directory, feedback, profiles

__all__ = [
    "absence",
    "auth",
    "directory",
    "feedback",
    "profiles",
]
