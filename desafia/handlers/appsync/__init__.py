from .dispatch import dispatch  # noqa: F401
