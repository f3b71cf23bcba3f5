import shutil


def has_command(name: str) -> bool:
    """
    Return True if an executable called 'name' is on PATH.
    Never runs it and never caches: PATH may change between calls.
    """
    return shutil.which(name) is not None
