class InitializationError(RuntimeError):
    """The start-word resource could not be loaded; no session can begin."""
