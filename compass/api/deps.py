from compass.services.navigator import CodebaseNavigator

# One navigator per process so the analysis history accumulates across calls
_navigator: CodebaseNavigator | None = None


def get_navigator() -> CodebaseNavigator:
    """Return the process-wide navigator, creating it on first use."""
    global _navigator
    if _navigator is None:
        _navigator = CodebaseNavigator()
    return _navigator
