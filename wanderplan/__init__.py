from wanderplan.main import app

__all__ = ["app"]
