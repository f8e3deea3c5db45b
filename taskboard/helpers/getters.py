from taskboard.core.config import settings


def isDebugMode() -> bool:
    return settings.MODE.lower() == "debug"
