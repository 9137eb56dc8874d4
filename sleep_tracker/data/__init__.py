from .database import Database
from .models import SleepInterval
from .repository import SleepRepository

__all__ = ["Database", "SleepInterval", "SleepRepository"]
