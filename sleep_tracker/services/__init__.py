from .live_data import LiveValue, OneShotEvent, map_live
from .quality_controller import QualityController
from .session_controller import SessionController

__all__ = ["LiveValue", "OneShotEvent", "map_live", "QualityController", "SessionController"]
