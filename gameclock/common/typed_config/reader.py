# gameclock/common/typed_config/reader.py
#
# TypedConfigReader - typed access to sections of a plain config dict.

from typing import Any

from gameclock.common.typed_config.models import TimerConfig


class TypedConfigReader:
    """Typed reader over a config dict.

    Every get_*() call parses a fresh snapshot of its section, so the result
    always reflects the current values. The dict itself is referenced, not
    copied.

    Usage:
        reader = TypedConfigReader(config_dict)
        timer = reader.get_timer()  # TimerConfig
        time_control = timer.to_time_control()
    """

    def __init__(self, config_dict: dict[str, Any]) -> None:
        self._config = config_dict

    def get_timer(self) -> TimerConfig:
        raw = self._config.get("timer")
        snapshot = dict(raw) if isinstance(raw, dict) else {}
        return TimerConfig.from_dict(snapshot)
