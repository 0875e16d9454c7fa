# gameclock/common/typed_config - typed config accessors
#
# Config sections are frozen dataclasses built from a plain dict through
# from_dict(); TypedConfigReader exposes one get_<section>() per section.

from gameclock.common.typed_config.models import (
    TimerConfig,
    non_negative,
    positive,
    safe_float,
    safe_int,
)
from gameclock.common.typed_config.reader import TypedConfigReader

__all__ = [
    "TimerConfig",
    "TypedConfigReader",
    "safe_int",
    "safe_float",
    "non_negative",
    "positive",
]
