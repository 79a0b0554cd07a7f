from datetime import datetime

import pytz


DEFAULT_TIMEZONE = "Asia/Taipei"


def format_local_time(moment: datetime) -> str:
    """Format a datetime the way the zh-TW locale prints it, e.g. 2024/5/3 下午3:04:05"""
    period = "上午" if moment.hour < 12 else "下午"
    hour = moment.hour % 12 or 12
    return f"{moment.year}/{moment.month}/{moment.day} {period}{hour}:{moment.minute:02d}:{moment.second:02d}"


def now_string(timezone: str = DEFAULT_TIMEZONE) -> str:
    """Return the current time in the given regional timezone as a display string"""
    return format_local_time(datetime.now(pytz.timezone(timezone)))
