def plural(count, unit):
    return "{} {}{}".format(count, unit, "s" if count != 1 else "")


def secondsToText(secs):
    """
    Converts a duration to a human readable days, hours, minutes, seconds format.

    Args:
        secs (float): Seconds

    Returns:
        string: Human readable duration, "0 seconds" for an empty duration.
    """
    days, remainder = divmod(int(secs), 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes = remainder // 60
    seconds = secs - days * 86400 - hours * 3600 - minutes * 60

    parts = [
        plural(days, "day") if days else "",
        plural(hours, "hour") if hours else "",
        plural(minutes, "minute") if minutes else "",
        "{:.2f} second{}".format(seconds, "s" if seconds != 1 else "") if seconds else "",
    ]
    return ", ".join(part for part in parts if part) or "0 seconds"
