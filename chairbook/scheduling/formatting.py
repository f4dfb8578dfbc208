DAY_NAMES = ('Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday')


def day_of_week_name(index: int) -> str:
    if 0 <= index < len(DAY_NAMES):
        return DAY_NAMES[index]
    return 'Invalid'


def format_duration(minutes: int) -> str:
    hours, remainder = divmod(minutes, 60)

    if hours == 0:
        return f'{remainder}min'

    if remainder == 0:
        return f'{hours}h'

    return f'{hours}h {remainder}min'
