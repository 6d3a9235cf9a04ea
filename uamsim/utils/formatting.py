from datetime import datetime, timedelta
from uamsim.simulation.params import START_DATE

FORMAT_STR = '%a %H:%M:%S'

def cdate(time: float, start_date: datetime=START_DATE, format_str: str=FORMAT_STR) -> str:
    """Pretty prints date string for simulation.

    Args:
        time (float): current environment time in minutes
        start_date (datetime, optional): simulation start date. Defaults to START_DATE.
        format_str (str, optional): pretty print format. Defaults to FORMAT_STR.

    Returns:
        str: pretty printed date
    """
    date = start_date + timedelta(minutes=time)
    return date.strftime(format_str)
