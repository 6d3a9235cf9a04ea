from .arrival_process import ArrivalProcess
from .request_process import RequestProcess
