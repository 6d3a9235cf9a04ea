from .dispatcher import Dispatcher
from .closest_ranged_pooled import ClosestRangedPooledDispatcher
from .step_process import TimeStepProcess
