from abc import ABC, abstractmethod

class Dispatcher(ABC):
    """Abstract class for a dispatcher reacting to simulation callbacks.
    """
    @abstractmethod
    def on_next_time_step(self, now: float):
        pass

    @abstractmethod
    def on_request_submitted(self, request):
        pass

    @abstractmethod
    def on_next_task_started(self, vehicle):
        pass
