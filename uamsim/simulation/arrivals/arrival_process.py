from typing import List
from abc import ABC, abstractmethod
from simpy.core import Environment
from ..dispatcher import Dispatcher

class ArrivalProcess(ABC):
    """
    Abstract class for an arrival processes.
    """
    def __init__(self, env: Environment, dispatcher: Dispatcher, collection: List,
                 verbose: bool=True, debug: bool=False):
        self.env = env
        self.dispatcher = dispatcher
        self.collection = collection
        self.verbose = verbose
        self.debug = debug

    @abstractmethod
    def run(self):
        pass
