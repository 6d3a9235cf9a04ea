from enum import Enum
from typing import List, Optional

class TaskType(Enum):
    STAY = 'STAY'
    FLY = 'FLY'
    PICKUP = 'PICKUP'
    DROPOFF = 'DROPOFF'


class Task(object):
    def __init__(self, task_type: TaskType, begin_time: float, end_time: float, link,
                 to_link=None, requests: List=None):
        """Single element of a vehicle schedule.

        Args:
            task_type (TaskType): kind of task
            begin_time (float): planned start
            end_time (float): planned end, infinite for an open-ended stay
            link (Link): where the task starts
            to_link (Link, optional): where a FLY task ends. Defaults to link.
            requests (List, optional): requests boarded or alighted (PICKUP / DROPOFF only)
        """
        if requests and task_type not in (TaskType.PICKUP, TaskType.DROPOFF):
            raise ValueError(f'{task_type.value} tasks cannot carry requests')

        self.task_type = task_type
        self.begin_time = begin_time
        self.end_time = end_time
        self.link = link
        self.to_link = to_link if to_link is not None else link
        self.requests = list(requests) if requests is not None else []

    @property
    def duration(self):
        return self.end_time - self.begin_time

    def __repr__(self):
        return f'Task({self.task_type.value}, {self.begin_time:.2f}-{self.end_time:.2f}, {len(self.requests)} requests)'


class Schedule(object):
    def __init__(self, initial_task: Task):
        """
        Ordered list of tasks with a pointer to the one currently executed.
        """
        self.tasks = [initial_task]
        self.current_index = 0

    @property
    def current_task(self) -> Task:
        return self.tasks[self.current_index]

    @property
    def last_task(self) -> Task:
        return self.tasks[-1]

    def task_at(self, offset: int) -> Optional[Task]:
        """Task `offset` positions after the current one, None past the end."""
        index = self.current_index + offset
        if index < 0 or index >= len(self.tasks):
            return None

        return self.tasks[index]

    def add_task(self, task: Task):
        self.tasks.append(task)

    def has_next_task(self) -> bool:
        return self.current_index + 1 < len(self.tasks)

    def next_task(self, now: float) -> Task:
        """Ends the current task at `now` and starts the following one."""
        if not self.has_next_task():
            raise RuntimeError(f'No task follows {self.current_task}')

        self.current_task.end_time = now
        self.current_index += 1
        return self.current_task
