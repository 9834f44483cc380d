from .actions import BoardActions, HttpActions, LocalActions
from .controller import BoardController
from .forms import NewProjectForm, NewTaskForm
from .state import (
    DragItem,
    column_counts,
    hidden_tasks,
    partition_tasks,
    reconcile_deletion,
    reconcile_status_change,
    split_tags,
)

__all__ = [
    "BoardActions",
    "LocalActions",
    "HttpActions",
    "BoardController",
    "NewProjectForm",
    "NewTaskForm",
    "DragItem",
    "partition_tasks",
    "column_counts",
    "hidden_tasks",
    "split_tags",
    "reconcile_status_change",
    "reconcile_deletion",
]
