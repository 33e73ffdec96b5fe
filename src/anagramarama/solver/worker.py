"""Main module for worker tasks in the parallel solver."""

import sys
import traceback
from dataclasses import dataclass
from multiprocessing.queues import Queue
from multiprocessing.sharedctypes import Synchronized
from time import time
from typing import Literal

from anagramarama.solver.search import search_task
from anagramarama.solver.task_args import TaskArgs
from anagramarama.utils import time_str


@dataclass(kw_only=True)
class WorkerState:
    """Global state maintained by each worker process."""

    worker_idx: int
    """Index of the worker process."""

    task_args: TaskArgs
    """Shared, read-only search state."""

    start_time: float
    """Timestamp when the worker started, in seconds since the epoch."""

    n_tasks_done: int = 0
    """Number of tasks completed by this worker."""


worker_state: WorkerState | None = None
"""Global state for each worker process."""


@dataclass
class Result:
    """Wrapper for worker task results."""

    task_index: int
    status: Literal["success", "error"]
    lines: list[str]
    err_msg: str | None = None


def init_worker_globals(worker_ctr: Synchronized, task_args: TaskArgs) -> None:
    """Initialize global variables for worker processes.

    Args:
        worker_ctr (Synchronized[int]): Shared counter for workers.
        task_args (TaskArgs): Shared, read-only search state.
    """
    global worker_state  # noqa: PLW0603
    with worker_ctr.get_lock():
        # Get and set the shared worker counter atomically, using the obtained value
        # as the worker index
        worker_idx = worker_ctr.value
        worker_ctr.value += 1

    worker_state = WorkerState(
        worker_idx=worker_idx,
        task_args=task_args,
        start_time=time(),
    )
    print(f"Worker {worker_state.worker_idx} initialized.", file=sys.stderr, flush=True)


def worker_task(task_index: int) -> list[str]:
    """Search for anagrams starting with the candidate at `task_index`.

    Returns:
        The anagram lines found, including alternate spellings.
    """
    # Ensure worker_state is initialized
    if not worker_state:
        raise RuntimeError("Worker state not initialized. Call init_worker_globals first.")

    lines = search_task(task_index, worker_state.task_args)
    worker_state.n_tasks_done += 1
    return lines


def _worker_task(task_index: int) -> Result:
    """Run `worker_task`, wrapping its output (or error) in a Result."""
    try:
        return Result(task_index=task_index, status="success", lines=worker_task(task_index))
    except Exception as e:
        return Result(
            task_index=task_index,
            status="error",
            lines=[],
            err_msg=f"Worker encountered an error: {str(e)}\n{traceback.format_exc()}",
        )


def worker_loop(
    requests: Queue,
    responses: Queue,
    worker_ctr: Synchronized,
    task_args: TaskArgs,
) -> None:
    """Process entry point: run tasks from `requests` until a None task is received.

    Args:
        requests (Queue[int | None]): Bounded queue of task indexes.  None means stop.
        responses (Queue[Result]): Bounded queue receiving one Result per task.
        worker_ctr (Synchronized[int]): Shared counter for workers.
        task_args (TaskArgs): Shared, read-only search state.
    """
    init_worker_globals(worker_ctr, task_args)
    if worker_state is None:
        raise RuntimeError("Worker state not initialized after init_worker_globals.")

    while True:
        task_index = requests.get()
        if task_index is None:
            break
        responses.put(_worker_task(task_index))

    print(
        f"Worker {worker_state.worker_idx} done: {worker_state.n_tasks_done} tasks "
        f"in {time_str(time() - worker_state.start_time)}.",
        file=sys.stderr,
        flush=True,
    )
