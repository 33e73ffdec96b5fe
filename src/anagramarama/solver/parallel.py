"""Implementation of the parallel solver: task distribution and worker management."""

import multiprocessing
from multiprocessing.process import BaseProcess
from multiprocessing.queues import Queue
from queue import Empty, Full
from typing import TextIO

from anagramarama.solver.task_args import TaskArgs
from anagramarama.solver.worker import Result, worker_loop

POLL_INTERVAL = 1.0
"""Seconds to wait on a queue before checking that all workers are still alive."""


class WorkerError(RuntimeError):
    """Exception raised when a worker process fails."""

    pass


def solve_parallel(task_args: TaskArgs, *, parallelism: int, logf: TextIO) -> list[str]:
    """Search for anagrams using a pool of worker processes.

    One task is created per candidate word: the candidate is the first word of the
    anagram and only later candidates may follow it, so tasks never overlap.  Tasks are
    sent one at a time through a request queue holding at most `parallelism` items.
    While that queue is full, submission waits for a result instead, which frees a
    worker that may be blocked on the equally bounded response queue.  After each
    submission, any results already waiting are read without blocking; once every task
    is submitted, the remaining results are read with blocking.

    Args:
        task_args (TaskArgs): Shared, read-only search state.
        parallelism (int): Number of worker processes.
        logf: Stream to log the solving process to.

    Returns:
        All anagram lines found, in no particular order.
    """
    n_tasks = len(task_args.candidates)
    print(
        f"Starting {parallelism} workers for {n_tasks} tasks...",
        file=logf,
        flush=True,
    )

    requests: Queue = multiprocessing.Queue(maxsize=parallelism)
    responses: Queue = multiprocessing.Queue(maxsize=parallelism)
    worker_ctr = multiprocessing.Value("i", 0)
    workers = [
        multiprocessing.Process(
            target=worker_loop,
            args=(requests, responses, worker_ctr, task_args),
            daemon=True,
        )
        for _ in range(parallelism)
    ]
    for worker in workers:
        worker.start()

    lines: list[str] = []
    pending = 0

    def collect(result: Result) -> None:
        nonlocal pending
        pending -= 1
        lines.extend(_unwrap(result, task_args))

    try:
        for task_index in range(n_tasks):
            while True:
                try:
                    requests.put_nowait(task_index)
                    break
                except Full:
                    # Every queued task is still pending, so a result is on its way.
                    # Waiting for it also unblocks a worker stuck on a full response queue.
                    collect(_get(responses, workers))
            pending += 1

            # Read whatever is already done, without waiting.
            while True:
                try:
                    result = responses.get_nowait()
                except Empty:
                    break
                collect(result)

        # All tasks submitted: wait for the rest.
        while pending > 0:
            collect(_get(responses, workers))

        for _ in workers:
            _put(requests, None, workers)
        for worker in workers:
            worker.join()
    except BaseException:
        print("Terminating workers...", file=logf, flush=True)
        for worker in workers:
            worker.terminate()
        for worker in workers:
            worker.join()
        raise
    finally:
        requests.close()
        responses.close()

    print(f"All {n_tasks} tasks processed.", file=logf, flush=True)
    return lines


def _unwrap(result: Result, task_args: TaskArgs) -> list[str]:
    """Return the lines of a successful result, or raise WorkerError."""
    if result.status == "error":
        word = task_args.candidates[result.task_index]
        raise WorkerError(f"Worker for candidate '{word}' failed:\n{result.err_msg}")
    return result.lines


def _check_workers(workers: list[BaseProcess]) -> None:
    """Raise WorkerError if any worker process has exited."""
    for worker in workers:
        if not worker.is_alive():
            raise WorkerError(f"Worker process {worker.pid} exited with code {worker.exitcode}.")


def _put(requests: Queue, task: int | None, workers: list[BaseProcess]) -> None:
    """Blocking put that gives up if a worker dies while the queue is full."""
    while True:
        try:
            requests.put(task, timeout=POLL_INTERVAL)
            return
        except Full:
            _check_workers(workers)


def _get(responses: Queue, workers: list[BaseProcess]) -> Result:
    """Blocking get that gives up if a worker dies while the queue is empty."""
    while True:
        try:
            return responses.get(timeout=POLL_INTERVAL)
        except Empty:
            _check_workers(workers)
