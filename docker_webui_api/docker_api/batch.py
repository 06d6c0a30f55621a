"""Параллельная инспекция объектов после list-запроса."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")

LOGGER = logging.getLogger(__name__)


def inspect_all(
    identifiers: Sequence[str],
    inspect: Callable[[str], T],
    *,
    max_workers: int = 8,
) -> List[T]:
    """Вызывает ``inspect`` для каждого идентификатора параллельно.

    Результаты возвращаются в порядке ``identifiers``. Ошибка любого вызова
    прерывает весь пакет: ещё не начатые вызовы отменяются, первая ошибка
    пробрасывается наружу.
    """

    if not identifiers:
        return []

    workers = max(1, min(max_workers, len(identifiers)))
    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="inspect")
    futures: List[Future[T]] = []
    try:
        futures = [executor.submit(inspect, identifier) for identifier in identifiers]
        return [future.result() for future in futures]
    except Exception:
        cancelled = sum(1 for future in futures if future.cancel())
        LOGGER.debug("Batch inspect aborted, %s pending calls cancelled", cancelled)
        raise
    finally:
        executor.shutdown(wait=True)
