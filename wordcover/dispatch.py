"""
dispatch.py

Fans the search out over starting words.

Every complete combination contains a word whose lowest letter is within the
slack of the bottom of the alphabet (for the 26/5/5 puzzle: a word with Q or
J). Searching from just those words finds everything, and each starting word
is an independent subtree, so the work splits into one task per starting
word (or per chunk of them) with nothing shared but the read-only trie.
"""

import multiprocessing as mp
import os

import numpy as np

from wordcover.search import CoverSearch, SearchRules, SearchStats


_WORKER_STATE = {}


def starting_words(masks, rules: SearchRules = SearchRules()) -> np.ndarray:
    """Masks that can open a combination, in ascending order."""
    masks = np.asarray(masks, dtype=np.uint32)
    return masks[(masks & np.uint32(rules.seed_mask)) > 0]


def _init_worker(trie, rules):
    _WORKER_STATE["trie"] = trie
    _WORKER_STATE["rules"] = rules


def _worker_chunk(task):
    trie = _WORKER_STATE["trie"]
    rules = _WORKER_STATE["rules"]

    found = []
    searcher = CoverSearch(trie, found.append, rules)
    for start in task:
        searcher.run(start)

    return {
        "completed": len(task),
        "combinations": found,
        "stats": searcher.stats,
    }


def make_tasks(starts, chunk_size=1):
    chunk_size = max(1, int(chunk_size))
    starts = [int(s) for s in starts]
    return [starts[i:i + chunk_size] for i in range(0, len(starts), chunk_size)]


def run_search(trie, starts, rules: SearchRules = SearchRules(), workers=None, chunk_size=1):
    """
    Yield one result dict per task as tasks finish, in no particular order.

    Each result holds "completed" (starting words searched), "combinations"
    (tuples of masks) and "stats" (SearchStats). With a single worker the
    tasks run in this process.
    """
    worker_count = workers if workers is not None else (os.cpu_count() or 1)
    worker_count = max(1, int(worker_count))
    tasks = make_tasks(starts, chunk_size)

    if worker_count == 1:
        _init_worker(trie, rules)
        try:
            for task in tasks:
                yield _worker_chunk(task)
        finally:
            _WORKER_STATE.clear()
        return

    start_methods = mp.get_all_start_methods()
    start_method = "fork" if "fork" in start_methods else "spawn"
    ctx = mp.get_context(start_method)

    with ctx.Pool(
        processes=worker_count,
        initializer=_init_worker,
        initargs=(trie, rules),
    ) as pool:
        yield from pool.imap_unordered(_worker_chunk, tasks, chunksize=1)


def collect(results):
    """Drain run_search results into (combinations, stats)."""
    combinations = []
    stats = SearchStats()
    for result in results:
        combinations.extend(result["combinations"])
        stats.merge(result["stats"])
    return combinations, stats
