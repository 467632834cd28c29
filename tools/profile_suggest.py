# tools/profile_suggest.py
"""
Small profiling harness for SuggestionEngine.get_best_suggestions.
Usage:
  python tools/profile_suggest.py data/sample_corpus.txt --size 1000 --warm 50 --iters 500

Queries are drawn from the corpus vocabulary (prefixes and one-letter typos
of known words). Prints mean/median/std latency and a sample of suggestions.
"""
import argparse
import random
import statistics
import time
from typing import Dict, List, Sequence

from autocorrecter.context.ingest import load_corpus
from autocorrecter.core.suggestion_engine import SuggestionEngine


def make_queries(words: Sequence[str], n: int, seed: int = 7) -> List[str]:
    """Mix of prefixes and single-character typos of known words."""
    rng = random.Random(seed)
    pool = sorted(words)
    if not pool:
        return []
    out = []
    for _ in range(n):
        w = rng.choice(pool)
        if len(w) > 2 and rng.random() < 0.5:
            out.append(w[: rng.randint(1, len(w) - 1)])
        elif w:
            i = rng.randrange(len(w))
            out.append(w[:i] + rng.choice("abcdefghijklmnopqrstuvwxyz") + w[i + 1:])
        else:
            out.append(w)
    return out


def run_profile(engine: SuggestionEngine, queries: Sequence[str], warm: int = 50, iters: int = 500) -> Dict[str, float]:
    """Latency stats in ms over `iters` measured calls, after `warm` unmeasured ones."""
    if not queries:
        raise ValueError("no queries to profile")
    for i in range(warm):
        engine.get_best_suggestions(queries[i % len(queries)])

    latencies = []
    for i in range(iters):
        q = queries[i % len(queries)]
        t0 = time.perf_counter()
        engine.get_best_suggestions(q)
        latencies.append((time.perf_counter() - t0) * 1000.0)  # ms

    return {
        "mean": statistics.mean(latencies),
        "median": statistics.median(latencies),
        "stdev": statistics.pstdev(latencies),
        "min": min(latencies),
        "max": max(latencies),
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("corpus", help="text file to build the table from")
    parser.add_argument("--size", type=int, default=1000, help="hash table slot count")
    parser.add_argument("--warm", type=int, default=50, help="warmup iterations")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    parser.add_argument("--seed", type=int, default=7, help="query sampling seed")
    args = parser.parse_args()

    store = load_corpus(args.corpus, args.size)
    engine = SuggestionEngine(store)
    queries = make_queries(store.key_set(), max(args.iters, 1), seed=args.seed)

    print(f"{len(store)} words in {store.capacity} slots (load factor {store.load_factor():.2f})")
    print("Measuring...")
    stats = run_profile(engine, queries, warm=args.warm, iters=args.iters)
    print("Stats (ms): mean=%.3f median=%.3f stdev=%.3f min=%.3f max=%.3f" % (
        stats["mean"], stats["median"], stats["stdev"], stats["min"], stats["max"],
    ))

    print("\nSample suggestions:")
    for q in queries[:8]:
        print(f"  {q!r:>16} -> {engine.get_best_suggestions(q)}")


if __name__ == "__main__":
    main()
