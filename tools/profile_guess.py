# tools/profile_guess.py
"""
Small profiling harness for WordGuesser.guess.
Usage:
  python tools/profile_guess.py --words data/persian_words.txt --iters 1000

Queries are prefixes of the dictionary's own words. Prints median/p90/max
latency and a sample of guesses.
"""
import argparse
import random
import statistics
import time

from persian_word_guesser.core.loader import load_dictionary
from persian_word_guesser.core.wordlist import read_word_list


def build_queries(words, n=50, seed=7):
    rng = random.Random(seed)
    pool = [w for w in words if len(w) > 1] or words
    queries = []
    for _ in range(n):
        w = rng.choice(pool)
        queries.append(w[: rng.randint(1, len(w))])
    return queries


def benchmark(guesser, queries, iterations=500):
    times = []
    for i in range(iterations):
        q = queries[i % len(queries)]
        t0 = time.perf_counter()
        _ = guesser.guess(q)
        times.append((time.perf_counter() - t0) * 1000.0)  # ms
    return times


def summarize(times):
    times_sorted = sorted(times)
    return {
        "count": len(times_sorted),
        "mean_ms": round(statistics.mean(times_sorted), 4),
        "median_ms": round(statistics.median(times_sorted), 4),
        "p90_ms": round(times_sorted[max(0, int(0.9 * len(times_sorted)) - 1)], 4),
        "max_ms": round(max(times_sorted), 4),
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", default="data/persian_words.txt", help="word list to load")
    parser.add_argument("--warm", type=int, default=50, help="warmup iterations")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    args = parser.parse_args()

    words = read_word_list(args.words)
    t0 = time.perf_counter()
    guesser = load_dictionary(words).guesser
    print(f"Loaded {len(guesser.trie)} words in {(time.perf_counter() - t0) * 1000:.1f} ms")

    queries = build_queries(words)
    print("Warming up...")
    benchmark(guesser, queries, iterations=args.warm)

    print("Measuring...")
    print("Profiling summary (ms):", summarize(benchmark(guesser, queries, args.iters)))
    print("Sample guess output:", queries[0], "->", guesser.guess(queries[0])[:5])


if __name__ == "__main__":
    main()
