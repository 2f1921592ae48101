from timeit import timeit

from lambda_expression.codec.church import church_encode, church_decode
from lambda_expression.codec.scott import scott_encode, scott_decode
from lambda_expression.combinators import add, mult
from lambda_expression.evaluation.run import run_on_integer_sequence
from lambda_expression.prelude import factorial_map, scott_reverse


def bench_church_round_trip(n: int = 200, rounds: int = 200) -> float:
    """Encode and decode a single numeral repeatedly."""
    # Warmup
    church_decode(church_encode(n))
    # Timed
    return timeit(lambda: church_decode(church_encode(n)), number=rounds)


def bench_church_arithmetic(rounds: int = 200) -> float:
    """Decode (12 + 30) * 7 built from the combinators."""
    expr = mult(add(church_encode(12))(church_encode(30)))(church_encode(7))
    church_decode(expr)
    return timeit(lambda: church_decode(expr), number=rounds)


def bench_scott_decode(length: int = 200, rounds: int = 20) -> float:
    """Decode a prebuilt list; decoding re-walks the spine for each cell."""
    lst = scott_encode([church_encode(i % 5) for i in range(length)])
    scott_decode(lst)
    return timeit(lambda: scott_decode(lst), number=rounds)


def _print_run(name: str, values: list[int], program, rounds: int) -> None:
    result = run_on_integer_sequence(values, program)
    t = timeit(lambda: run_on_integer_sequence(values, program), number=rounds)
    print(f"Benchmark: {name}")
    print(f"  time: {t:.6f}s  [rounds={rounds}]  result={result}")


if __name__ == "__main__":
    print("Benchmark: church round trip (n=200)")
    print(f"  time: {bench_church_round_trip():.6f}s")

    print("Benchmark: church arithmetic ((12 + 30) * 7)")
    print(f"  time: {bench_church_arithmetic():.6f}s")

    print("Benchmark: scott decode (200 cells)")
    print(f"  time: {bench_scott_decode():.6f}s")

    _print_run("factorial map [1..5]", [1, 2, 3, 4, 5], factorial_map, rounds=5)
    _print_run("reverse [0..49]", list(range(50)), scott_reverse, rounds=5)
