"""
Sorting Algorithm Comparison Suite - Core Module
================================================

Contains: configuration, input parsing and generation, the algorithm
registry, the input-case classifier, the benchmark engine, and report
generation.
"""

from __future__ import annotations
import gc, html, json, platform, random, re, sys, time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union
from contextlib import contextmanager

import numpy as np

from sorting_algorithms import (
    bubble_sort, selection_sort, insertion_sort, merge_sort, quick_sort,
    is_sorted, is_reverse_sorted,
)

# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class BenchmarkConfig:
    seed: Optional[int] = None
    default_length: int = 10
    max_length: int = 10_000
    min_value: int = 1
    max_value: int = 1000
    gc_between_runs: bool = True
    verify: bool = True

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


DEFAULT_LENGTH = BenchmarkConfig.default_length
DEFAULT_MIN_VALUE = BenchmarkConfig.min_value
DEFAULT_MAX_VALUE = BenchmarkConfig.max_value

class Colors:
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    BOLD = '\033[1m'
    END = '\033[0m'

    @classmethod
    def disable(cls):
        for a in ['HEADER','CYAN','GREEN','YELLOW','RED','BOLD','END']:
            setattr(cls, a, '')

if not sys.stdout.isatty():
    Colors.disable()

# =============================================================================
# Input Parsing & Generation
# =============================================================================

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def _parse_int(token: str) -> Optional[int]:
    # ASCII digits with an optional sign only
    if not _INT_TOKEN.fullmatch(token):
        return None
    return int(token)


def parse_sequence(text: str) -> List[int]:
    """Parse comma-separated integers, silently dropping malformed tokens."""
    if not text:
        return []
    values = (_parse_int(tok.strip()) for tok in text.split(","))
    return [v for v in values if v is not None]


def parse_length(text: Optional[str], default: int = DEFAULT_LENGTH) -> int:
    """Read a requested length; empty, invalid or non-positive text gives the default."""
    n = _parse_int(text.strip()) if text else None
    return n if n is not None and n > 0 else default


def format_sequence(values: Sequence[int]) -> str:
    return ", ".join(str(v) for v in values)


def generate_random_sequence(length: Optional[int] = DEFAULT_LENGTH,
                             min_value: int = DEFAULT_MIN_VALUE,
                             max_value: int = DEFAULT_MAX_VALUE,
                             rng: Optional[random.Random] = None) -> str:
    """
    Generate `length` uniform random ints in [min_value, max_value], rendered
    in the text format parse_sequence() reads.

    A missing or non-positive length falls back to the default of 10. No
    upper limit is enforced here; that is up to the caller.
    """
    if not length or length <= 0:
        length = DEFAULT_LENGTH
    r = rng if rng is not None else random
    return format_sequence([r.randint(min_value, max_value) for _ in range(length)])


class InputGenerator(ABC):
    @property
    @abstractmethod
    def name(self) -> str: pass

    @property
    @abstractmethod
    def description(self) -> str: pass

    @abstractmethod
    def generate(self, n: int, rng: random.Random,
                 lo: int = DEFAULT_MIN_VALUE, hi: int = DEFAULT_MAX_VALUE) -> List[int]: pass

class RandomValues(InputGenerator):
    name = "random"
    description = "Uniform random values"
    def generate(self, n, rng, lo=DEFAULT_MIN_VALUE, hi=DEFAULT_MAX_VALUE):
        return [rng.randint(lo, hi) for _ in range(n)]

class AlreadySorted(InputGenerator):
    name = "sorted"
    description = "Already sorted (ascending)"
    def generate(self, n, rng, lo=DEFAULT_MIN_VALUE, hi=DEFAULT_MAX_VALUE):
        return sorted(rng.randint(lo, hi) for _ in range(n))

class ReverseSorted(InputGenerator):
    name = "reversed"
    description = "Descending order"
    def generate(self, n, rng, lo=DEFAULT_MIN_VALUE, hi=DEFAULT_MAX_VALUE):
        return sorted((rng.randint(lo, hi) for _ in range(n)), reverse=True)

class NearlySorted(InputGenerator):
    name = "nearly_sorted"
    description = "Sorted with ~1% swaps"
    def generate(self, n, rng, lo=DEFAULT_MIN_VALUE, hi=DEFAULT_MAX_VALUE):
        a = sorted(rng.randint(lo, hi) for _ in range(n))
        if n < 2:
            return a
        for _ in range(max(1, n // 100)):
            i, j = rng.randrange(n), rng.randrange(n)
            a[i], a[j] = a[j], a[i]
        return a

class FewUnique(InputGenerator):
    name = "few_unique"
    description = "Only 10 unique values"
    def generate(self, n, rng, lo=DEFAULT_MIN_VALUE, hi=DEFAULT_MAX_VALUE):
        pool = [rng.randint(lo, hi) for _ in range(10)]
        return [rng.choice(pool) for _ in range(n)]

class AllEqual(InputGenerator):
    name = "all_equal"
    description = "All elements identical"
    def generate(self, n, rng, lo=DEFAULT_MIN_VALUE, hi=DEFAULT_MAX_VALUE):
        return [rng.randint(lo, hi)] * n


INPUT_GENERATORS: Dict[str, InputGenerator] = {g.name: g for g in [
    RandomValues(), AlreadySorted(), ReverseSorted(), NearlySorted(),
    FewUnique(), AllEqual(),
]}


# =============================================================================
# Algorithms
# =============================================================================

class Algorithm(str, Enum):
    BUBBLE = "Bubble"
    SELECTION = "Selection"
    INSERTION = "Insertion"
    MERGE = "Merge"
    QUICK = "Quick"

    @classmethod
    def lookup(cls, name: Union[str, "Algorithm"]) -> Optional["Algorithm"]:
        """Resolve an algorithm identity, or None when it is not registered."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            return None


class CaseLabel(str, Enum):
    BEST = "Best"
    AVERAGE = "Average"
    WORST = "Worst"
    AVERAGE_FIXED = "Average (fixed time)"
    BEST_AVERAGE_RANDOM_PIVOT = "Best/Average (random pivot)"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ComplexityProfile:
    best: str
    average: str
    worst: str


@dataclass(frozen=True)
class AlgorithmInfo:
    algorithm: Algorithm
    function: Callable[[List[int]], List[int]]
    complexity: ComplexityProfile
    stable: bool
    in_place: bool
    description: str

    @property
    def name(self) -> str:
        return self.algorithm.value

    def __call__(self, arr):
        return self.function(arr)


# Registration order is the order results are reported in.
ALGORITHMS: Dict[Algorithm, AlgorithmInfo] = {
    Algorithm.BUBBLE: AlgorithmInfo(
        Algorithm.BUBBLE, bubble_sort,
        ComplexityProfile("O(n)", "O(n^2)", "O(n^2)"), True, True,
        "Steps through the list comparing adjacent elements and swapping them "
        "when they are out of order, until a pass makes no swaps. Simple, but "
        "its quadratic cost rules it out for large inputs."),
    Algorithm.SELECTION: AlgorithmInfo(
        Algorithm.SELECTION, selection_sort,
        ComplexityProfile("O(n^2)", "O(n^2)", "O(n^2)"), False, True,
        "Splits the list into a sorted and an unsorted part and keeps moving "
        "the minimum of the unsorted part to the end of the sorted one. Makes "
        "the same number of comparisons whatever the input."),
    Algorithm.INSERTION: AlgorithmInfo(
        Algorithm.INSERTION, insertion_sort,
        ComplexityProfile("O(n)", "O(n^2)", "O(n^2)"), True, True,
        "Builds the sorted list one element at a time by inserting each new "
        "element into the sorted prefix. Efficient on small or nearly sorted "
        "data."),
    Algorithm.MERGE: AlgorithmInfo(
        Algorithm.MERGE, merge_sort,
        ComplexityProfile("O(n log n)", "O(n log n)", "O(n log n)"), True, False,
        "Divide and conquer: splits the list into halves, sorts them "
        "recursively and merges the sorted halves. Consistent O(n log n) "
        "performance."),
    Algorithm.QUICK: AlgorithmInfo(
        Algorithm.QUICK, quick_sort,
        ComplexityProfile("O(n log n)", "O(n log n)", "O(n^2)"), False, False,
        "Divide and conquer: picks a pivot (here the last element), partitions "
        "the list around it and sorts the partitions. Very fast on average, "
        "but degrades to O(n^2) when the pivot is always an extremum, as on "
        "sorted or reverse-sorted input."),
}


# =============================================================================
# Case Classification
# =============================================================================

def classify_case(arr: Sequence[int], algorithm: Union[str, Algorithm]) -> CaseLabel:
    """
    Label the pre-sort arrangement of arr as a best/average/worst case for
    the given algorithm.

    This is a theoretical label derived from the input shape and each
    algorithm's traversal or pivot strategy; it is not checked against the
    measured time. Unregistered algorithm names yield CaseLabel.UNKNOWN.
    """
    algo = Algorithm.lookup(algorithm)
    if algo is None:
        return CaseLabel.UNKNOWN

    if algo in (Algorithm.BUBBLE, Algorithm.INSERTION):
        if is_sorted(arr):
            return CaseLabel.BEST
        if is_reverse_sorted(arr):
            return CaseLabel.WORST
        return CaseLabel.AVERAGE
    if algo in (Algorithm.SELECTION, Algorithm.MERGE):
        return CaseLabel.AVERAGE_FIXED
    # Algorithm.QUICK: a last-element pivot is an extremum on monotonic input
    if is_sorted(arr) or is_reverse_sorted(arr):
        return CaseLabel.WORST
    return CaseLabel.BEST_AVERAGE_RANDOM_PIVOT


# =============================================================================
# Result Types
# =============================================================================

@dataclass(frozen=True)
class ResultRecord:
    algorithm: str
    time_ms: float
    case: CaseLabel
    sorted_values: Tuple[int, ...]
    complexity: ComplexityProfile
    correct: bool
    error: Optional[str] = None

    @property
    def sorted_text(self) -> str:
        return format_sequence(self.sorted_values)

    def to_dict(self):
        return {
            "name": self.algorithm,
            "time": self.time_ms,
            "case": self.case.value,
            "sorted": self.sorted_text,
            "best": self.complexity.best,
            "average": self.complexity.average,
            "worst": self.complexity.worst,
            "correct": self.correct,
            "error": self.error,
        }


@dataclass(frozen=True)
class ResultSet:
    input: Tuple[int, ...]
    records: Tuple[ResultRecord, ...] = ()

    def __iter__(self) -> Iterator[ResultRecord]:
        return iter(self.records)

    def __len__(self):
        return len(self.records)

    def __getitem__(self, index):
        return self.records[index]

    @property
    def names(self) -> List[str]:
        return [r.algorithm for r in self.records]

    def by_name(self, name: str) -> Optional[ResultRecord]:
        return next((r for r in self.records if r.algorithm == name), None)

    def fastest(self) -> Optional[ResultRecord]:
        ok = [r for r in self.records if r.correct]
        return min(ok, key=lambda r: r.time_ms) if ok else None

    @property
    def all_correct(self) -> bool:
        return all(r.correct for r in self.records)

    def to_dict(self):
        return {
            "input": list(self.input),
            "results": [r.to_dict() for r in self.records],
        }


# =============================================================================
# Benchmark Engine
# =============================================================================

def reference_sort(arr: Sequence[int]) -> List[int]:
    """Oracle used to verify each algorithm's output."""
    # object dtype keeps arbitrary-precision ints intact
    return np.sort(np.array(list(arr), dtype=object)).tolist()


class BenchmarkEngine:
    def __init__(self, config: BenchmarkConfig = BenchmarkConfig()):
        self.config = config

    @contextmanager
    def _gc_pause(self):
        if self.config.gc_between_runs:
            gc.collect()
            gc.disable()
        try:
            yield
        finally:
            if self.config.gc_between_runs:
                gc.enable()

    def time_once(self, fn, arr):
        """Time a single call of fn on a private copy of arr; returns (seconds, output)."""
        a = list(arr)
        with self._gc_pause():
            t0 = time.perf_counter()
            result = fn(a)
            t1 = time.perf_counter()
        return (t1 - t0, result if result is not None else a)

    def run_algorithm(self, algo: AlgorithmInfo, arr: Sequence[int],
                      expected: Optional[List[int]] = None) -> ResultRecord:
        case = classify_case(arr, algo.algorithm)
        try:
            elapsed, output = self.time_once(algo.function, arr)
        except Exception as e:
            return ResultRecord(algo.name, 0.0, case, (), algo.complexity,
                                False, f"{type(e).__name__}: {e}")

        correct = list(output) == expected if expected is not None else True
        return ResultRecord(algo.name, round(elapsed * 1000, 3), case,
                            tuple(output), algo.complexity, correct)

    def run(self, arr: Sequence[int],
            on_result: Optional[Callable[[ResultRecord, int, int], None]] = None) -> ResultSet:
        """
        Run every registered algorithm on its own copy of arr, in registration
        order, and collect one ResultRecord each.

        on_result(record, index, total) is called after each algorithm so an
        interactive host can refresh between the (possibly slow) passes.
        """
        original = tuple(arr)
        expected = reference_sort(original) if self.config.verify else None
        records = []
        total = len(ALGORITHMS)
        for i, algo in enumerate(ALGORITHMS.values()):
            record = self.run_algorithm(algo, original, expected)
            records.append(record)
            if on_result is not None:
                on_result(record, i, total)
        return ResultSet(original, tuple(records))


# =============================================================================
# Formatting & Output
# =============================================================================

def fmt_ms(t):
    """Format a millisecond time with 3 decimals."""
    return f"{t:.3f} ms"


def truncate(text, width=60):
    return text if len(text) <= width else text[:width - 3] + "..."


def get_system_info():
    """Gather system information for reproducibility."""
    return {
        "timestamp": datetime.now().isoformat(),
        "python_version": sys.version,
        "platform": platform.platform(),
        "processor": platform.processor() or "unknown",
        "machine": platform.machine(),
        "numpy_version": np.__version__,
    }


def build_report(results: ResultSet, config: BenchmarkConfig) -> Dict[str, Any]:
    """Assemble the JSON-serialisable report for a result set."""
    metadata = get_system_info()
    metadata["config"] = {
        "seed": config.seed,
        "max_length": config.max_length,
        "min_value": config.min_value,
        "max_value": config.max_value,
        "gc_between_runs": config.gc_between_runs,
    }
    report = {"metadata": metadata}
    report.update(results.to_dict())
    return report


def write_json_report(results: ResultSet, config: BenchmarkConfig, path: str):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(build_report(results, config), f, indent=2, default=str)


def print_header(text):
    print(f"\n{Colors.BOLD}{Colors.HEADER}{'='*70}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.HEADER}{text.center(70)}{Colors.END}")
    print(f"{Colors.BOLD}{Colors.HEADER}{'='*70}{Colors.END}\n")


def print_subheader(text):
    print(f"\n{Colors.BOLD}{Colors.CYAN}{text}{Colors.END}")
    print(f"{Colors.CYAN}{'-'*len(text)}{Colors.END}")


def _case_color(case: CaseLabel) -> str:
    if case == CaseLabel.BEST:
        return Colors.GREEN
    if case == CaseLabel.WORST:
        return Colors.RED
    return Colors.YELLOW


def print_results_table(results: ResultSet):
    """Print one row per algorithm, in registration order."""
    fastest = results.fastest()
    hdr = (f"{'Algorithm':<12} {'Time':>12} {'Case':<28} "
           f"{'Best':>11} {'Avg':>11} {'Worst':>11} {'Status':>7}")
    print(f"{Colors.BOLD}{hdr}{Colors.END}")
    print("-" * len(hdr))

    for r in results:
        if r.error:
            print(f"{r.algorithm:<12} {'-':>12} {r.case.value:<28} {'-':>11} {'-':>11} {'-':>11} "
                  f"{Colors.RED}{'ERROR':>7}{Colors.END}")
            continue

        c = r.complexity
        time_clr = Colors.GREEN if fastest is not None and r is fastest else ""
        status = (f"{Colors.GREEN}{'OK':>7}{Colors.END}" if r.correct
                  else f"{Colors.RED}{'FAIL':>7}{Colors.END}")
        print(f"{r.algorithm:<12} {time_clr}{fmt_ms(r.time_ms):>12}{Colors.END} "
              f"{_case_color(r.case)}{r.case.value:<28}{Colors.END} "
              f"{c.best:>11} {c.average:>11} {c.worst:>11} {status}")


def print_result_cards(results: ResultSet, width=60):
    """Print a summary card per algorithm with its sorted output."""
    for r in results:
        print_subheader(f"{r.algorithm} Sort")
        print(f"  {Colors.GREEN}Time:{Colors.END}   {fmt_ms(r.time_ms)}")
        print(f"  {Colors.YELLOW}Case:{Colors.END}   {r.case.value}")
        print(f"  {Colors.YELLOW}Best:{Colors.END}   {r.complexity.best}")
        print(f"  {Colors.YELLOW}Avg:{Colors.END}    {r.complexity.average}")
        print(f"  {Colors.RED}Worst:{Colors.END}  {r.complexity.worst}")
        if r.error:
            print(f"  {Colors.RED}Error:{Colors.END}  {r.error}")
        else:
            print(f"  Sorted: {truncate(r.sorted_text, width)}")


def print_overview():
    """Print the descriptive overview of every registered algorithm."""
    print_header("Sorting Algorithms Overview")
    for info in ALGORITHMS.values():
        c = info.complexity
        print_subheader(f"{info.name} Sort")
        print(f"  {info.description}")
        print(f"  Best {c.best} | Avg {c.average} | Worst {c.worst} | "
              f"{'stable' if info.stable else 'not stable'} | "
              f"{'in-place' if info.in_place else 'extra memory'}")


def generate_html_report(results: ResultSet, path: str, metadata: Optional[Dict[str, Any]] = None):
    """Generate HTML report with a Chart.js bar chart and per-algorithm cards."""
    css = """<style>
*{margin:0;padding:0;box-sizing:border-box}
body{font-family:system-ui,-apple-system,sans-serif;background:#0f172a;color:#e2e8f0;padding:2rem}
.container{max-width:1200px;margin:0 auto}
h1{font-size:2rem;color:#60a5fa;text-align:center;margin-bottom:1rem}
h2{color:#60a5fa;margin:2rem 0 1rem;border-bottom:1px solid #1e293b;padding-bottom:.5rem}
h3{color:#93c5fd;margin-bottom:.5rem}
.card{background:#1f2937;border-radius:8px;padding:1.5rem;margin-bottom:1.5rem}
.grid{display:grid;grid-template-columns:repeat(auto-fit,minmax(200px,1fr));gap:1rem}
.label-time{color:#4ade80}.label-case,.label-best,.label-avg{color:#facc15}.label-worst{color:#f87171}
.sorted{margin-top:.5rem;font-size:.85rem;color:#cbd5e1;word-break:break-word}
.fail{color:#f87171}
.chart{height:300px;margin:1rem 0}
.note{font-size:.85rem;color:#94a3b8;text-align:center}
footer{text-align:center;padding:2rem;color:#64748b}
</style>"""

    cards_html = ""
    for r in results:
        c = r.complexity
        sorted_html = (f"<p class='fail'>Error: {html.escape(r.error)}</p>" if r.error
                       else f"<p class='sorted'>Sorted: {html.escape(r.sorted_text)}</p>")
        cards_html += f"""
        <div class="card">
            <h3>{html.escape(r.algorithm)} Sort</h3>
            <p><span class="label-time">Time:</span> {r.time_ms:.3f} ms</p>
            <p><span class="label-case">Case:</span> {html.escape(r.case.value)}</p>
            <p><span class="label-best">Best:</span> {c.best}</p>
            <p><span class="label-avg">Avg:</span> {c.average}</p>
            <p><span class="label-worst">Worst:</span> {c.worst}</p>
            {sorted_html}
        </div>"""

    overview_html = "".join(
        f"<h3>{info.name} Sort</h3><p style='margin-bottom:1rem'>{html.escape(info.description)}</p>"
        for info in ALGORITHMS.values())

    chart_js = f"""
const ctx = document.getElementById('times').getContext('2d');
new Chart(ctx, {{
    type: 'bar',
    data: {{
        labels: {json.dumps(results.names)},
        datasets: [{{
            label: 'time',
            data: {json.dumps([r.time_ms for r in results])},
            backgroundColor: '#60a5fa'
        }}]
    }},
    options: {{
        responsive: true,
        maintainAspectRatio: false,
        scales: {{
            y: {{beginAtZero: true, title: {{display: true, text: 'Time (ms)'}}}},
            x: {{title: {{display: true, text: 'Algorithm'}}}}
        }}
    }}
}});"""

    m = metadata or get_system_info()
    doc = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Sorting Algorithm Comparison</title>
    <script src="https://cdn.jsdelivr.net/npm/chart.js"></script>
    {css}
</head>
<body>
<div class="container">
    <h1>Sorting Algorithm Comparison</h1>
    <p class="note">{html.escape(str(m.get('timestamp', '')))} | n = {len(results.input):,}</p>

    <div class="card">
        <h2>Input</h2>
        <p class="sorted">{html.escape(truncate(format_sequence(results.input), 2000))}</p>
    </div>

    <div class="card">
        <div class="chart"><canvas id="times"></canvas></div>
        <p class="note">Time in milliseconds (ms)</p>
    </div>

    <div class="grid">{cards_html}
    </div>

    <div class="card">
        <h2>Sorting Algorithms Overview</h2>
        {overview_html}
    </div>

    <footer>Sorting Algorithm Comparison Suite</footer>
</div>
<script>
{chart_js}
</script>
</body>
</html>"""

    with open(path, 'w', encoding='utf-8') as f:
        f.write(doc)
