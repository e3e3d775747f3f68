#!/usr/bin/env python3
"""
Accuracy and Speed Benchmark for the Radix-2 Engine

This script measures, for every configured size n:
  1. Max error of the forward transform against scipy.fft
  2. Max error of a forward/inverse round trip
  3. Time per in-place transform (ms), next to scipy.fft's time

Usage:
    python -m radixfft.benchmark [--config CONFIG_PATH] [--log-file LOG_FILE]
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Tuple

import numpy as np
import yaml
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from scipy.fft import fft as scipy_fft

from .fourier import NORM_MODES, check_length, fourier_transform
from .utils import (
    deinterleave,
    get_seed_from_config,
    interleave,
    set_seed,
    setup_logging,
)

console = Console()

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkConfig:
    """Settings for one benchmark run."""
    sizes: List[int] = field(default_factory=lambda: [64, 256, 1024, 4096])
    n_iter: int = 100
    seed: int = 0
    # Relative to max(1, max|X|)
    tolerance: float = 1e-10
    norm: str = 'backward'
    log_file: Optional[str] = None

    @classmethod
    def from_dict(cls, config: Optional[Dict]) -> 'BenchmarkConfig':
        """Build from a parsed YAML document; missing keys keep their defaults."""
        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ValueError(
                f"Benchmark config must be a mapping, got {type(config).__name__}"
            )
        section = config.get('benchmark') or {}
        log_cfg = config.get('logging') or {}
        for key, value in (('benchmark', section), ('logging', log_cfg)):
            if not isinstance(value, dict):
                raise ValueError(f"'{key}' section must be a mapping, got {type(value).__name__}")

        defaults = cls()
        seed = get_seed_from_config(config)
        return cls(
            sizes=[int(n) for n in section.get('sizes', defaults.sizes)],
            n_iter=int(section.get('n_iter', defaults.n_iter)),
            seed=defaults.seed if seed is None else seed,
            tolerance=float(section.get('tolerance', defaults.tolerance)),
            norm=str(section.get('norm', defaults.norm)),
            log_file=log_cfg.get('log_file', defaults.log_file),
        )

    def validate(self):
        if self.n_iter < 1:
            raise ValueError(f"n_iter must be >= 1, got {self.n_iter}")
        if self.norm not in NORM_MODES:
            raise ValueError(f"Unknown norm {self.norm!r}; expected one of {NORM_MODES}")
        for n in self.sizes:
            check_length(2 * n)


@dataclass
class BenchmarkResult:
    """Accuracy and timing for a single size."""
    n: int
    fft_error: float
    roundtrip_error: float
    time_ms: float
    scipy_time_ms: float
    passed: bool


def load_config(config_path: str) -> Dict:
    """Load configuration."""
    with open(config_path, 'r') as f:
        return yaml.safe_load(f) or {}


def _random_signal(n: int, rng: np.random.Generator) -> np.ndarray:
    return rng.standard_normal(n) + 1j * rng.standard_normal(n)


def measure_accuracy(
    n: int,
    rng: np.random.Generator,
    norm: str = 'backward'
) -> Tuple[float, float]:
    """
    Compare against scipy on a random complex signal of n samples.

    Returns:
        (forward error relative to max(1, max|X|), round-trip max abs error)
    """
    x = _random_signal(n, rng)
    data = interleave(x)

    fourier_transform(data, norm=norm)
    X_ref = scipy_fft(x, norm=norm)
    scale = max(1.0, float(np.abs(X_ref).max()))
    fft_error = float(np.abs(deinterleave(data) - X_ref).max()) / scale

    fourier_transform(data, inverse=True, norm=norm)
    roundtrip_error = float(np.abs(deinterleave(data) - x).max())

    return fft_error, roundtrip_error


def time_transform(
    n: int,
    n_iter: int,
    rng: np.random.Generator
) -> Tuple[float, float]:
    """
    Mean time per call in ms for the engine and for scipy.fft.

    The engine works in place, so the input is restored before every call
    and only the transform itself is timed.
    """
    x = _random_signal(n, rng)
    source = interleave(x)
    data = source.copy()

    # Warm up JIT
    fourier_transform(data)
    _ = scipy_fft(x)

    elapsed = 0.0
    for _ in range(n_iter):
        np.copyto(data, source)
        start = time.perf_counter()
        fourier_transform(data)
        elapsed += time.perf_counter() - start
    time_ours = elapsed / n_iter * 1000

    start = time.perf_counter()
    for _ in range(n_iter):
        _ = scipy_fft(x)
    time_scipy = (time.perf_counter() - start) / n_iter * 1000

    return time_ours, time_scipy


def run_benchmark(config: BenchmarkConfig) -> List[BenchmarkResult]:
    """Run accuracy and timing for every configured size."""
    config.validate()
    rng = set_seed(config.seed)

    logger.info(f"Benchmark config: {asdict(config)}")

    results = []
    for n in config.sizes:
        fft_error, roundtrip_error = measure_accuracy(n, rng, norm=config.norm)
        time_ours, time_scipy = time_transform(n, config.n_iter, rng)
        passed = fft_error < config.tolerance and roundtrip_error < config.tolerance

        result = BenchmarkResult(
            n=n,
            fft_error=fft_error,
            roundtrip_error=roundtrip_error,
            time_ms=time_ours,
            scipy_time_ms=time_scipy,
            passed=passed,
        )
        results.append(result)

        if passed:
            logger.info(f"n={n}: {asdict(result)}")
        else:
            logger.warning(
                f"n={n}: error above tolerance {config.tolerance:.1e} "
                f"(fft={fft_error:.2e}, roundtrip={roundtrip_error:.2e})"
            )

    return results


def display_results_table(results: List[BenchmarkResult], console: Console = console):
    """Display benchmark results."""
    table = Table(title="Radix-2 FFT Benchmark", box=box.ROUNDED)
    table.add_column("N", justify="right", style="bold")
    table.add_column("FFT Error", justify="right")
    table.add_column("Round Trip", justify="right")
    table.add_column("Ours (ms)", justify="right")
    table.add_column("Scipy (ms)", justify="right")
    table.add_column("Ratio", justify="right")
    table.add_column("Status", justify="center")

    for r in results:
        ratio = r.time_ms / r.scipy_time_ms if r.scipy_time_ms > 0 else float('inf')
        status = "[green]PASS[/green]" if r.passed else "[red]FAIL[/red]"
        table.add_row(
            str(r.n),
            f"{r.fft_error:.2e}",
            f"{r.roundtrip_error:.2e}",
            f"{r.time_ms:.4f}",
            f"{r.scipy_time_ms:.4f}",
            f"{ratio:.2f}x",
            status,
        )

    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Radix-2 FFT Benchmark")
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration file (defaults are used if omitted)'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Write a detailed log to this file'
    )
    args = parser.parse_args(argv)

    raw = load_config(args.config) if args.config else {}
    config = BenchmarkConfig.from_dict(raw)
    if args.log_file:
        config.log_file = args.log_file

    setup_logging(log_file=config.log_file, name='radixfft')

    try:
        results = run_benchmark(config)
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise

    display_results_table(results)

    if all(r.passed for r in results):
        console.print(Panel.fit(
            "[bold green]All sizes within tolerance[/bold green]",
            border_style="green"
        ))
        return 0

    console.print(Panel.fit(
        "[bold red]Some sizes exceeded tolerance[/bold red]",
        border_style="red"
    ))
    return 1


if __name__ == '__main__':
    sys.exit(main())
