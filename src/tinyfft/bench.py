"""
Transform Benchmark

Times dft/idft/fft/ifft on a random real signal (default N=1024) and,
for comparison, the numpy and torch library FFTs on the same data.

Usage:
    tinyfft-bench
    tinyfft-bench --size 512 --repeats 20
    tinyfft-bench --config configs/bench.yaml --output results.json

Config YAML:
    benchmark:
      size: 1024
      repeats: 10
      seed: 42
      transforms: [dft, idft, fft, ifft]
      baselines: [numpy, torch]
      output: null
    logging:
      log_level: INFO
"""

import argparse
import json
import logging
import time
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
import torch
import yaml

from .dft import dft, idft
from .fft import fft, ifft, is_power_of_two

logger = logging.getLogger(__name__)

TRANSFORMS = ("dft", "idft", "fft", "ifft")
BASELINES = ("numpy", "torch")


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class BenchmarkConfig:
    """Benchmark configuration."""
    size: int = 1024
    repeats: int = 10
    seed: int = 42
    transforms: List[str] = field(default_factory=lambda: list(TRANSFORMS))
    baselines: List[str] = field(default_factory=lambda: list(BASELINES))

    # Logging / output
    log_level: str = "INFO"
    output: Optional[str] = None

    @classmethod
    def from_yaml(cls, path: str) -> "BenchmarkConfig":
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        config = cls()

        # Flatten nested structure
        for section in ['benchmark', 'logging']:
            if section in data:
                for key, value in (data[section] or {}).items():
                    if hasattr(config, key):
                        setattr(config, key, value)

        return config

    def validate(self):
        if self.size < 1:
            raise ValueError(f"size must be positive, got {self.size}")
        if self.repeats < 1:
            raise ValueError(f"repeats must be positive, got {self.repeats}")

        unknown = [t for t in self.transforms if t not in TRANSFORMS]
        if unknown:
            raise ValueError(f"Unknown transforms {unknown}. Available: {list(TRANSFORMS)}")
        unknown = [b for b in self.baselines if b not in BASELINES]
        if unknown:
            raise ValueError(f"Unknown baselines {unknown}. Available: {list(BASELINES)}")

        fast = [t for t in self.transforms if t in ("fft", "ifft")]
        if fast and not is_power_of_two(self.size):
            raise ValueError(f"{fast} require a power-of-two size, got {self.size}")


# =============================================================================
# Timing
# =============================================================================

@dataclass
class TimingResult:
    """Wall-clock timings for one transform, in seconds."""
    name: str
    size: int
    repeats: int
    best: float
    mean: float
    total: float

    def summary(self) -> str:
        return (f"{self.name:<12} N={self.size:<6d} "
                f"best={self.best * 1e3:9.3f} ms  mean={self.mean * 1e3:9.3f} ms")


def random_signal(size: int, seed: int = 42) -> np.ndarray:
    """Uniform float64 samples on [0, 1)."""
    rng = np.random.default_rng(seed)
    return rng.random(size)


def time_transform(name: str, fn: Callable, x, repeats: int) -> TimingResult:
    """Call fn(x) `repeats` times and record per-call timings."""
    times = []
    for _ in range(repeats):
        start = time.perf_counter()
        fn(x)
        times.append(time.perf_counter() - start)

    total = sum(times)
    return TimingResult(
        name=name,
        size=len(x),
        repeats=repeats,
        best=min(times),
        mean=total / repeats,
        total=total,
    )


def _cases(config: BenchmarkConfig, x: np.ndarray) -> List[Tuple[str, Callable, object]]:
    """(name, fn, input) for every requested transform and baseline."""
    cases = []

    # Inverse transforms are fed the spectrum from their own forward engine
    spectra: Dict[str, np.ndarray] = {}
    if "idft" in config.transforms:
        spectra["idft"] = dft(x)
    if "ifft" in config.transforms:
        spectra["ifft"] = fft(x)

    engines = {"dft": dft, "idft": idft, "fft": fft, "ifft": ifft}
    for name in config.transforms:
        cases.append((name, engines[name], spectra.get(name, x)))

    if "numpy" in config.baselines:
        X = np.fft.fft(x)
        cases.append(("numpy.fft", np.fft.fft, x))
        cases.append(("numpy.ifft", np.fft.ifft, X))

    if "torch" in config.baselines:
        t = torch.from_numpy(x)
        T = torch.fft.fft(t)
        cases.append(("torch.fft", torch.fft.fft, t))
        cases.append(("torch.ifft", torch.fft.ifft, T))

    return cases


def run_benchmark(config: BenchmarkConfig) -> List[TimingResult]:
    """Run every case in the config and return its timings."""
    config.validate()
    x = random_signal(config.size, config.seed)
    logger.info(f"Benchmark: N={config.size}, repeats={config.repeats}, seed={config.seed}")

    results = []
    for name, fn, inp in _cases(config, x):
        result = time_transform(name, fn, inp, config.repeats)
        logger.info(result.summary())
        results.append(result)

    if config.output:
        path = Path(config.output)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump({
                "config": asdict(config),
                "results": [asdict(r) for r in results],
            }, f, indent=2)
        logger.info(f"Results written to {path}")

    return results


# =============================================================================
# CLI
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark tinyfft transforms")
    parser.add_argument("--config", type=str, help="Path to config YAML")
    parser.add_argument("--size", type=int, help="Override signal length")
    parser.add_argument("--repeats", type=int, help="Override repeat count")
    parser.add_argument("--seed", type=int, help="Override random seed")
    parser.add_argument("--output", type=str, help="Write results as JSON")
    parser.add_argument("--log-level", type=str, help="Logging level (DEBUG, INFO, ...)")

    args = parser.parse_args(argv)

    config = BenchmarkConfig.from_yaml(args.config) if args.config else BenchmarkConfig()
    for key in ("size", "repeats", "seed", "output", "log_level"):
        value = getattr(args, key)
        if value is not None:
            setattr(config, key, value)

    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.INFO),
        format='%(asctime)s | %(levelname)s | %(message)s',
    )

    run_benchmark(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
