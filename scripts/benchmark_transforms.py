#!/usr/bin/env python3
"""
Benchmark: naive DFT vs radix-2 FFT (and numpy/torch baselines)

Run from the repo root without installing:
    python scripts/benchmark_transforms.py --config configs/bench.yaml
"""

import os
import sys

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tinyfft.bench import main


if __name__ == "__main__":
    sys.exit(main())
