"""
Tests for the benchmark harness: config loading, validation, timing, CLI.
"""

import json

import pytest
import numpy as np

from tinyfft.bench import (
    BenchmarkConfig,
    TimingResult,
    random_signal,
    time_transform,
    run_benchmark,
    main,
)


class TestConfig:

    def test_defaults(self):
        config = BenchmarkConfig()
        assert config.size == 1024
        assert config.transforms == ["dft", "idft", "fft", "ifft"]
        config.validate()

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "bench.yaml"
        path.write_text(
            "benchmark:\n"
            "  size: 64\n"
            "  repeats: 3\n"
            "  transforms: [fft]\n"
            "  unknown_key: 1\n"
            "logging:\n"
            "  log_level: DEBUG\n"
        )
        config = BenchmarkConfig.from_yaml(str(path))
        assert config.size == 64
        assert config.repeats == 3
        assert config.transforms == ["fft"]
        assert config.log_level == "DEBUG"
        assert not hasattr(config, "unknown_key")

    def test_from_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert BenchmarkConfig.from_yaml(str(path)) == BenchmarkConfig()

    def test_from_yaml_empty_section(self, tmp_path):
        """A section header with nothing under it keeps the defaults."""
        path = tmp_path / "bench.yaml"
        path.write_text("benchmark:\nlogging:\n  log_level: WARNING\n")
        config = BenchmarkConfig.from_yaml(str(path))
        assert config.size == 1024
        assert config.log_level == "WARNING"

    @pytest.mark.parametrize("overrides", [
        {"size": 0},
        {"repeats": 0},
        {"transforms": ["rfft"]},
        {"baselines": ["fftw"]},
        {"size": 100},
    ])
    def test_validate_rejects(self, overrides):
        config = BenchmarkConfig(**overrides)
        with pytest.raises(ValueError):
            config.validate()

    def test_naive_only_allows_any_size(self):
        BenchmarkConfig(size=100, transforms=["dft", "idft"]).validate()


class TestTiming:

    def test_random_signal_seeded(self):
        a = random_signal(16, seed=7)
        b = random_signal(16, seed=7)
        assert a.dtype == np.float64
        np.testing.assert_array_equal(a, b)

    def test_random_signal_unit_interval(self):
        """Samples are uniform on [0, 1)."""
        x = random_signal(4096, seed=3)
        assert x.min() >= 0.0
        assert x.max() < 1.0
        assert abs(x.mean() - 0.5) < 0.05

    def test_time_transform(self):
        calls = []
        result = time_transform("noop", calls.append, [1.0, 2.0], repeats=4)
        assert len(calls) == 4
        assert result.size == 2
        assert result.repeats == 4
        assert 0 <= result.best <= result.mean
        assert result.total == pytest.approx(result.mean * 4)
        assert "noop" in result.summary()

    def test_run_benchmark_all_cases(self):
        config = BenchmarkConfig(size=16, repeats=2)
        results = run_benchmark(config)
        names = [r.name for r in results]
        assert names == ["dft", "idft", "fft", "ifft",
                         "numpy.fft", "numpy.ifft", "torch.fft", "torch.ifft"]
        assert all(isinstance(r, TimingResult) for r in results)
        assert all(r.size == 16 for r in results)

    def test_run_benchmark_writes_json(self, tmp_path):
        out = tmp_path / "out" / "results.json"
        config = BenchmarkConfig(size=8, repeats=1, baselines=[], output=str(out))
        run_benchmark(config)

        data = json.loads(out.read_text())
        assert data["config"]["size"] == 8
        assert [r["name"] for r in data["results"]] == ["dft", "idft", "fft", "ifft"]


class TestCLI:

    def test_main(self, tmp_path):
        out = tmp_path / "r.json"
        rc = main(["--size", "8", "--repeats", "1", "--output", str(out)])
        assert rc == 0
        assert out.exists()

    def test_main_with_config(self, tmp_path):
        cfg = tmp_path / "bench.yaml"
        cfg.write_text("benchmark:\n  size: 4\n  repeats: 1\n  baselines: []\n")
        out = tmp_path / "r.json"
        assert main(["--config", str(cfg), "--output", str(out)]) == 0
        assert json.loads(out.read_text())["config"]["size"] == 4

    def test_main_rejects_bad_size(self):
        with pytest.raises(SystemExit) as exc:
            main(["--size", "12"])
        assert exc.value.code == 2
