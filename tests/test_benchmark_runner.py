from __future__ import annotations

import io

import pytest

from lookup_bench.benchmarks.benchmark_runner import Benchmark, RunStage, validate_config
from lookup_bench.structures.adapter import StructureAdapter
from lookup_bench.structures.dictionary import DictionaryView
from lookup_bench.structures.linear import LinearScan
from lookup_bench.utils.errors import InvalidConfiguration

from conftest import FakeClock


class _RecordingScan(LinearScan):
    kind = "linear"

    def __init__(self) -> None:
        super().__init__()
        self.seen: list = []

    def lookup(self, key: str):
        self.seen.append(key)
        return super().lookup(key)


class _RecordingDict(DictionaryView):
    kind = "dictionary"

    def __init__(self) -> None:
        super().__init__()
        self.seen: list = []

    def lookup(self, key: str):
        self.seen.append(key)
        return super().lookup(key)


class _KeepingAdapter(StructureAdapter):
    """Remembers the last StructureSet it prepared."""

    def prepare(self, dataset: list):
        self.last = super().prepare(dataset)
        return self.last


def test_fake_clock_gives_exact_timings(fake_clock: FakeClock) -> None:
    blocks: list[str] = []
    bench = Benchmark([10], iterations=100, rng=3, clock=fake_clock, emit=blocks.append)

    reported = bench.run()

    assert reported == [(10, {"linear": 250.0, "hashmap": 250.0, "dictionary": 250.0})]
    assert fake_clock.reads == 6
    assert blocks == [
        "Data size: 10, Iterations: 100\n"
        "linear: 250.0000ms\n"
        "hashmap: 250.0000ms\n"
        "dictionary: 250.0000ms\n"
        "\n"
    ]


def test_stage_sequence_per_size(fake_clock: FakeClock) -> None:
    bench = Benchmark([5, 7], iterations=3, rng=0, clock=fake_clock, emit=lambda _: None)
    bench.run()

    expected = [
        RunStage.CONFIGURED,
        RunStage.DATASET_BUILT,
        RunStage.STRUCTURES_PREPARED,
        RunStage.KEYS_SAMPLED,
        RunStage.MEASURED,
        RunStage.MEASURED,
        RunStage.MEASURED,
        RunStage.REPORTED,
    ]
    for size in (5, 7):
        steps = [(stage, kind) for s, stage, kind in bench.history if s == size]
        assert [stage for stage, _ in steps] == expected
        assert [kind for stage, kind in steps if stage is RunStage.MEASURED] == [
            "linear", "hashmap", "dictionary",
        ]
    assert bench.stage is RunStage.REPORTED


def test_real_clock_timings_are_non_negative() -> None:
    reported = Benchmark([900, 1500], iterations=2000, rng=11, emit=lambda _: None).run()

    assert [size for size, _ in reported] == [900, 1500]
    for _, result in reported:
        assert list(result) == ["linear", "hashmap", "dictionary"]
        assert all(ms >= 0 for ms in result.values())


def test_empty_size_aborts_run_after_earlier_blocks(fake_clock: FakeClock) -> None:
    blocks: list[str] = []
    bench = Benchmark([10, 0, 20], iterations=5, rng=1, clock=fake_clock, emit=blocks.append)

    with pytest.raises(InvalidConfiguration):
        bench.run()

    assert len(blocks) == 1
    assert blocks[0].startswith("Data size: 10,")
    assert bench.stage is RunStage.STRUCTURES_PREPARED
    assert all(size != 20 for size, _, _ in bench.history)


def test_every_structure_sees_same_queries(fake_clock: FakeClock) -> None:
    adapter = _KeepingAdapter([_RecordingScan, _RecordingDict])

    Benchmark([50], iterations=40, rng=5, clock=fake_clock, adapter=adapter,
              emit=lambda _: None).run()

    linear = adapter.last.view("linear").seen
    assert len(linear) == 40
    assert linear == adapter.last.view("dictionary").seen


def _recorded_queries(seed: int) -> list:
    adapter = _KeepingAdapter([_RecordingScan])
    Benchmark([30], iterations=10, rng=seed, clock=FakeClock(), adapter=adapter,
              emit=lambda _: None).run()
    return adapter.last.view("linear").seen


def test_same_seed_replays_same_queries() -> None:
    assert _recorded_queries(8) == _recorded_queries(8)
    assert _recorded_queries(8) != _recorded_queries(9)


def test_blocks_separated_by_blank_line_with_any_writer() -> None:
    out = io.StringIO()
    Benchmark([3, 4], iterations=2, rng=0, clock=FakeClock(), emit=out.write).run()

    text = out.getvalue()
    assert "dictionary: 250.0000ms\n\nData size: 4, Iterations: 2\n" in text
    assert text.endswith("ms\n\n")


def test_default_emitter_prints_blocks(capsys: pytest.CaptureFixture[str]) -> None:
    Benchmark([3], iterations=2, rng=0, clock=FakeClock()).run()
    assert capsys.readouterr().out == (
        "Data size: 3, Iterations: 2\n"
        "linear: 250.0000ms\n"
        "hashmap: 250.0000ms\n"
        "dictionary: 250.0000ms\n"
        "\n"
    )


def test_sizes_may_be_any_iterable(fake_clock: FakeClock) -> None:
    bench = Benchmark((n for n in [3, 4]), iterations=2, rng=0, clock=fake_clock,
                      emit=lambda _: None)
    assert [size for size, _ in bench.run()] == [3, 4]


@pytest.mark.parametrize(
    "sizes,iterations",
    [([], 10), ([10, -1], 10), ([10], 0), ([10], -5)],
)
def test_invalid_config_rejected_up_front(sizes: list, iterations: int) -> None:
    with pytest.raises(InvalidConfiguration):
        validate_config(sizes, iterations)
    with pytest.raises(InvalidConfiguration):
        Benchmark(sizes, iterations)
