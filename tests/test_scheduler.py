import numpy as np
import pytest

from wavesim.model.errors import InvalidArgumentError
from wavesim.model.scheduler import next_event_count


def test_whole_number_of_events_needs_no_coin_flip(sequence_rng):
    rng = sequence_rng()

    assert next_event_count(10.0, 30.0, rng) == 3
    assert rng.calls == 0


def test_zero_frame_gives_zero_events(sequence_rng):
    rng = sequence_rng()

    assert next_event_count(35.0, 0.0, rng) == 0
    assert rng.calls == 0


@pytest.mark.parametrize("sample, expected", [(0.0, 3), (0.25, 3), (0.2501, 2), (0.99, 2)])
def test_remainder_is_a_single_weighted_coin_flip(sequence_rng, sample, expected):
    rng = sequence_rng(sample)

    # 90 / 40 = 2.25
    assert next_event_count(40.0, 90.0, rng) == expected
    assert rng.calls == 1


def test_fewer_than_one_event_per_frame(sequence_rng):
    # 60 / 1000 = 0.06
    assert next_event_count(1000.0, 60.0, sequence_rng(0.05)) == 1
    assert next_event_count(1000.0, 60.0, sequence_rng(0.07)) == 0


def test_count_is_a_plain_int():
    count = next_event_count(35.0, 60.0, np.random.default_rng(0))
    assert type(count) is int
    assert count >= 0


@pytest.mark.parametrize("period", [0.0, -5.0])
def test_period_must_be_positive(period):
    with pytest.raises(InvalidArgumentError):
        next_event_count(period, 60.0, np.random.default_rng(0))


def test_frame_duration_must_not_be_negative():
    with pytest.raises(InvalidArgumentError):
        next_event_count(35.0, -1.0, np.random.default_rng(0))


@pytest.mark.parametrize("period, frame_dt", [
    (35.0, 60.0),     # 1.714...
    (1000.0, 60.0),   # 0.06
    (7.0, 50.0),      # 7.142...
    (3.0, 2.0),       # 0.666...
])
def test_long_run_mean_matches_expected_rate(period, frame_dt):
    rng = np.random.default_rng(2024)
    n = 100_000

    counts = [next_event_count(period, frame_dt, rng) for _ in range(n)]

    expected = frame_dt / period
    assert np.mean(counts) == pytest.approx(expected, abs=0.01)
    # Only the two integers around the expected value ever come out
    assert set(counts) <= {int(np.floor(expected)), int(np.floor(expected)) + 1}
