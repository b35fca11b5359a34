import logging

import numpy as np
import pytest

from wavesim.model.wave_grid import WaveGrid


class SequenceRng:
    """Returns the given samples in order from random(); fails when exhausted."""

    def __init__(self, *samples: float) -> None:
        self.samples = list(samples)
        self.calls = 0

    def random(self) -> float:
        if not self.samples:
            raise AssertionError("Random source was asked for more samples than expected.")
        self.calls += 1
        return self.samples.pop(0)


@pytest.fixture
def sequence_rng():
    return SequenceRng


@pytest.fixture
def small_grid() -> WaveGrid:
    return WaveGrid(5, rng=np.random.default_rng(0))


@pytest.fixture
def clean_wavesim_logger():
    yield
    logger = logging.getLogger("wavesim")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
